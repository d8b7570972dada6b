from __future__ import annotations

from datetime import datetime
from pathlib import Path

from mostle.application.services.puzzle_seeder import PuzzleSeeder
from mostle.infrastructure.stores.puzzle_store import PuzzleStore


def _clock():
    return datetime(2026, 10, 17, 14, 0)


def test_seed_creates_sample_puzzle_once(tmp_path: Path):
    store = PuzzleStore(db_url=f"sqlite:///{tmp_path / 'seed.db'}")
    seeder = PuzzleSeeder(store, clock=_clock)

    created, puzzle = seeder.seed_today()
    assert created is True
    assert puzzle.theme == "Tech Giants"
    assert puzzle.date.isoformat() == "2026-10-17"

    created_again, existing = seeder.seed_today()
    assert created_again is False
    assert existing.id == puzzle.id


def test_seed_with_custom_payload(tmp_path: Path):
    store = PuzzleStore(db_url=f"sqlite:///{tmp_path / 'seed-custom.db'}")
    payload = {
        "theme": "Rivers",
        "objects": [
            {"name": n, "oldest": 1, "largest": i, "value": 1, "influence": 1, "special_value": 1}
            for i, n in enumerate(["Nile", "Amazon", "Yangtze", "Mississippi", "Danube"])
        ],
    }
    created, puzzle = PuzzleSeeder(store, clock=_clock).seed_today(payload)

    assert created is True
    assert puzzle.theme == "Rivers"
    assert puzzle.special_label == ""
    assert [o.name for o in puzzle.objects][0] == "Nile"
