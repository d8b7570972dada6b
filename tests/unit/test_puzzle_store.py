from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from mostle.application.services.puzzle_seeder import SAMPLE_PUZZLE
from mostle.infrastructure.stores.puzzle_store import PuzzleStore

DAY = date(2026, 10, 17)


@pytest.fixture()
def store(tmp_path: Path) -> PuzzleStore:
    return PuzzleStore(db_url=f"sqlite:///{tmp_path / 'puzzles.db'}")


def _create(store: PuzzleStore, day: date = DAY):
    return store.create_puzzle(
        day=day,
        theme=SAMPLE_PUZZLE["theme"],
        special_label=SAMPLE_PUZZLE["special_label"],
        special_hint=SAMPLE_PUZZLE["special_hint"],
        objects=SAMPLE_PUZZLE["objects"],
    )


class TestPuzzleStore:
    def test_get_by_date_missing_returns_none(self, store: PuzzleStore):
        assert store.get_by_date(DAY) is None
        assert store.has_puzzle(DAY) is False

    def test_create_and_fetch_round_trip(self, store: PuzzleStore):
        created = _create(store)
        fetched = store.get_by_date(DAY)

        assert fetched == created
        assert fetched.theme == "Tech Giants"
        assert fetched.special_label == "Employees"
        assert [o.name for o in fetched.objects] == [
            "Apple",
            "Microsoft",
            "Google",
            "Amazon",
            "Meta",
        ]
        assert fetched.objects[3].special_value == 1500000
        assert len(set(fetched.object_ids())) == 5

    def test_lookup_is_by_exact_date(self, store: PuzzleStore):
        _create(store)
        assert store.get_by_date(date(2026, 10, 16)) is None
        assert store.get_by_date(date(2026, 10, 18)) is None

    def test_one_puzzle_per_date(self, store: PuzzleStore):
        _create(store)
        with pytest.raises(ValueError):
            _create(store)

    def test_requires_exactly_five_objects(self, store: PuzzleStore):
        with pytest.raises(ValueError):
            store.create_puzzle(day=DAY, theme="Short", objects=SAMPLE_PUZZLE["objects"][:4])
        assert store.has_puzzle(DAY) is False

    def test_rejects_object_missing_metric(self, store: PuzzleStore):
        objects = [dict(o) for o in SAMPLE_PUZZLE["objects"]]
        objects[2].pop("influence")
        with pytest.raises(ValueError):
            store.create_puzzle(day=DAY, theme="Broken", objects=objects)

    def test_accepts_wire_spelling_for_special_value(self, store: PuzzleStore):
        objects = []
        for o in SAMPLE_PUZZLE["objects"]:
            row = dict(o)
            row["specialValue"] = row.pop("special_value")
            objects.append(row)
        puzzle = store.create_puzzle(day=DAY, theme="Wire", objects=objects)
        assert puzzle.objects[0].special_value == 164000

    def test_object_ids_can_repeat_on_other_days(self, store: PuzzleStore):
        objects = [dict(o, id=f"o{i}") for i, o in enumerate(SAMPLE_PUZZLE["objects"], start=1)]
        store.create_puzzle(day=DAY, theme="First", objects=objects)
        store.create_puzzle(day=date(2026, 10, 18), theme="Second", objects=objects)

        assert store.get_by_date(DAY).object_ids() == ["o1", "o2", "o3", "o4", "o5"]
        assert store.get_by_date(date(2026, 10, 18)).theme == "Second"

    def test_rejects_repeated_object_id_within_puzzle(self, store: PuzzleStore):
        objects = [dict(o, id=f"o{i}") for i, o in enumerate(SAMPLE_PUZZLE["objects"], start=1)]
        objects[4]["id"] = "o1"
        with pytest.raises(ValueError):
            store.create_puzzle(day=DAY, theme="Twice", objects=objects)
        assert store.has_puzzle(DAY) is False

    def test_delete_puzzle(self, store: PuzzleStore):
        _create(store)
        assert store.delete_puzzle(DAY) is True
        assert store.get_by_date(DAY) is None
        assert store.delete_puzzle(DAY) is False
