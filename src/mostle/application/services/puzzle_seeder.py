# src/mostle/application/services/puzzle_seeder.py
"""
Seed today's puzzle with sample data.

Seeding is idempotent: an existing puzzle for the day is left untouched.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

from mostle.application.services.daily_puzzle_provider import start_of_today
from mostle.domain.puzzle import DailyPuzzle

logger = logging.getLogger(__name__)


SAMPLE_PUZZLE: Dict[str, Any] = {
    "theme": "Tech Giants",
    "special_label": "Employees",
    "special_hint": "Company with the most employees",
    "objects": [
        {
            "name": "Apple",
            "oldest": 1976,
            "largest": 220,
            "value": 3000,
            "influence": 95,
            "special_value": 164000,
        },
        {
            "name": "Microsoft",
            "oldest": 1975,
            "largest": 230,
            "value": 2800,
            "influence": 92,
            "special_value": 221000,
        },
        {
            "name": "Google",
            "oldest": 1998,
            "largest": 180,
            "value": 1900,
            "influence": 98,
            "special_value": 190000,
        },
        {
            "name": "Amazon",
            "oldest": 1994,
            "largest": 200,
            "value": 1600,
            "influence": 90,
            "special_value": 1500000,
        },
        {
            "name": "Meta",
            "oldest": 2004,
            "largest": 120,
            "value": 900,
            "influence": 88,
            "special_value": 67000,
        },
    ],
}


class WritablePuzzleStore(Protocol):
    def get_by_date(self, day: date) -> Optional[DailyPuzzle]: ...

    def create_puzzle(
        self,
        *,
        day: date,
        theme: str,
        special_label: str,
        special_hint: str,
        objects: list,
    ) -> DailyPuzzle: ...


class PuzzleSeeder:
    def __init__(
        self,
        store: WritablePuzzleStore,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._store = store
        self._clock = clock

    def seed_today(self, payload: Optional[Dict[str, Any]] = None) -> Tuple[bool, DailyPuzzle]:
        """Create today's puzzle unless one exists. Returns (created, puzzle)."""
        day = start_of_today(self._clock()).date()
        existing = self._store.get_by_date(day)
        if existing is not None:
            logger.info("Seed skipped: puzzle for %s already exists", day.isoformat())
            return False, existing

        data = payload or SAMPLE_PUZZLE
        puzzle = self._store.create_puzzle(
            day=day,
            theme=data["theme"],
            special_label=data.get("special_label", ""),
            special_hint=data.get("special_hint", ""),
            objects=list(data["objects"]),
        )
        logger.info("Seeded puzzle %s for %s", puzzle.id, day.isoformat())
        return True, puzzle
