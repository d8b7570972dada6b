from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional

from mostle.application.ports.puzzle_store_port import PuzzleStorePort
from mostle.domain.errors import PuzzleNotFound
from mostle.domain.puzzle import DailyPuzzle

logger = logging.getLogger(__name__)


def start_of_today(now: Optional[datetime] = None) -> datetime:
    """Local midnight of the current day."""
    current = now or datetime.now()
    return current.replace(hour=0, minute=0, second=0, microsecond=0)


class DailyPuzzleProvider:
    """Resolve the puzzle for "today" (local midnight of the server clock)."""

    def __init__(
        self,
        store: PuzzleStorePort,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._store = store
        self._clock = clock

    def today(self) -> date:
        return start_of_today(self._clock()).date()

    def get_today(self) -> DailyPuzzle:
        day = self.today()
        puzzle = self._store.get_by_date(day)
        if puzzle is None:
            logger.warning("No daily puzzle for %s", day.isoformat())
            raise PuzzleNotFound(details={"date": day.isoformat()})
        return puzzle
