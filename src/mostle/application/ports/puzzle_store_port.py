"""PuzzleStorePort: date-keyed daily puzzle lookup."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, runtime_checkable

from mostle.domain.puzzle import DailyPuzzle


@runtime_checkable
class PuzzleStorePort(Protocol):
    """Read access to the daily puzzle records."""

    def get_by_date(self, day: date) -> Optional[DailyPuzzle]: ...
