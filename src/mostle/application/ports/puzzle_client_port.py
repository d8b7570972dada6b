"""PuzzleClientPort: what the assignment board needs from the server."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from mostle.domain.assignment import Assignment
from mostle.domain.puzzle import DailyPuzzle
from mostle.domain.score import ScoreResult


@runtime_checkable
class PuzzleClientPort(Protocol):
    """Async access to the daily and check endpoints.

    Implementations raise `TransportFailure` for network errors and non-2xx
    responses.
    """

    async def fetch_daily(self) -> DailyPuzzle: ...

    async def check(self, assignment: Assignment) -> ScoreResult: ...
