# src/mostle/presentation/board.py
"""
Assignment board: the client-side state machine of the puzzle page.

View state is one of:
    Loading -> Ready(puzzle, assignment, drag, score) | LoadError(message)

The score sub-state is one of:
    Idle -> Checking -> Done(result) | Error(message)

Any change to the assignment puts the score back to Idle. Late responses
arriving after `close()`, or for an assignment that has since changed, are
dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import List, Optional, Union

from mostle.application.ports.puzzle_client_port import PuzzleClientPort
from mostle.domain.assignment import POOL, Assignment, DropTarget
from mostle.domain.puzzle import DailyPuzzle, Metric, MetricKey, PuzzleObject, metrics_for_puzzle
from mostle.domain.score import ScoreResult

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"


# ---------------------------------------------------------------------------
# Score sub-state
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True, eq=False)
class Checking:
    assignment: Assignment


@dataclass(frozen=True)
class Done:
    result: ScoreResult


@dataclass(frozen=True)
class Error:
    message: str


ScoreState = Union[Idle, Checking, Done, Error]


# ---------------------------------------------------------------------------
# View state
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class LoadError:
    message: str


@dataclass(frozen=True)
class DragState:
    active_id: str


@dataclass(frozen=True)
class Ready:
    puzzle: DailyPuzzle
    assignment: Assignment = field(default_factory=Assignment.empty)
    drag: Optional[DragState] = None
    score: ScoreState = field(default_factory=Idle)


BoardState = Union[Loading, LoadError, Ready]


def _message_of(exc: BaseException) -> str:
    return str(exc) or UNKNOWN_ERROR


class AssignmentBoard:
    """Headless drag-and-drop board bound to a puzzle client."""

    def __init__(self, client: PuzzleClientPort):
        self._client = client
        self._state: BoardState = Loading()
        self._closed = False
        self._load_seq = 0

    @property
    def state(self) -> BoardState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Tear the board down; pending responses are ignored from now on."""
        self._closed = True

    # ------------------------------------------------------------------
    # Network transitions
    # ------------------------------------------------------------------

    async def load(self) -> BoardState:
        if self._closed:
            return self._state

        self._load_seq += 1
        seq = self._load_seq
        self._state = Loading()

        try:
            puzzle = await self._client.fetch_daily()
        except Exception as exc:
            next_state: BoardState = LoadError(_message_of(exc))
            logger.warning("Failed to load daily puzzle: %s", exc)
        else:
            next_state = Ready(puzzle=puzzle)

        if self._closed or seq != self._load_seq:
            logger.debug("Discarding stale load response")
            return self._state

        self._state = next_state
        return self._state

    def can_submit(self) -> bool:
        ready = self._ready()
        if ready is None:
            return False
        return ready.assignment.is_filled() and not isinstance(ready.score, Checking)

    async def submit(self) -> ScoreState | None:
        """Send the current assignment for scoring.

        Returns the new score state, or None when submitting is not enabled.
        """
        ready = self._ready()
        if self._closed or ready is None or not self.can_submit():
            return None

        checking = Checking(ready.assignment)
        self._state = replace(ready, score=checking)

        try:
            result = await self._client.check(checking.assignment)
        except Exception as exc:
            outcome: ScoreState = Error(_message_of(exc))
            logger.warning("Scoring request failed: %s", exc)
        else:
            outcome = Done(result)

        current = self._ready()
        if self._closed or current is None or current.score is not checking:
            logger.debug("Discarding stale scoring response")
            return None

        self._state = replace(current, score=outcome)
        return outcome

    # ------------------------------------------------------------------
    # Local transitions
    # ------------------------------------------------------------------

    def drag_start(self, object_id: str) -> None:
        ready = self._ready()
        if ready is None or ready.puzzle.find_object(object_id) is None:
            return
        self._state = replace(ready, drag=DragState(object_id))

    def drag_cancel(self) -> None:
        ready = self._ready()
        if ready is not None and ready.drag is not None:
            self._state = replace(ready, drag=None)

    def drop(self, object_id: str, target: Optional[DropTarget]) -> bool:
        """Drop `object_id` on a metric slot, on the pool, or nowhere (None).

        Returns True when the assignment changed state.
        """
        ready = self._ready()
        if ready is None:
            return False
        ready = replace(ready, drag=None)
        self._state = ready

        if target is None:
            return False
        if ready.puzzle.find_object(object_id) is None:
            raise ValueError(f"Unknown object: {object_id!r}")
        if target != POOL:
            target = MetricKey(target)

        assignment = ready.assignment.drop(object_id, target)
        if target == POOL and assignment == ready.assignment:
            return False

        self._state = replace(ready, assignment=assignment, score=Idle())
        return True

    def reset(self) -> None:
        ready = self._ready()
        if ready is None:
            return
        self._state = replace(ready, assignment=Assignment.empty(), drag=None, score=Idle())

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def metrics(self) -> List[Metric]:
        ready = self._ready()
        return metrics_for_puzzle(ready.puzzle) if ready else []

    def pool_objects(self) -> List[PuzzleObject]:
        ready = self._ready()
        if ready is None:
            return []
        used = ready.assignment.assigned_ids()
        return [o for o in ready.puzzle.objects if o.id not in used]

    def label_for(self, object_id: str) -> str:
        ready = self._ready()
        if ready is None:
            return ""
        obj = ready.puzzle.find_object(object_id)
        return obj.name if obj else ""

    def slot_of(self, object_id: str) -> Optional[MetricKey]:
        ready = self._ready()
        return ready.assignment.slot_of(object_id) if ready else None

    def is_filled(self) -> bool:
        ready = self._ready()
        return bool(ready and ready.assignment.is_filled())

    def mark_for(self, key: MetricKey) -> Optional[bool]:
        """Correctness marker of a slot, available once scoring is done."""
        ready = self._ready()
        if ready is None or not isinstance(ready.score, Done):
            return None
        return ready.score.result.is_correct(MetricKey(key))

    def _ready(self) -> Optional[Ready]:
        return self._state if isinstance(self._state, Ready) else None
