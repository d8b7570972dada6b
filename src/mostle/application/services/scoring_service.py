# src/mostle/application/services/scoring_service.py
"""
Scoring service.

Compares a submitted assignment against the per-metric maximum of the day's
objects. When several objects share the maximum, the first one in puzzle
order is the winner.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional

from mostle.domain.assignment import Assignment
from mostle.domain.errors import InvalidAssignment
from mostle.domain.puzzle import METRIC_KEYS, DailyPuzzle, MetricKey, PuzzleObject
from mostle.domain.score import KeyResult, ScoreResult

logger = logging.getLogger(__name__)


def winner_for(objects: List[PuzzleObject], key: MetricKey) -> PuzzleObject:
    """Object with the maximum attribute for `key`; first in order on ties.

    Every metric, "oldest" included, is won by its largest value.
    """
    best = objects[0]
    for obj in objects[1:]:
        # Strictly greater keeps the earlier object on ties.
        if obj.metric(key) > best.metric(key):
            best = obj
    return best


class ScoringService:
    """Score assignments against a daily puzzle."""

    def answer_key(self, puzzle: DailyPuzzle) -> Dict[MetricKey, str]:
        objects = list(puzzle.objects)
        if not objects:
            raise InvalidAssignment("Puzzle has no objects")
        return {key: winner_for(objects, key).id for key in METRIC_KEYS}

    def score(
        self,
        puzzle: DailyPuzzle,
        assignment: Assignment | Mapping[str, Optional[str]],
    ) -> ScoreResult:
        submitted = self._normalize(puzzle, assignment)
        answers = self.answer_key(puzzle)

        result = [KeyResult(key, submitted[key] == answers[key]) for key in METRIC_KEYS]
        all_correct = all(r.is_correct for r in result)
        logger.info(
            "Scored puzzle %s: %d/%d correct",
            puzzle.id,
            sum(1 for r in result if r.is_correct),
            len(result),
        )
        return ScoreResult(all_correct=all_correct, result=result)

    @staticmethod
    def _normalize(
        puzzle: DailyPuzzle,
        assignment: Assignment | Mapping[str, Optional[str]],
    ) -> Dict[MetricKey, str]:
        if isinstance(assignment, Assignment):
            raw: Dict[str, Optional[str]] = assignment.to_payload()
        else:
            raw = {str(getattr(k, "value", k)): v for k, v in dict(assignment).items()}

        known = {key.value for key in METRIC_KEYS}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise InvalidAssignment(
                f"Unknown metric keys: {', '.join(unknown)}", details={"keys": unknown}
            )

        missing = [key.value for key in METRIC_KEYS if not raw.get(key.value)]
        if missing:
            raise InvalidAssignment(
                f"Missing assignment for: {', '.join(missing)}", details={"keys": missing}
            )

        valid_ids = set(puzzle.object_ids())
        normalized: Dict[MetricKey, str] = {}
        seen: Dict[str, MetricKey] = {}
        for key in METRIC_KEYS:
            object_id = str(raw[key.value])
            if object_id not in valid_ids:
                raise InvalidAssignment(
                    f"Object {object_id!r} is not part of today's puzzle",
                    details={"key": key.value, "object_id": object_id},
                )
            if object_id in seen:
                raise InvalidAssignment(
                    f"Object {object_id!r} is assigned to both "
                    f"{seen[object_id].value} and {key.value}",
                    details={"object_id": object_id},
                )
            seen[object_id] = key
            normalized[key] = object_id
        return normalized
