# src/mostle/domain/puzzle.py
"""
Daily puzzle domain models.

- MetricKey: the five comparison axes, fixed for every puzzle
- Metric: display label/hint of a metric slot
- PuzzleObject: one of the five objects to be ranked
- DailyPuzzle: the puzzle of one calendar day
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Tuple

OBJECTS_PER_PUZZLE = 5


class MetricKey(str, Enum):
    """Metric slot identifiers, in display order."""

    OLDEST = "oldest"
    LARGEST = "largest"
    VALUE = "value"
    INFLUENCE = "influence"
    SPECIAL_VALUE = "specialValue"


METRIC_KEYS: Tuple[MetricKey, ...] = tuple(MetricKey)


@dataclass(frozen=True)
class Metric:
    key: MetricKey
    label: str
    hint: str


BASE_METRICS: Tuple[Metric, ...] = (
    Metric(MetricKey.OLDEST, "Oldest", "Earliest year / origin"),
    Metric(MetricKey.LARGEST, "Largest", "Biggest scale"),
    Metric(MetricKey.VALUE, "Most valuable", "Highest worth"),
    Metric(MetricKey.INFLUENCE, "Most influential", "Widest impact"),
)

DEFAULT_SPECIAL_LABEL = "Special"
DEFAULT_SPECIAL_HINT = "Daily special metric"


@dataclass(frozen=True)
class PuzzleObject:
    """Immutable object of a daily puzzle."""

    id: str
    name: str
    oldest: float
    largest: float
    value: float
    influence: float
    special_value: float

    def metric(self, key: MetricKey) -> float:
        return {
            MetricKey.OLDEST: self.oldest,
            MetricKey.LARGEST: self.largest,
            MetricKey.VALUE: self.value,
            MetricKey.INFLUENCE: self.influence,
            MetricKey.SPECIAL_VALUE: self.special_value,
        }[key]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "oldest": self.oldest,
            "largest": self.largest,
            "value": self.value,
            "influence": self.influence,
            "specialValue": self.special_value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PuzzleObject":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            oldest=data["oldest"],
            largest=data["largest"],
            value=data["value"],
            influence=data["influence"],
            special_value=data["specialValue"],
        )


@dataclass(frozen=True)
class DailyPuzzle:
    """
    The puzzle for one calendar day.

    `objects` keeps puzzle order; scoring ties are resolved by it.
    """

    id: str
    date: date
    theme: str
    special_label: str = ""
    special_hint: str = ""
    objects: Tuple[PuzzleObject, ...] = field(default_factory=tuple)

    def object_ids(self) -> List[str]:
        return [o.id for o in self.objects]

    def find_object(self, object_id: str) -> PuzzleObject | None:
        for obj in self.objects:
            if obj.id == object_id:
                return obj
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "theme": self.theme,
            "specialLabel": self.special_label,
            "specialHint": self.special_hint,
            "objects": [o.to_dict() for o in self.objects],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyPuzzle":
        raw_date = str(data["date"])
        return cls(
            id=str(data["id"]),
            # Accept both "2026-10-17" and full ISO datetimes.
            date=date.fromisoformat(raw_date[:10]),
            theme=str(data.get("theme") or ""),
            special_label=str(data.get("specialLabel") or ""),
            special_hint=str(data.get("specialHint") or ""),
            objects=tuple(PuzzleObject.from_dict(o) for o in data.get("objects") or []),
        )


def metrics_for_puzzle(puzzle: DailyPuzzle) -> List[Metric]:
    """Return the five metric slots for a puzzle, special metric last."""
    return [
        *BASE_METRICS,
        Metric(
            MetricKey.SPECIAL_VALUE,
            puzzle.special_label or DEFAULT_SPECIAL_LABEL,
            puzzle.special_hint or DEFAULT_SPECIAL_HINT,
        ),
    ]
