"""Scoring result value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from mostle.domain.puzzle import MetricKey


@dataclass(frozen=True)
class KeyResult:
    key: MetricKey
    is_correct: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key.value, "isCorrect": self.is_correct}


@dataclass(frozen=True)
class ScoreResult:
    """Per-metric correctness of one submission. Never persisted."""

    all_correct: bool
    result: List[KeyResult]

    def is_correct(self, key: MetricKey) -> Optional[bool]:
        for item in self.result:
            if item.key == key:
                return item.is_correct
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "allCorrect": self.all_correct,
            "result": [r.to_dict() for r in self.result],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoreResult":
        return cls(
            all_correct=bool(data["allCorrect"]),
            result=[
                KeyResult(MetricKey(item["key"]), bool(item["isCorrect"]))
                for item in data.get("result") or []
            ],
        )
