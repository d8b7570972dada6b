# src/mostle/domain/assignment.py
"""
Assignment of puzzle objects to metric slots.

An Assignment is a fixed five-slot table. Every transition returns a new
Assignment and keeps each object id in at most one slot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Optional, Tuple, Union

from mostle.domain.puzzle import METRIC_KEYS, MetricKey

POOL = "pool"

DropTarget = Union[MetricKey, str]


@dataclass(frozen=True)
class Assignment:
    oldest: Optional[str] = None
    largest: Optional[str] = None
    value: Optional[str] = None
    influence: Optional[str] = None
    special_value: Optional[str] = None

    @classmethod
    def empty(cls) -> "Assignment":
        return cls()

    @classmethod
    def from_mapping(cls, mapping: Mapping[MetricKey, Optional[str]]) -> "Assignment":
        return cls(**{_FIELD_BY_KEY[MetricKey(k)]: v for k, v in mapping.items()})

    def get(self, key: MetricKey) -> Optional[str]:
        return getattr(self, _FIELD_BY_KEY[key])

    def with_slot(self, key: MetricKey, object_id: Optional[str]) -> "Assignment":
        data = self.as_dict()
        data[key] = object_id
        return Assignment.from_mapping(data)

    def items(self) -> Iterator[Tuple[MetricKey, Optional[str]]]:
        for key in METRIC_KEYS:
            yield key, self.get(key)

    def as_dict(self) -> Dict[MetricKey, Optional[str]]:
        return dict(self.items())

    def to_payload(self) -> Dict[str, Optional[str]]:
        """Wire form: {"oldest": "...", ..., "specialValue": null}."""
        return {key.value: object_id for key, object_id in self.items()}

    def slot_of(self, object_id: str) -> Optional[MetricKey]:
        for key, assigned in self.items():
            if assigned == object_id:
                return key
        return None

    def assigned_ids(self) -> set[str]:
        return {object_id for _, object_id in self.items() if object_id}

    def is_filled(self) -> bool:
        return all(object_id for _, object_id in self.items())

    def drop(self, object_id: str, target: DropTarget) -> "Assignment":
        """Apply a drop of `object_id` onto a slot or the pool."""
        from_slot = self.slot_of(object_id)

        if target == POOL:
            if from_slot is None:
                return self
            return self.with_slot(from_slot, None)

        slot = MetricKey(target)
        data = self.as_dict()
        if from_slot is not None:
            data[from_slot] = None

        displaced = data[slot]
        data[slot] = object_id

        # Swap back into the vacated slot; from the pool the displaced object is unassigned.
        if displaced and from_slot is not None:
            data[from_slot] = displaced

        return Assignment.from_mapping(data)


_FIELD_BY_KEY: Dict[MetricKey, str] = {
    MetricKey.OLDEST: "oldest",
    MetricKey.LARGEST: "largest",
    MetricKey.VALUE: "value",
    MetricKey.INFLUENCE: "influence",
    MetricKey.SPECIAL_VALUE: "special_value",
}
