from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from mostle.domain.puzzle import OBJECTS_PER_PUZZLE, DailyPuzzle, PuzzleObject
from mostle.infrastructure.stores.models import Base, DailyPuzzleModel, PuzzleObjectModel
from mostle.infrastructure.stores.sqlalchemy_db import SessionProvider, get_db_url

_METRIC_FIELDS = ("oldest", "largest", "value", "influence", "special_value")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PuzzleStore:
    """Daily puzzle records, one per calendar date."""

    def __init__(self, db_url: Optional[str] = None, *, auto_create_schema: bool = True):
        self.db_url = db_url or get_db_url()
        self._provider = SessionProvider(self.db_url)
        if auto_create_schema:
            Base.metadata.create_all(self._provider.engine)

    def get_by_date(self, day: date) -> Optional[DailyPuzzle]:
        with self._provider.session() as session:
            row = session.execute(
                select(DailyPuzzleModel)
                .options(selectinload(DailyPuzzleModel.objects))
                .where(DailyPuzzleModel.date == day)
            ).scalar_one_or_none()
            if row is None:
                return None
            return self._row_to_puzzle(row)

    def has_puzzle(self, day: date) -> bool:
        with self._provider.session() as session:
            row_id = session.execute(
                select(DailyPuzzleModel.id).where(DailyPuzzleModel.date == day)
            ).scalar_one_or_none()
            return row_id is not None

    def create_puzzle(
        self,
        *,
        day: date,
        theme: str,
        special_label: str = "",
        special_hint: str = "",
        objects: List[Mapping[str, Any]],
    ) -> DailyPuzzle:
        if len(objects) != OBJECTS_PER_PUZZLE:
            raise ValueError(
                f"A daily puzzle needs exactly {OBJECTS_PER_PUZZLE} objects, got {len(objects)}"
            )
        if self.has_puzzle(day):
            raise ValueError(f"A puzzle for {day.isoformat()} already exists")

        object_rows = [self._object_row(raw, position) for position, raw in enumerate(objects)]
        seen: set[str] = set()
        for obj in object_rows:
            if obj.id in seen:
                raise ValueError(f"Object id {obj.id!r} appears more than once")
            seen.add(obj.id)

        with self._provider.session() as session:
            row = DailyPuzzleModel(
                id=uuid4().hex,
                date=day,
                theme=(theme or "").strip(),
                special_label=(special_label or "").strip(),
                special_hint=(special_hint or "").strip(),
                created_at=_utcnow(),
            )
            row.objects.extend(object_rows)
            session.add(row)
            session.commit()
            logger.info(f"Created daily puzzle {row.id} for {day.isoformat()} ({row.theme})")
            return self._row_to_puzzle(row)

    def delete_puzzle(self, day: date) -> bool:
        with self._provider.session() as session:
            row = session.execute(
                select(DailyPuzzleModel).where(DailyPuzzleModel.date == day)
            ).scalar_one_or_none()
            if row is None:
                return False
            session.delete(row)
            session.commit()
            logger.info(f"Deleted daily puzzle for {day.isoformat()}")
            return True

    @staticmethod
    def _object_row(raw: Mapping[str, Any], position: int) -> PuzzleObjectModel:
        name = str(raw.get("name") or "").strip()
        if not name:
            raise ValueError(f"Object at position {position} has no name")

        values: Dict[str, float] = {}
        for field_name in _METRIC_FIELDS:
            # Accept the wire spelling ("specialValue") as well.
            camel = "specialValue" if field_name == "special_value" else field_name
            raw_value = raw.get(field_name, raw.get(camel))
            if raw_value is None:
                raise ValueError(f"Object {name!r} is missing {field_name}")
            values[field_name] = float(raw_value)

        return PuzzleObjectModel(
            id=str(raw.get("id") or uuid4().hex),
            position=position,
            name=name,
            **values,
        )

    @staticmethod
    def _row_to_puzzle(row: DailyPuzzleModel) -> DailyPuzzle:
        return DailyPuzzle(
            id=row.id,
            date=row.date,
            theme=row.theme or "",
            special_label=row.special_label or "",
            special_hint=row.special_hint or "",
            objects=tuple(
                PuzzleObject(
                    id=o.id,
                    name=o.name,
                    oldest=o.oldest,
                    largest=o.largest,
                    value=o.value,
                    influence=o.influence,
                    special_value=o.special_value,
                )
                for o in sorted(row.objects, key=lambda o: o.position)
            ),
        )
