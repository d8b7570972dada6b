from __future__ import annotations

import datetime as dt
from typing import List, Optional

from sqlalchemy import Date, DateTime, Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class DailyPuzzleModel(Base):
    """One puzzle per calendar day."""

    __tablename__ = "daily_puzzles"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    date: Mapped[dt.date] = mapped_column(Date, unique=True, index=True)

    theme: Mapped[str] = mapped_column(String(256), default="")
    special_label: Mapped[str] = mapped_column(String(128), default="")
    special_hint: Mapped[str] = mapped_column(String(512), default="")

    created_at: Mapped[Optional[dt.datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    objects: Mapped[List["PuzzleObjectModel"]] = relationship(
        "PuzzleObjectModel",
        back_populates="puzzle",
        cascade="all, delete-orphan",
        order_by="PuzzleObjectModel.position",
    )


class PuzzleObjectModel(Base):
    __tablename__ = "puzzle_objects"
    __table_args__ = (
        UniqueConstraint("puzzle_id", "position", name="uq_puzzle_objects_position"),
        UniqueConstraint("puzzle_id", "id", name="uq_puzzle_objects_object_id"),
    )

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Object ids are only unique within their puzzle.
    id: Mapped[str] = mapped_column(String(64))
    puzzle_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("daily_puzzles.id", ondelete="CASCADE"), index=True
    )
    # Puzzle order; scoring ties go to the lowest position.
    position: Mapped[int] = mapped_column(Integer, default=0)

    name: Mapped[str] = mapped_column(String(256), default="")
    oldest: Mapped[float] = mapped_column(Float, default=0.0)
    largest: Mapped[float] = mapped_column(Float, default=0.0)
    value: Mapped[float] = mapped_column(Float, default=0.0)
    influence: Mapped[float] = mapped_column(Float, default=0.0)
    special_value: Mapped[float] = mapped_column(Float, default=0.0)

    puzzle = relationship("DailyPuzzleModel", back_populates="objects")
