"""daily puzzles

Revision ID: 0001_daily_puzzles
Revises:
Create Date: 2026-10-17

Adds daily_puzzles (one row per date) and puzzle_objects (five per puzzle).
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import context, op


revision = "0001_daily_puzzles"
down_revision = None
branch_labels = None
depends_on = None


def _is_offline() -> bool:
    try:
        return bool(context.is_offline_mode())
    except Exception:
        return False


def _has_table(name: str) -> bool:
    return sa.inspect(op.get_bind()).has_table(name)


def upgrade() -> None:
    if _is_offline() or not _has_table("daily_puzzles"):
        op.create_table(
            "daily_puzzles",
            sa.Column("id", sa.String(length=64), primary_key=True),
            sa.Column("date", sa.Date(), nullable=False),
            sa.Column("theme", sa.String(length=256), server_default="", nullable=False),
            sa.Column("special_label", sa.String(length=128), server_default="", nullable=False),
            sa.Column("special_hint", sa.String(length=512), server_default="", nullable=False),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        )
        op.create_index("ix_daily_puzzles_date", "daily_puzzles", ["date"], unique=True)

    if _is_offline() or not _has_table("puzzle_objects"):
        op.create_table(
            "puzzle_objects",
            sa.Column("pk", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("id", sa.String(length=64), nullable=False),
            sa.Column(
                "puzzle_id",
                sa.String(length=64),
                sa.ForeignKey("daily_puzzles.id", ondelete="CASCADE"),
                nullable=False,
            ),
            sa.Column("position", sa.Integer(), server_default="0", nullable=False),
            sa.Column("name", sa.String(length=256), server_default="", nullable=False),
            sa.Column("oldest", sa.Float(), server_default="0", nullable=False),
            sa.Column("largest", sa.Float(), server_default="0", nullable=False),
            sa.Column("value", sa.Float(), server_default="0", nullable=False),
            sa.Column("influence", sa.Float(), server_default="0", nullable=False),
            sa.Column("special_value", sa.Float(), server_default="0", nullable=False),
            sa.UniqueConstraint("puzzle_id", "position", name="uq_puzzle_objects_position"),
            sa.UniqueConstraint("puzzle_id", "id", name="uq_puzzle_objects_object_id"),
        )
        op.create_index("ix_puzzle_objects_puzzle_id", "puzzle_objects", ["puzzle_id"])


def downgrade() -> None:
    op.drop_table("puzzle_objects")
    op.drop_table("daily_puzzles")
