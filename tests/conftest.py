# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds src/ to sys.path so `import mostle` works without an install.
"""

import os
import sys
import tempfile
from datetime import date
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
src_root = project_root / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

# The API module builds its store at import time; keep it away from data/ and logs/.
_tmp_root = Path(tempfile.mkdtemp(prefix="mostle-tests-"))
os.environ.setdefault("MOSTLE_DB_URL", f"sqlite:///{_tmp_root / 'default.db'}")
os.environ.setdefault("MOSTLE_LOG_DIR", str(_tmp_root / "logs"))

from mostle.domain.puzzle import DailyPuzzle, PuzzleObject  # noqa: E402

TODAY = date(2026, 10, 17)


def make_puzzle(day: date = TODAY) -> DailyPuzzle:
    """Tech Giants sample with fixed ids o1..o5."""
    rows = [
        ("o1", "Apple", 1976, 220, 3000, 95, 164000),
        ("o2", "Microsoft", 1975, 230, 2800, 92, 221000),
        ("o3", "Google", 1998, 180, 1900, 98, 190000),
        ("o4", "Amazon", 1994, 200, 1600, 90, 1500000),
        ("o5", "Meta", 2004, 120, 900, 88, 67000),
    ]
    return DailyPuzzle(
        id="puzzle-1",
        date=day,
        theme="Tech Giants",
        special_label="Employees",
        special_hint="Company with the most employees",
        objects=tuple(
            PuzzleObject(
                id=oid,
                name=name,
                oldest=oldest,
                largest=largest,
                value=value,
                influence=influence,
                special_value=special,
            )
            for oid, name, oldest, largest, value, influence, special in rows
        ),
    )


@pytest.fixture()
def puzzle() -> DailyPuzzle:
    return make_puzzle()
