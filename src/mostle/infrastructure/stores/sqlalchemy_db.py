from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

DEFAULT_DB_URL = "sqlite:///data/mostle.db"


def get_db_url() -> str:
    return os.getenv("MOSTLE_DB_URL", DEFAULT_DB_URL)


def _ensure_sqlite_dir(db_url: str) -> None:
    if not db_url.startswith("sqlite:///"):
        return
    path = db_url[len("sqlite:///"):]
    if not path or path == ":memory:":
        return
    Path(path).parent.mkdir(parents=True, exist_ok=True)


class SessionProvider:
    """Owns the engine and hands out short-lived sessions."""

    def __init__(self, db_url: Optional[str] = None, *, echo: bool = False):
        self.db_url = db_url or get_db_url()
        _ensure_sqlite_dir(self.db_url)
        connect_args = {"check_same_thread": False} if self.db_url.startswith("sqlite") else {}
        self.engine: Engine = create_engine(
            self.db_url, echo=echo, future=True, connect_args=connect_args
        )
        self._factory = sessionmaker(bind=self.engine, expire_on_commit=False, future=True)

    @contextmanager
    def session(self) -> Iterator[Session]:
        session = self._factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
