"""SQLAlchemy engine + session factory for the sql card backend.

Unlike a session-per-request setup, each card operation opens its own short
transaction: a write is committed before the response is built, so a
storage failure is reported to the caller instead of surfacing at teardown.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from bingo_board.models.base import Base


def create_app_engine(database_url: str, timeout: float = 5.0) -> Engine:
    """Create an engine with backend-appropriate connect timeouts."""

    url = make_url(database_url)
    kwargs: dict[str, Any] = {"pool_pre_ping": True}

    if url.get_backend_name() == "sqlite":
        # sqlite waits on its file lock rather than on a network connect.
        kwargs["connect_args"] = {"timeout": timeout, "check_same_thread": False}
    else:
        kwargs["pool_timeout"] = timeout
        if url.get_backend_name() == "postgresql":
            kwargs["connect_args"] = {"connect_timeout": max(1, int(timeout))}

    return create_engine(url, **kwargs)


def create_session_factory(engine: Engine, *, create_tables: bool = True) -> sessionmaker[Session]:
    """Build the session factory, creating the card table when asked.

    Production would use migrations; ``create_all`` is idempotent.
    """

    if create_tables:
        Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
