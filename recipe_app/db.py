"""Engine and session handling for the recipe store.

The engine is created lazily from ``settings.database_url`` so tests and
scripts can point the app at another database before first use.
"""

from __future__ import annotations

import contextlib

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from .settings import settings


class Base(DeclarativeBase):
    pass


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def init_engine(database_url: str | None = None, **engine_kwargs) -> Engine:
    global _engine, _session_factory
    url = database_url or settings.database_url
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        # Sessions are handed between the threadpool and the request handler
        engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
    _engine = create_engine(url, pool_pre_ping=True, **engine_kwargs)
    if is_sqlite:
        event.listen(_engine, "connect", _enable_sqlite_foreign_keys)
    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)
    return _engine


def get_engine() -> Engine:
    if _engine is None:
        init_engine()
    return _engine


def session_factory() -> sessionmaker[Session]:
    if _session_factory is None:
        init_engine()
    return _session_factory


@contextlib.contextmanager
def session_scope():
    """Session for work outside a request (startup, scripts)."""
    db = session_factory()()
    try:
        yield db
    finally:
        db.close()


def get_db():
    """FastAPI dependency: one session per request."""
    with session_scope() as db:
        yield db
