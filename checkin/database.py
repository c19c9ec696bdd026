from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine


def _is_sqlite(database_url: str) -> bool:
    return database_url.startswith("sqlite")


def _is_sqlite_memory(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:")


def _ensure_sqlite_dir(database_url: str) -> None:
    """
    Ensure the parent folder exists for SQLite file-based DB URLs like:
      sqlite:///./data/checkin.sqlite
      sqlite:////absolute/path/to/db.sqlite
    """
    if not database_url.startswith("sqlite:///") or _is_sqlite_memory(database_url):
        return

    path = database_url.replace("sqlite:///", "", 1)
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)


def _sqlite_pragmas(engine: Engine) -> None:
    """
    Pragmas that make SQLite usable for concurrent front-desk requests.
    """

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragmas(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL;")
        cursor.execute("PRAGMA synchronous=NORMAL;")
        cursor.execute("PRAGMA busy_timeout=5000;")  # reduce 'database is locked'
        cursor.close()


def get_engine(database_url: str, *, echo: bool = False) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL.

    - SQLite gets pragmas + check_same_thread=False for FastAPI
    - "sqlite://" (in-memory) shares one connection so every session sees the same tables
    - any other SQLAlchemy URL (e.g. Postgres) is passed through as-is
    """
    if not _is_sqlite(database_url):
        return create_engine(database_url, echo=echo, pool_pre_ping=True)

    _ensure_sqlite_dir(database_url)

    if _is_sqlite_memory(database_url):
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            pool_pre_ping=True,
        )

    _sqlite_pragmas(engine)
    return engine


def register_models() -> None:
    """
    Import all table models so SQLModel registers them before create_all.
    """
    from .models.volunteer import Volunteer  # noqa: F401
    from .models.guest import Guest  # noqa: F401
    from .models.staff import Staff  # noqa: F401


def init_db(engine: Engine, create_tables: bool = True) -> None:
    """
    Register models, then create missing tables.
    Non-destructive: create_all will not drop or alter existing tables.
    """
    register_models()
    if create_tables:
        SQLModel.metadata.create_all(engine)


@contextmanager
def session_scope(engine: Engine) -> Generator[Session, None, None]:
    """
    Context manager with commit/rollback safety.

    Objects stay readable after the block exits (expire_on_commit=False),
    so callers can hand them straight back to the API layer.
    """
    session = Session(engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
