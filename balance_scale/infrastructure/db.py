"""Database infrastructure for the SQLAlchemy entries backend.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine holding the entries table.
"""

from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from balance_scale.application.ports.database import DatabaseEnginePort
from balance_scale.infrastructure.settings import TrackerSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    SQLite URLs keep the dialect's default pool; server databases get a
    small QueuePool with health checks.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    if db_url.startswith("sqlite"):
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


def _ensure_sqlite_directory(db_url: str) -> None:
    """Create the parent directory of a SQLite database file."""
    if not db_url.startswith("sqlite:///"):
        return
    database = db_url.removeprefix("sqlite:///")
    if database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)


_entries_engines: dict[str, Engine] = {}


def get_entries_engine(db_url: str | None = None) -> Engine:
    """Get the cached SQLAlchemy engine for an entries database URL.

    Args:
        db_url: Optional URL, defaults to BALANCE_SCALE_DB_URL.

    Returns:
        Engine: Lazily initialized engine, one per URL.
    """
    url = db_url or TrackerSettings.from_env().db_url
    if url not in _entries_engines:
        _ensure_sqlite_directory(url)
        _entries_engines[url] = _create_engine(url)
    return _entries_engines[url]


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so the storage adapter depends only on the protocol.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url

    def get_entries_engine(self) -> Engine:
        """Get the engine for the entries database.

        Returns:
            Engine: SQLAlchemy engine connected to the entries database.
        """
        return get_entries_engine(self._db_url)


__all__ = ["get_entries_engine", "SqlAlchemyDatabaseEngineAdapter"]
