"""Database port for the SQLAlchemy entries backend.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide a
concrete adapter that satisfies this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine holding the entries table."""

    def get_entries_engine(self) -> Engine:
        """Get the engine for the entries database.

        Returns:
            Engine: SQLAlchemy engine connected to the entries database.
        """


__all__ = ["DatabaseEnginePort"]
