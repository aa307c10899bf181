"""SQLAlchemy-backed storage for the entry collection.

The collection lives in a single ``finance_entries`` table. Writes replace
every row inside one transaction, so a failed write rolls back to the
previously stored collection.
"""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from balance_scale.application.ports.database import DatabaseEnginePort
from balance_scale.application.ports.entries_storage import EntriesStoragePort
from balance_scale.domain.errors import PersistenceError
from balance_scale.domain.models.entries import EntryCollection
from balance_scale.infrastructure.entries_codec import (
    collection_from_records,
    collection_to_records,
)
from balance_scale.infrastructure.logging.logger import get_app_logger


CREATE_ENTRIES_SQL = """
CREATE TABLE IF NOT EXISTS finance_entries (
    position INTEGER NOT NULL,
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    amount TEXT NOT NULL,
    is_income INTEGER NOT NULL,
    date TEXT NOT NULL
)
"""

SELECT_ENTRIES_SQL = text(
    """
    SELECT id, name, amount, is_income, date
    FROM finance_entries
    ORDER BY position
    """
)

DELETE_ENTRIES_SQL = "DELETE FROM finance_entries"

INSERT_ENTRY_SQL = text(
    """
    INSERT INTO finance_entries (
        position,
        id,
        name,
        amount,
        is_income,
        date
    )
    VALUES (
        :position,
        :id,
        :name,
        :amount,
        :is_income,
        :date
    )
    """
)


class SqlAlchemyEntriesStorage(EntriesStoragePort):
    """Storage backed by SQLAlchemy for the entry collection."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the storage.

        Args:
            db_port: Port providing access to the entries engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._table_ready = False

    def read(self) -> EntryCollection | None:
        """Return the stored collection, None when the table is empty."""
        try:
            engine = self._db_port.get_entries_engine()
            self._ensure_table(engine)
            with engine.connect() as conn:
                rows = conn.execute(SELECT_ENTRIES_SQL).all()
        except (SQLAlchemyError, OSError) as exc:
            raise PersistenceError(
                f"Cannot read finance entries: {exc}"
            ) from exc
        if not rows:
            return None
        records = [
            {
                "id": row.id,
                "name": row.name,
                "amount": row.amount,
                "is_income": bool(row.is_income),
                "date": row.date,
            }
            for row in rows
        ]
        return collection_from_records(records)

    def write(self, collection: EntryCollection) -> None:
        """Replace every stored row with the given collection."""
        params = [
            {
                **record,
                "position": position,
                "is_income": int(record["is_income"]),
            }
            for position, record in enumerate(
                collection_to_records(collection)
            )
        ]
        try:
            engine = self._db_port.get_entries_engine()
            self._ensure_table(engine)
            with engine.begin() as conn:
                conn.exec_driver_sql(DELETE_ENTRIES_SQL)
                if params:
                    conn.execute(INSERT_ENTRY_SQL, params)
        except (SQLAlchemyError, OSError) as exc:
            raise PersistenceError(
                f"Cannot write finance entries: {exc}"
            ) from exc
        self._logger.debug(f"Wrote {len(params)} rows into finance_entries")

    def _ensure_table(self, engine) -> None:
        """Create the finance_entries table if it does not exist."""
        if self._table_ready:
            return
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_ENTRIES_SQL)
        self._table_ready = True


__all__ = ["SqlAlchemyEntriesStorage"]
