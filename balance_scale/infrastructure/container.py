"""Composition root for wiring infrastructure adapters."""

from balance_scale.application.entry_store import EntryStore
from balance_scale.application.ports.database import DatabaseEnginePort
from balance_scale.application.ports.entries_storage import EntriesStoragePort
from balance_scale.application.use_cases.publish_balance_snapshot import (
    PublishBalanceSnapshotUseCase,
)
from balance_scale.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from balance_scale.infrastructure.json_entries_storage import (
    JsonFileEntriesStorage,
)
from balance_scale.infrastructure.logging.logger import get_app_logger
from balance_scale.infrastructure.settings import TrackerSettings
from balance_scale.infrastructure.snapshot_store import JsonSnapshotStore
from balance_scale.infrastructure.sql_entries_storage import (
    SqlAlchemyEntriesStorage,
)


def build_database_adapter(
    settings: TrackerSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or TrackerSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(resolved.db_url)


def build_entries_storage(
    settings: TrackerSettings | None = None,
) -> EntriesStoragePort:
    """Return the configured entries storage adapter."""
    resolved = settings or TrackerSettings.from_env()
    if resolved.backend == "sqlalchemy":
        return SqlAlchemyEntriesStorage(
            build_database_adapter(resolved),
            logger=get_app_logger(),
        )
    return JsonFileEntriesStorage(resolved.data_file, logger=get_app_logger())


def build_snapshot_store(
    settings: TrackerSettings | None = None,
) -> JsonSnapshotStore:
    """Return the shared widget snapshot store."""
    resolved = settings or TrackerSettings.from_env()
    return JsonSnapshotStore(resolved.snapshot_file, logger=get_app_logger())


def build_entry_store(
    settings: TrackerSettings | None = None,
) -> EntryStore:
    """Return a loaded entry store publishing widget snapshots.

    The snapshot publisher is subscribed before loading so the widget sees
    the loaded totals right away.
    """
    resolved = settings or TrackerSettings.from_env()
    logger = get_app_logger()
    store = EntryStore(build_entries_storage(resolved), logger=logger)
    store.subscribe(
        PublishBalanceSnapshotUseCase(
            build_snapshot_store(resolved),
            logger=logger,
        )
    )
    store.load()
    return store


__all__ = [
    "build_database_adapter",
    "build_entries_storage",
    "build_snapshot_store",
    "build_entry_store",
]
