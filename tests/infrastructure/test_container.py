"""Tests for the composition root."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from balance_scale.infrastructure import container
from balance_scale.infrastructure.json_entries_storage import (
    JsonFileEntriesStorage,
)
from balance_scale.infrastructure.settings import TrackerSettings
from balance_scale.infrastructure.snapshot_store import JsonSnapshotStore
from balance_scale.infrastructure.sql_entries_storage import (
    SqlAlchemyEntriesStorage,
)


@pytest.fixture(autouse=True)
def _quiet_logger(monkeypatch):
    monkeypatch.setattr(container, "get_app_logger", MagicMock)


def _settings(tmp_path, backend: str = "json") -> TrackerSettings:
    return TrackerSettings(
        backend=backend,
        data_file=tmp_path / "entries.json",
        db_url=f"sqlite:///{tmp_path / 'entries.db'}",
        snapshot_file=tmp_path / "snapshot.json",
    )


def test_build_entries_storage_uses_json_by_default(tmp_path) -> None:
    """The json backend should store entries in the configured file."""
    storage = container.build_entries_storage(_settings(tmp_path))

    assert isinstance(storage, JsonFileEntriesStorage)
    assert storage.path == tmp_path / "entries.json"


def test_build_entries_storage_uses_sqlalchemy(tmp_path, monkeypatch) -> None:
    """The sqlalchemy backend should go through the database adapter."""
    adapter = MagicMock()
    monkeypatch.setattr(
        container,
        "SqlAlchemyDatabaseEngineAdapter",
        MagicMock(return_value=adapter),
    )

    storage = container.build_entries_storage(
        _settings(tmp_path, backend="sqlalchemy")
    )

    assert isinstance(storage, SqlAlchemyEntriesStorage)
    container.SqlAlchemyDatabaseEngineAdapter.assert_called_once_with(
        f"sqlite:///{tmp_path / 'entries.db'}"
    )


def test_build_snapshot_store_uses_configured_file(tmp_path) -> None:
    """The snapshot store should read the configured snapshot file."""
    store = container.build_snapshot_store(_settings(tmp_path))

    assert isinstance(store, JsonSnapshotStore)
    assert store.read().total_income == Decimal("0")


def test_build_entry_store_seeds_and_publishes(tmp_path) -> None:
    """A fresh store should seed, persist and publish the seed totals."""
    settings = _settings(tmp_path)

    store = container.build_entry_store(settings)

    assert [entry.name for entry in store.entries] == [
        "Salary",
        "Rent",
        "Groceries",
        "Freelance Work",
    ]
    assert settings.data_file.exists()
    snapshot = JsonSnapshotStore(
        settings.snapshot_file,
        logger=MagicMock(),
    ).read()
    assert snapshot.total_income == Decimal("3500")
    assert snapshot.total_expenses == Decimal("1600")


def test_build_entry_store_publishes_after_mutations(tmp_path) -> None:
    """Mutations should reach the widget snapshot."""
    settings = _settings(tmp_path)
    store = container.build_entry_store(settings)

    store.add("Coffee", "4.50", is_income=False)

    snapshot = JsonSnapshotStore(
        settings.snapshot_file,
        logger=MagicMock(),
    ).read()
    assert snapshot.total_expenses == Decimal("1604.50")
    assert snapshot.balance == Decimal("1895.50")
