"""JSON file backed storage for the entry collection."""

import json
from pathlib import Path

from balance_scale.application.ports.entries_storage import EntriesStoragePort
from balance_scale.domain.errors import PersistenceError
from balance_scale.domain.models.entries import EntryCollection
from balance_scale.infrastructure.entries_codec import (
    collection_from_records,
    collection_to_records,
)
from balance_scale.infrastructure.file_io import atomic_write_text
from balance_scale.infrastructure.logging.logger import get_app_logger


FORMAT_VERSION = 1


class JsonFileEntriesStorage(EntriesStoragePort):
    """Store the collection as a single JSON document.

    Layout: ``{"version": 1, "entries": [record, ...]}`` with records in
    collection order.
    """

    def __init__(self, path: Path, logger=None) -> None:
        """Initialize the storage.

        Args:
            path: JSON file holding the collection.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> EntryCollection | None:
        """Return the stored collection, None when the file is missing."""
        if not self._path.exists():
            return None
        try:
            raw = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(
                f"Cannot read entries file {self._path}: {exc}"
            ) from exc
        if not raw.strip():
            return None
        try:
            document = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise PersistenceError(
                f"Entries file {self._path} is not valid JSON: {exc}"
            ) from exc
        if not isinstance(document, dict) or not isinstance(
            document.get("entries"), list
        ):
            raise PersistenceError(
                f"Entries file {self._path} has an unexpected layout"
            )
        version = document.get("version")
        if version != FORMAT_VERSION:
            self._logger.warning(
                f"Entries file {self._path} has version {version}, "
                f"expected {FORMAT_VERSION}"
            )
        return collection_from_records(document["entries"])

    def write(self, collection: EntryCollection) -> None:
        """Atomically replace the file with the given collection."""
        document = {
            "version": FORMAT_VERSION,
            "entries": collection_to_records(collection),
        }
        try:
            atomic_write_text(self._path, json.dumps(document, indent=2))
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceError(
                f"Cannot write entries file {self._path}: {exc}"
            ) from exc
        self._logger.debug(
            f"Wrote {len(collection)} entries to {self._path}"
        )


__all__ = ["JsonFileEntriesStorage", "FORMAT_VERSION"]
