"""Port for persisting the entry collection."""

from typing import Protocol

from balance_scale.domain.models.entries import EntryCollection


class EntriesStoragePort(Protocol):
    """Named read/write interface over the persisted entry collection.

    Implementations raise PersistenceError on any read, write or
    (de)serialization failure, and must leave previously written state
    intact when a write fails.
    """

    def read(self) -> EntryCollection | None:
        """Return the stored collection, or None when nothing is stored."""

    def write(self, collection: EntryCollection) -> None:
        """Replace the stored collection with the given one."""


__all__ = ["EntriesStoragePort"]
