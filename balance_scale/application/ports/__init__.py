"""Application ports package."""

from .database import DatabaseEnginePort
from .entries_storage import EntriesStoragePort
from .snapshot import SnapshotPublisherPort, SnapshotReaderPort

__all__ = [
    "DatabaseEnginePort",
    "EntriesStoragePort",
    "SnapshotPublisherPort",
    "SnapshotReaderPort",
]
