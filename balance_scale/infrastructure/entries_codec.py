"""Conversion between entries and plain storage records."""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from balance_scale.domain.errors import PersistenceError, ValidationError
from balance_scale.domain.models.entries import Entry, EntryCollection


def entry_to_record(entry: Entry) -> dict[str, Any]:
    """Return a JSON-compatible record for the entry.

    Amounts are kept as decimal strings and dates as ISO-8601 strings so
    both round-trip without loss.
    """
    return {
        "id": entry.id,
        "name": entry.name,
        "amount": str(entry.amount),
        "is_income": entry.is_income,
        "date": entry.date.isoformat(),
    }


def entry_from_record(record: dict[str, Any]) -> Entry:
    """Rebuild an entry from a stored record.

    Raises:
        PersistenceError: If the record is incomplete or invalid.
    """
    try:
        is_income = record["is_income"]
        if not isinstance(is_income, bool):
            raise PersistenceError(
                f"Invalid is_income flag {is_income!r} in entry record"
            )
        return Entry(
            id=str(record["id"]),
            name=record["name"],
            amount=Decimal(str(record["amount"])),
            is_income=is_income,
            date=datetime.fromisoformat(record["date"]),
        )
    except (KeyError, TypeError, AttributeError) as exc:
        raise PersistenceError(f"Malformed entry record: {exc!r}") from exc
    except (InvalidOperation, ValueError) as exc:
        raise PersistenceError(f"Invalid entry record: {exc}") from exc


def collection_to_records(collection: EntryCollection) -> list[dict[str, Any]]:
    """Return records for every entry, in collection order."""
    return [entry_to_record(entry) for entry in collection]


def collection_from_records(records: list[dict[str, Any]]) -> EntryCollection:
    """Rebuild a collection from records, in stored order.

    Raises:
        PersistenceError: If any record is invalid or ids repeat.
    """
    entries = [entry_from_record(record) for record in records]
    try:
        return EntryCollection.of(entries)
    except ValidationError as exc:
        raise PersistenceError(f"Invalid entry collection: {exc}") from exc


__all__ = [
    "entry_to_record",
    "entry_from_record",
    "collection_to_records",
    "collection_from_records",
]
