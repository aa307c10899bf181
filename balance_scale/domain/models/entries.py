"""Domain models for finance entries."""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

from balance_scale.domain.errors import ValidationError


def new_entry_id() -> str:
    """Return a fresh opaque entry identifier."""
    return uuid4().hex


def utc_now() -> datetime:
    """Return the current timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Entry:
    """A single income or expense record.

    Attributes:
        id: Opaque unique token, stable for the entry's lifetime.
        name: Display label.
        amount: Positive amount in currency units.
        is_income: True for income, False for an expense.
        date: Creation timestamp, used for display only.
    """

    id: str
    name: str
    amount: Decimal
    is_income: bool
    date: datetime

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Entry id must not be empty", field="id")
        if not self.name or not self.name.strip():
            raise ValidationError("Entry name must not be empty", field="name")
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Entry amount must be a Decimal, got {type(self.amount)!r}",
                field="amount",
            )
        if not self.amount.is_finite() or self.amount <= 0:
            raise ValidationError(
                f"Entry amount must be positive, got {self.amount}",
                field="amount",
            )

    @classmethod
    def create(
        cls,
        name: str,
        amount: Decimal,
        is_income: bool,
        *,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_entry_id,
    ) -> "Entry":
        """Build a new entry with a fresh id and the current timestamp."""
        return cls(
            id=id_factory(),
            name=name,
            amount=amount,
            is_income=is_income,
            date=clock(),
        )


@dataclass(frozen=True)
class EntryCollection:
    """Ordered, immutable sequence of entries, newest first."""

    entries: tuple[Entry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for entry in self.entries:
            if entry.id in seen:
                raise ValidationError(
                    f"Duplicate entry id {entry.id}",
                    field="id",
                )
            seen.add(entry.id)

    @classmethod
    def of(cls, entries: Iterable[Entry]) -> "EntryCollection":
        """Build a collection from any iterable of entries."""
        return cls(entries=tuple(entries))

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> Entry:
        return self.entries[index]

    def prepend(self, entries: Iterable[Entry]) -> "EntryCollection":
        """Return a collection with the entries added in front.

        Entries are prepended one by one, so the last given entry ends up
        first in the result.
        """
        added = tuple(entries)
        return EntryCollection(entries=tuple(reversed(added)) + self.entries)

    def without_positions(self, positions: Iterable[int]) -> "EntryCollection":
        """Return a collection without the entries at the given positions.

        Out-of-range and negative positions are ignored.
        """
        dropped = {
            position
            for position in positions
            if 0 <= position < len(self.entries)
        }
        return EntryCollection(
            entries=tuple(
                entry
                for position, entry in enumerate(self.entries)
                if position not in dropped
            )
        )

    def position_of(self, entry_id: str) -> int | None:
        """Return the position of the entry with the given id, if any."""
        for position, entry in enumerate(self.entries):
            if entry.id == entry_id:
                return position
        return None


__all__ = ["Entry", "EntryCollection", "new_entry_id", "utc_now"]
