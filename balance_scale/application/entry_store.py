"""Entry store owning the ordered collection of finance entries.

The store is the single mutator of the collection. Every mutation builds a
new immutable EntryCollection, rewrites it through the injected storage
port and notifies subscribers with the new snapshot. Totals are never
stored here; readers aggregate the snapshot they receive.
"""

from collections.abc import Callable, Iterable
from datetime import datetime

from balance_scale.application.ports.entries_storage import EntriesStoragePort
from balance_scale.domain.constants import SEED_ENTRIES
from balance_scale.domain.errors import PersistenceError
from balance_scale.domain.models.entries import (
    Entry,
    EntryCollection,
    new_entry_id,
    utc_now,
)
from balance_scale.domain.services.validation import validate_entry_input
from balance_scale.infrastructure.logging.logger import get_app_logger


Listener = Callable[[EntryCollection], None]


class EntryStore:
    """Hold, mutate and persist the entry collection."""

    def __init__(
        self,
        storage: EntriesStoragePort,
        logger=None,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_entry_id,
    ) -> None:
        """Initialize the store.

        Args:
            storage: Port used to read and write the collection.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the timestamp for new entries.
            id_factory: Callable returning fresh entry ids.
        """
        self._storage = storage
        self._logger = logger or get_app_logger()
        self._clock = clock
        self._id_factory = id_factory
        self._entries = EntryCollection()
        self._listeners: list[Listener] = []
        self._last_error: PersistenceError | None = None

    @property
    def entries(self) -> EntryCollection:
        """Return the current immutable collection."""
        return self._entries

    @property
    def last_error(self) -> PersistenceError | None:
        """Return the last persistence failure, cleared by a good write."""
        return self._last_error

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with every new collection.

        Args:
            listener: Callable receiving the new EntryCollection.

        Returns:
            Callable[[], None]: Function removing the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def load(self) -> EntryCollection:
        """Load the collection from storage, seeding it when empty.

        An unreadable store falls back to the seed entries without
        overwriting what is stored; the next mutation rewrites it.

        Returns:
            EntryCollection: The loaded collection.
        """
        try:
            stored = self._storage.read()
        except PersistenceError as exc:
            self._last_error = exc
            self._logger.error(
                f"Failed to load finance entries, using sample data: {exc}"
            )
            self._entries = self._seed_collection()
            self._notify()
            return self._entries

        if stored is None or len(stored) == 0:
            self._entries = self._seed_collection()
            self._logger.info(
                f"No stored entries, seeded {len(self._entries)} sample entries"
            )
            self.persist()
        else:
            self._entries = stored
            self._logger.info(f"Loaded {len(stored)} finance entries")
        self._notify()
        return self._entries

    def add(self, name: str, amount, is_income: bool) -> Entry:
        """Validate input and add a new entry as the newest one.

        Args:
            name: Display label.
            amount: Raw amount (string, int, float or Decimal).
            is_income: True for income, False for an expense.

        Returns:
            Entry: The created entry.

        Raises:
            ValidationError: If the name is empty, the amount is not a
                positive number or is_income is not a bool. The collection
                is left unchanged.
        """
        clean_name, parsed_amount, is_income = validate_entry_input(
            name,
            amount,
            is_income,
        )
        entry = self._build_entry(clean_name, parsed_amount, is_income)
        self._entries = self._entries.prepend([entry])
        self._logger.info(
            f"Added {'income' if is_income else 'expense'} entry "
            f"'{entry.name}' ({entry.amount})"
        )
        self._commit()
        return entry

    def add_many(
        self,
        items: Iterable[tuple[str, object, bool]],
    ) -> list[Entry]:
        """Add several entries at once.

        Every item is validated before anything changes; one invalid item
        rejects the whole batch. Items are prepended in order, so the last
        item becomes the newest entry.

        Args:
            items: (name, amount, is_income) tuples.

        Returns:
            list[Entry]: Created entries in input order.

        Raises:
            ValidationError: If any item is invalid.
        """
        validated = [
            validate_entry_input(name, amount, is_income)
            for name, amount, is_income in items
        ]
        if not validated:
            return []
        created = [
            self._build_entry(name, amount, is_income)
            for name, amount, is_income in validated
        ]
        self._entries = self._entries.prepend(created)
        self._logger.info(f"Added {len(created)} entries in one batch")
        self._commit()
        return created

    def delete(self, indices: Iterable[int]) -> list[Entry]:
        """Remove the entries at the given positions.

        Positions refer to the full collection; callers showing a filtered
        view translate positions first. Duplicated and out-of-range
        positions are ignored.

        Args:
            indices: Positions to remove.

        Returns:
            list[Entry]: The removed entries in collection order.
        """
        positions = {
            index for index in indices if 0 <= index < len(self._entries)
        }
        if not positions:
            return []
        removed = [self._entries[index] for index in sorted(positions)]
        self._entries = self._entries.without_positions(positions)
        self._logger.info(f"Deleted {len(removed)} entries")
        self._commit()
        return removed

    def delete_ids(self, entry_ids: Iterable[str]) -> list[Entry]:
        """Remove the entries with the given ids; unknown ids are ignored."""
        positions = []
        for entry_id in entry_ids:
            position = self._entries.position_of(entry_id)
            if position is not None:
                positions.append(position)
        return self.delete(positions)

    def persist(self) -> bool:
        """Write the current collection through the storage port.

        Failures are logged and kept in ``last_error``; the in-memory
        collection stays authoritative.

        Returns:
            bool: True when the write succeeded.
        """
        try:
            self._storage.write(self._entries)
        except PersistenceError as exc:
            self._last_error = exc
            self._logger.error(f"Failed to save finance entries: {exc}")
            return False
        self._last_error = None
        return True

    def _commit(self) -> None:
        self.persist()
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._entries)
            except Exception as exc:
                self._logger.error(
                    f"Entry listener {getattr(listener, '__name__', listener)} "
                    f"failed: {exc}"
                )

    def _build_entry(self, name: str, amount, is_income: bool) -> Entry:
        return Entry.create(
            name,
            amount,
            is_income,
            clock=self._clock,
            id_factory=self._id_factory,
        )

    def _seed_collection(self) -> EntryCollection:
        return EntryCollection.of(
            self._build_entry(name, amount, is_income)
            for name, amount, is_income in SEED_ENTRIES
        )


__all__ = ["EntryStore", "Listener"]
