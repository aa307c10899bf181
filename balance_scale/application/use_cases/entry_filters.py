"""Entry filtering helpers for list views.

A filtered list shows positions relative to the filtered subset. Deleting
from such a list must go through to_collection_indices so the store
receives positions in the full collection.
"""

from collections.abc import Iterable, Sequence
from enum import Enum

from balance_scale.domain.models.entries import Entry, EntryCollection


class EntryFilter(str, Enum):
    """Entry subsets shown by list views."""

    INCOME = "income"
    EXPENSE = "expense"


def filter_entries(
    collection: Iterable[Entry],
    entry_filter: EntryFilter | None,
) -> list[Entry]:
    """Return the entries matching the filter, keeping collection order.

    Args:
        collection: Entries to filter.
        entry_filter: Subset to keep, or None for every entry.

    Returns:
        list[Entry]: Matching entries.
    """
    if entry_filter is None:
        return list(collection)
    keep_income = entry_filter is EntryFilter.INCOME
    return [entry for entry in collection if entry.is_income == keep_income]


def to_collection_indices(
    collection: EntryCollection,
    filtered: Sequence[Entry],
    positions: Iterable[int],
) -> set[int]:
    """Translate positions in a filtered view into collection positions.

    Args:
        collection: Full collection the view was built from.
        filtered: Entries shown by the view.
        positions: Positions selected in the view.

    Returns:
        set[int]: Matching positions in the full collection. Out-of-range
        view positions and entries no longer in the collection are skipped.
    """
    indices: set[int] = set()
    for position in positions:
        if not 0 <= position < len(filtered):
            continue
        index = collection.position_of(filtered[position].id)
        if index is not None:
            indices.add(index)
    return indices


def list_title(entry_filter: EntryFilter | None) -> str:
    """Return the title of a list view."""
    if entry_filter is EntryFilter.INCOME:
        return "Income"
    if entry_filter is EntryFilter.EXPENSE:
        return "Expenses"
    return "Recent Items"


def empty_state_message(entry_filter: EntryFilter | None) -> str:
    """Return the message shown when a list view has no entries."""
    if entry_filter is EntryFilter.INCOME:
        return "No income items yet. Add your first income using the form."
    if entry_filter is EntryFilter.EXPENSE:
        return "No expense items yet. Add your first expense using the form."
    return "No items yet. Add your first item using the form."


__all__ = [
    "EntryFilter",
    "filter_entries",
    "to_collection_indices",
    "list_title",
    "empty_state_message",
]
