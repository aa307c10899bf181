"""Application use cases package."""

from .entry_filters import (
    EntryFilter,
    empty_state_message,
    filter_entries,
    list_title,
    to_collection_indices,
)
from .get_balance_view import BalanceView, GetBalanceViewUseCase
from .get_widget_timeline import (
    GetWidgetTimelineUseCase,
    WidgetTimelineEntry,
    placeholder_entry,
)
from .publish_balance_snapshot import PublishBalanceSnapshotUseCase

__all__ = [
    "EntryFilter",
    "filter_entries",
    "to_collection_indices",
    "list_title",
    "empty_state_message",
    "GetBalanceViewUseCase",
    "BalanceView",
    "GetWidgetTimelineUseCase",
    "WidgetTimelineEntry",
    "placeholder_entry",
    "PublishBalanceSnapshotUseCase",
]
