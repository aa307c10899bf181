"""Domain models package."""

from .balance import (
    APP_BALL_SIZING,
    WIDGET_BALL_SIZING,
    BalanceSummary,
    BalanceView,
    BallSizing,
    ScaleGeometry,
)
from .entries import Entry, EntryCollection, new_entry_id, utc_now

__all__ = [
    "Entry",
    "EntryCollection",
    "BalanceSummary",
    "BalanceView",
    "BallSizing",
    "ScaleGeometry",
    "APP_BALL_SIZING",
    "WIDGET_BALL_SIZING",
    "new_entry_id",
    "utc_now",
]
