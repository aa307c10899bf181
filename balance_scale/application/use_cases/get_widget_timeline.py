"""Use case building the entry rendered by the balance widget.

The widget has no access to the live entry collection. It reads the shared
snapshot on a coarse schedule and derives its own geometry with the same
aggregation functions as the dashboard.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal

from balance_scale.application.ports.snapshot import SnapshotReaderPort
from balance_scale.domain.constants import (
    WIDGET_PLACEHOLDER_EXPENSES,
    WIDGET_PLACEHOLDER_INCOME,
    WIDGET_REFRESH_MINUTES,
)
from balance_scale.domain.errors import PersistenceError
from balance_scale.domain.models.balance import (
    WIDGET_BALL_SIZING,
    BalanceSummary,
    ScaleGeometry,
)
from balance_scale.domain.models.entries import utc_now
from balance_scale.domain.services.aggregation import scale_geometry
from balance_scale.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class WidgetTimelineEntry:
    """Widget content valid until next_refresh.

    Attributes:
        date: When the entry was built.
        summary: Totals read from the shared snapshot.
        geometry: Scale geometry at widget size.
        next_refresh: When the widget should read the snapshot again.
    """

    date: datetime
    summary: BalanceSummary
    geometry: ScaleGeometry
    next_refresh: datetime


def _build_entry(
    now: datetime,
    summary: BalanceSummary,
) -> WidgetTimelineEntry:
    return WidgetTimelineEntry(
        date=now,
        summary=summary,
        geometry=scale_geometry(
            summary.total_income,
            summary.total_expenses,
            WIDGET_BALL_SIZING,
        ),
        next_refresh=now + timedelta(minutes=WIDGET_REFRESH_MINUTES),
    )


def placeholder_entry(now: datetime | None = None) -> WidgetTimelineEntry:
    """Return the preview entry shown before any snapshot is read."""
    summary = BalanceSummary(
        total_income=WIDGET_PLACEHOLDER_INCOME,
        total_expenses=WIDGET_PLACEHOLDER_EXPENSES,
    )
    return _build_entry(now or utc_now(), summary)


class GetWidgetTimelineUseCase:
    """Read the shared snapshot and build the widget entry."""

    def __init__(self, reader: SnapshotReaderPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            reader: Port reading the shared snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._reader = reader
        self._logger = logger or get_app_logger()

    def execute(self, now: datetime | None = None) -> WidgetTimelineEntry:
        """Return the widget entry for the current snapshot.

        An unreadable snapshot renders as zero totals.

        Args:
            now: Timestamp of the refresh, defaults to the current time.

        Returns:
            WidgetTimelineEntry: Entry to render until next_refresh.
        """
        try:
            summary = self._reader.read()
        except PersistenceError as exc:
            self._logger.warning(f"Widget snapshot unavailable: {exc}")
            summary = BalanceSummary(
                total_income=Decimal("0"),
                total_expenses=Decimal("0"),
            )
        return _build_entry(now or utc_now(), summary)


__all__ = [
    "GetWidgetTimelineUseCase",
    "WidgetTimelineEntry",
    "placeholder_entry",
]
