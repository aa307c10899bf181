"""Use case to compute totals and scale geometry for presentation layers."""

from collections.abc import Iterable

from balance_scale.domain.models.balance import (
    APP_BALL_SIZING,
    BalanceView,
    BallSizing,
)
from balance_scale.domain.models.entries import Entry
from balance_scale.domain.services.aggregation import (
    scale_geometry,
    summarize,
)


class GetBalanceViewUseCase:
    """Aggregate a collection into a BalanceView."""

    def __init__(self, sizing: BallSizing = APP_BALL_SIZING) -> None:
        """Initialize the use case.

        Args:
            sizing: Ball size bounds of the scale being rendered.
        """
        self._sizing = sizing

    def execute(self, entries: Iterable[Entry]) -> BalanceView:
        """Return totals and geometry recomputed from the entries."""
        summary = summarize(entries)
        geometry = scale_geometry(
            summary.total_income,
            summary.total_expenses,
            self._sizing,
        )
        return BalanceView(summary=summary, geometry=geometry)


__all__ = ["GetBalanceViewUseCase", "BalanceView"]
