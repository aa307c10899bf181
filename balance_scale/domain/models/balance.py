"""Domain models for aggregated balances and scale geometry."""

from dataclasses import dataclass
from decimal import Decimal

from balance_scale.domain.constants import (
    APP_BASE_BALL_SIZE,
    APP_MAX_BALL_SIZE,
    WIDGET_BASE_BALL_SIZE,
    WIDGET_MAX_BALL_SIZE,
)


@dataclass(frozen=True)
class BalanceSummary:
    """Income and expense totals.

    Attributes:
        total_income: Sum of income amounts.
        total_expenses: Sum of expense amounts.
    """

    total_income: Decimal
    total_expenses: Decimal

    @property
    def balance(self) -> Decimal:
        """Return total_income minus total_expenses."""
        return self.total_income - self.total_expenses


@dataclass(frozen=True)
class BallSizing:
    """Size bounds for the scale balls."""

    base_size: float
    max_size: float


APP_BALL_SIZING = BallSizing(APP_BASE_BALL_SIZE, APP_MAX_BALL_SIZE)
WIDGET_BALL_SIZING = BallSizing(WIDGET_BASE_BALL_SIZE, WIDGET_MAX_BALL_SIZE)


@dataclass(frozen=True)
class ScaleGeometry:
    """Visual mapping of a balance onto the scale.

    Expenses sit on the left pan and income on the right pan.
    """

    tilt_angle: float
    expense_ball_size: float
    income_ball_size: float


@dataclass(frozen=True)
class BalanceView:
    """Totals and scale geometry for UI rendering."""

    summary: BalanceSummary
    geometry: ScaleGeometry


__all__ = [
    "BalanceSummary",
    "BallSizing",
    "ScaleGeometry",
    "BalanceView",
    "APP_BALL_SIZING",
    "WIDGET_BALL_SIZING",
]
