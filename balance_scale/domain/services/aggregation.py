"""Domain services aggregating entries into totals and scale geometry."""

from collections.abc import Iterable
from decimal import Decimal

from balance_scale.domain.constants import MAX_TILT_DEGREES
from balance_scale.domain.models.balance import (
    BalanceSummary,
    BallSizing,
    ScaleGeometry,
)
from balance_scale.domain.models.entries import Entry
from balance_scale.utils.decimal_utils import coerce_decimal


def total_income(entries: Iterable[Entry]) -> Decimal:
    """Return the sum of income amounts.

    Args:
        entries: Entries to aggregate.

    Returns:
        Decimal: Income total, zero when there is no income.
    """
    return sum(
        (entry.amount for entry in entries if entry.is_income),
        start=Decimal("0"),
    )


def total_expenses(entries: Iterable[Entry]) -> Decimal:
    """Return the sum of expense amounts.

    Args:
        entries: Entries to aggregate.

    Returns:
        Decimal: Expense total, zero when there are no expenses.
    """
    return sum(
        (entry.amount for entry in entries if not entry.is_income),
        start=Decimal("0"),
    )


def balance(entries: Iterable[Entry]) -> Decimal:
    """Return total income minus total expenses."""
    materialized = list(entries)
    return total_income(materialized) - total_expenses(materialized)


def summarize(entries: Iterable[Entry]) -> BalanceSummary:
    """Compute income and expense totals in a single summary."""
    materialized = list(entries)
    return BalanceSummary(
        total_income=total_income(materialized),
        total_expenses=total_expenses(materialized),
    )


def tilt_angle(income, expenses) -> float:
    """Return the scale tilt in degrees for the given totals.

    Positive angles lean towards income. The magnitude saturates at
    MAX_TILT_DEGREES however lopsided the totals are.

    Args:
        income: Total income.
        expenses: Total expenses.

    Returns:
        float: Tilt angle within [-30, 30].
    """
    income = coerce_decimal(income)
    expenses = coerce_decimal(expenses)
    if income == 0 and expenses == 0:
        return 0.0
    max_amount = max(income, expenses)
    if max_amount <= 0:
        # Only reachable with negative totals.
        return 0.0
    ratio = (income - expenses) / max_amount * MAX_TILT_DEGREES
    clamped = min(max(-MAX_TILT_DEGREES, ratio), MAX_TILT_DEGREES)
    return float(clamped)


def ball_size(
    amount,
    other_amount,
    base_size: float,
    max_size: float,
) -> float:
    """Return the rendered ball size for one side of the scale.

    The larger side grows towards max_size. Equal positive amounts both
    render at max_size.

    Args:
        amount: Amount on this side.
        other_amount: Amount on the opposite side.
        base_size: Size used for an empty side.
        max_size: Size used for the dominant side.

    Returns:
        float: Ball size between base_size and max_size.
    """
    amount = coerce_decimal(amount)
    other_amount = coerce_decimal(other_amount)
    if amount <= 0:
        return base_size
    denominator = max(amount, other_amount, Decimal("1"))
    proportion = float(amount / denominator)
    return base_size + (max_size - base_size) * proportion


def scale_geometry(
    income,
    expenses,
    sizing: BallSizing,
) -> ScaleGeometry:
    """Map totals onto tilt and ball sizes for a scale rendering."""
    return ScaleGeometry(
        tilt_angle=tilt_angle(income, expenses),
        expense_ball_size=ball_size(
            expenses,
            income,
            sizing.base_size,
            sizing.max_size,
        ),
        income_ball_size=ball_size(
            income,
            expenses,
            sizing.base_size,
            sizing.max_size,
        ),
    )


__all__ = [
    "total_income",
    "total_expenses",
    "balance",
    "summarize",
    "tilt_angle",
    "ball_size",
    "scale_geometry",
]
