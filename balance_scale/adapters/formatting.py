"""Display formatting shared by the dashboard and the widget."""

from decimal import Decimal

from balance_scale.domain.models.entries import Entry


def format_money(value: Decimal) -> str:
    """Format an amount as dollars, keeping the sign in front."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_entry_amount(entry: Entry) -> str:
    """Format an entry amount with a + prefix for income, - for expenses."""
    prefix = "+" if entry.is_income else "-"
    return f"{prefix}${entry.amount:,.2f}"


def format_tilt(angle: float) -> str:
    """Format a tilt angle in degrees."""
    return f"{angle:+.1f}°"


__all__ = ["format_money", "format_entry_amount", "format_tilt"]
