"""Domain constants for the balance scale."""

from decimal import Decimal

MAX_TILT_DEGREES = Decimal("30")

# Ball sizes in points for the dashboard scale and the widget scale.
APP_BASE_BALL_SIZE = 70.0
APP_MAX_BALL_SIZE = 140.0
WIDGET_BASE_BALL_SIZE = 24.0
WIDGET_MAX_BALL_SIZE = 40.0

# (name, amount, is_income), newest first.
SEED_ENTRIES = (
    ("Salary", Decimal("3000"), True),
    ("Rent", Decimal("1200"), False),
    ("Groceries", Decimal("400"), False),
    ("Freelance Work", Decimal("500"), True),
)

WIDGET_REFRESH_MINUTES = 5
WIDGET_PLACEHOLDER_INCOME = Decimal("3500")
WIDGET_PLACEHOLDER_EXPENSES = Decimal("1600")


__all__ = [
    "MAX_TILT_DEGREES",
    "APP_BASE_BALL_SIZE",
    "APP_MAX_BALL_SIZE",
    "WIDGET_BASE_BALL_SIZE",
    "WIDGET_MAX_BALL_SIZE",
    "SEED_ENTRIES",
    "WIDGET_REFRESH_MINUTES",
    "WIDGET_PLACEHOLDER_INCOME",
    "WIDGET_PLACEHOLDER_EXPENSES",
]
