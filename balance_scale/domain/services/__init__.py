"""Domain services package."""

from .aggregation import (
    balance,
    ball_size,
    scale_geometry,
    summarize,
    tilt_angle,
    total_expenses,
    total_income,
)
from .validation import (
    parse_amount,
    validate_entry_input,
    validate_is_income,
    validate_name,
)

__all__ = [
    "total_income",
    "total_expenses",
    "balance",
    "summarize",
    "tilt_angle",
    "ball_size",
    "scale_geometry",
    "parse_amount",
    "validate_name",
    "validate_is_income",
    "validate_entry_input",
]
