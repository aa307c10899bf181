"""Domain package for business rules and core models."""

from .constants import MAX_TILT_DEGREES, SEED_ENTRIES
from .errors import BalanceScaleError, PersistenceError, ValidationError
from .models import (
    APP_BALL_SIZING,
    WIDGET_BALL_SIZING,
    BalanceSummary,
    BallSizing,
    Entry,
    EntryCollection,
    ScaleGeometry,
)
from .services import (
    balance,
    ball_size,
    parse_amount,
    scale_geometry,
    summarize,
    tilt_angle,
    total_expenses,
    total_income,
    validate_entry_input,
    validate_is_income,
    validate_name,
)

__all__ = [
    "Entry",
    "EntryCollection",
    "BalanceSummary",
    "BallSizing",
    "ScaleGeometry",
    "APP_BALL_SIZING",
    "WIDGET_BALL_SIZING",
    "MAX_TILT_DEGREES",
    "SEED_ENTRIES",
    "BalanceScaleError",
    "PersistenceError",
    "ValidationError",
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
