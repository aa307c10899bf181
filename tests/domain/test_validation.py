"""Tests for entry input validation."""

from decimal import Decimal

import pytest

from balance_scale.domain.errors import ValidationError
from balance_scale.domain.services.validation import (
    parse_amount,
    validate_entry_input,
    validate_is_income,
    validate_name,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("4.50", Decimal("4.50")),
        (" 100 ", Decimal("100")),
        (3000, Decimal("3000")),
        (4.5, Decimal("4.5")),
        (Decimal("0.01"), Decimal("0.01")),
    ],
)
def test_parse_amount_accepts_positive_numbers(raw, expected) -> None:
    """Positive numbers in any supported form should parse."""
    assert parse_amount(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["", "abc", "-50", "0", "0.00", "nan", "inf", None, True, "1,000"],
)
def test_parse_amount_rejects_invalid_values(raw) -> None:
    """Non-numeric and non-positive amounts should be rejected."""
    with pytest.raises(ValidationError) as exc_info:
        parse_amount(raw)

    assert exc_info.value.field == "amount"


def test_validate_name_strips_whitespace() -> None:
    """Names should be trimmed."""
    assert validate_name("  Coffee ") == "Coffee"


@pytest.mark.parametrize("name", ["", "   ", None])
def test_validate_name_rejects_blank(name) -> None:
    """Blank names should be rejected."""
    with pytest.raises(ValidationError) as exc_info:
        validate_name(name)

    assert exc_info.value.field == "name"


def test_validate_entry_input_checks_name_first() -> None:
    """An empty name should be reported even with a bad amount."""
    with pytest.raises(ValidationError) as exc_info:
        validate_entry_input("", "-1", True)

    assert exc_info.value.field == "name"
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.parametrize("flag", ["false", "true", 1, 0, None])
def test_validate_is_income_rejects_non_bool(flag) -> None:
    """Only real booleans should be accepted as the entry type."""
    with pytest.raises(ValidationError) as exc_info:
        validate_is_income(flag)

    assert exc_info.value.field == "is_income"


def test_validate_entry_input_returns_cleaned_values() -> None:
    """Valid input should come back stripped and parsed."""
    assert validate_entry_input(" Coffee ", "4.50", False) == (
        "Coffee",
        Decimal("4.50"),
        False,
    )
