"""Domain validation helpers for entry input."""

from decimal import Decimal, InvalidOperation

from balance_scale.domain.errors import ValidationError


def validate_name(name: str | None) -> str:
    """Return the cleaned entry name.

    Args:
        name: Raw name typed by the user.

    Returns:
        str: Name without surrounding whitespace.

    Raises:
        ValidationError: If the name is missing or blank.
    """
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Name must not be empty", field="name")
    return name.strip()


def parse_amount(raw_amount) -> Decimal:
    """Parse user input into a positive amount.

    Args:
        raw_amount: String, int, float or Decimal amount.

    Returns:
        Decimal: Parsed amount.

    Raises:
        ValidationError: If the value is not a positive finite number.
    """
    if isinstance(raw_amount, bool) or raw_amount is None:
        raise ValidationError(
            f"Amount is not a number: {raw_amount!r}",
            field="amount",
        )
    if isinstance(raw_amount, Decimal):
        amount = raw_amount
    else:
        text = str(raw_amount).strip()
        try:
            amount = Decimal(text)
        except InvalidOperation as exc:
            raise ValidationError(
                f"Amount is not a number: {raw_amount!r}",
                field="amount",
            ) from exc
    if not amount.is_finite() or amount <= 0:
        raise ValidationError(
            f"Amount must be positive, got {raw_amount!r}",
            field="amount",
        )
    return amount


def validate_is_income(is_income) -> bool:
    """Return the income flag, rejecting anything but a real bool."""
    if not isinstance(is_income, bool):
        raise ValidationError(
            f"Entry type must be a boolean, got {is_income!r}",
            field="is_income",
        )
    return is_income


def validate_entry_input(
    name: str | None,
    raw_amount,
    is_income,
) -> tuple[str, Decimal, bool]:
    """Validate add-entry input and return the cleaned values."""
    return (
        validate_name(name),
        parse_amount(raw_amount),
        validate_is_income(is_income),
    )


__all__ = [
    "validate_name",
    "parse_amount",
    "validate_is_income",
    "validate_entry_input",
]
