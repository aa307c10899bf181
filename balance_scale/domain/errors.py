"""Domain error taxonomy."""


class BalanceScaleError(Exception):
    """Base class for every error raised by the tracker."""


class ValidationError(BalanceScaleError, ValueError):
    """Raised when entry input is rejected.

    Attributes:
        field: Name of the offending input field ("name", "amount" or
            "is_income").
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class PersistenceError(BalanceScaleError):
    """Raised when entries or snapshots cannot be read or written."""


__all__ = ["BalanceScaleError", "ValidationError", "PersistenceError"]
