"""Shared key-value snapshot file read by the balance widget."""

from collections.abc import Callable
from datetime import datetime
from decimal import InvalidOperation
import json
from pathlib import Path

from balance_scale.application.ports.snapshot import (
    SnapshotPublisherPort,
    SnapshotReaderPort,
)
from balance_scale.domain.errors import PersistenceError
from balance_scale.domain.models.balance import BalanceSummary
from balance_scale.domain.models.entries import utc_now
from balance_scale.infrastructure.file_io import atomic_write_text
from balance_scale.infrastructure.logging.logger import get_app_logger
from balance_scale.utils.decimal_utils import coerce_decimal


TOTAL_INCOME_KEY = "widget.totalIncome"
TOTAL_EXPENSES_KEY = "widget.totalExpenses"
UPDATED_AT_KEY = "widget.updatedAt"


class JsonSnapshotStore(SnapshotPublisherPort, SnapshotReaderPort):
    """Flat JSON object shared between the app and the widget.

    Keys owned by this store are overwritten on publish; other keys in the
    file are preserved. An unreadable file is replaced by the next publish.
    """

    def __init__(
        self,
        path: Path,
        clock: Callable[[], datetime] = utc_now,
        logger=None,
    ) -> None:
        self._path = Path(path)
        self._clock = clock
        self._logger = logger or get_app_logger()

    def publish(self, summary: BalanceSummary) -> None:
        values = self._existing_values()
        values[TOTAL_INCOME_KEY] = str(summary.total_income)
        values[TOTAL_EXPENSES_KEY] = str(summary.total_expenses)
        values[UPDATED_AT_KEY] = self._clock().isoformat()
        try:
            atomic_write_text(self._path, json.dumps(values, indent=2))
        except OSError as exc:
            raise PersistenceError(
                f"Cannot write widget snapshot {self._path}: {exc}"
            ) from exc

    def read(self) -> BalanceSummary:
        values = self._read_values() if self._path.exists() else {}
        try:
            summary = BalanceSummary(
                total_income=coerce_decimal(values.get(TOTAL_INCOME_KEY)),
                total_expenses=coerce_decimal(values.get(TOTAL_EXPENSES_KEY)),
            )
        except InvalidOperation as exc:
            raise PersistenceError(
                f"Widget snapshot {self._path} holds invalid totals"
            ) from exc
        if not (
            summary.total_income.is_finite()
            and summary.total_expenses.is_finite()
        ):
            raise PersistenceError(
                f"Widget snapshot {self._path} holds non-finite totals"
            )
        return summary

    def updated_at(self) -> datetime | None:
        """Return when the snapshot was last published, if known."""
        if not self._path.exists():
            return None
        raw = self._read_values().get(UPDATED_AT_KEY)
        if not raw:
            return None
        try:
            return datetime.fromisoformat(raw)
        except (TypeError, ValueError):
            return None

    def _existing_values(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            return self._read_values()
        except PersistenceError as exc:
            self._logger.warning(f"Overwriting unreadable snapshot: {exc}")
            return {}

    def _read_values(self) -> dict:
        try:
            values = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise PersistenceError(
                f"Cannot read widget snapshot {self._path}: {exc}"
            ) from exc
        if not isinstance(values, dict):
            raise PersistenceError(
                f"Widget snapshot {self._path} is not a key-value object"
            )
        return values


__all__ = [
    "JsonSnapshotStore",
    "TOTAL_INCOME_KEY",
    "TOTAL_EXPENSES_KEY",
    "UPDATED_AT_KEY",
]
