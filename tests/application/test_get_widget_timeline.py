"""Tests for the GetWidgetTimelineUseCase."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from balance_scale.application.use_cases.get_widget_timeline import (
    GetWidgetTimelineUseCase,
    placeholder_entry,
)
from balance_scale.domain.errors import PersistenceError
from balance_scale.domain.models.balance import BalanceSummary
from balance_scale.domain.services.aggregation import tilt_angle


NOW = datetime(2025, 5, 27, 8, 0, tzinfo=timezone.utc)


def test_execute_builds_entry_from_snapshot() -> None:
    """The widget entry should derive geometry from the snapshot totals."""
    reader = MagicMock()
    reader.read.return_value = BalanceSummary(
        total_income=Decimal("3500"),
        total_expenses=Decimal("1604.50"),
    )
    use_case = GetWidgetTimelineUseCase(reader, logger=MagicMock())

    entry = use_case.execute(now=NOW)

    assert entry.date == NOW
    assert entry.next_refresh == NOW + timedelta(minutes=5)
    assert entry.summary.balance == Decimal("1895.50")
    assert entry.geometry.tilt_angle == tilt_angle(
        Decimal("3500"),
        Decimal("1604.50"),
    )
    assert entry.geometry.income_ball_size == 40
    assert entry.geometry.expense_ball_size == pytest.approx(
        24 + 16 * 1604.5 / 3500
    )


def test_execute_degrades_to_zero_totals() -> None:
    """An unreadable snapshot should render a level, empty scale."""
    reader = MagicMock()
    reader.read.side_effect = PersistenceError("missing group container")
    logger = MagicMock()
    use_case = GetWidgetTimelineUseCase(reader, logger=logger)

    entry = use_case.execute(now=NOW)

    assert entry.summary.balance == Decimal("0")
    assert entry.geometry.tilt_angle == 0
    assert entry.geometry.expense_ball_size == 24
    logger.warning.assert_called_once()


def test_placeholder_entry_uses_preview_totals() -> None:
    """The placeholder should show income 3500 and expenses 1600."""
    entry = placeholder_entry(NOW)

    assert entry.summary.total_income == Decimal("3500")
    assert entry.summary.total_expenses == Decimal("1600")
    assert entry.geometry.tilt_angle > 0
