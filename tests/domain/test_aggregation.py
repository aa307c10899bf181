"""Tests for the aggregation domain services."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from balance_scale.domain.models.balance import (
    APP_BALL_SIZING,
    WIDGET_BALL_SIZING,
    BalanceSummary,
)
from balance_scale.domain.models.entries import Entry, EntryCollection
from balance_scale.domain.services.aggregation import (
    balance,
    ball_size,
    scale_geometry,
    summarize,
    tilt_angle,
    total_expenses,
    total_income,
)


def _entry(entry_id: str, amount: str, is_income: bool) -> Entry:
    return Entry(
        id=entry_id,
        name=f"item-{entry_id}",
        amount=Decimal(amount),
        is_income=is_income,
        date=datetime(2025, 5, 22, tzinfo=timezone.utc),
    )


def _seed_like() -> EntryCollection:
    return EntryCollection.of(
        [
            _entry("a", "3000", True),
            _entry("b", "1200", False),
            _entry("c", "400", False),
            _entry("d", "500", True),
        ]
    )


def test_totals_split_income_and_expenses() -> None:
    """Income and expenses should be summed separately."""
    collection = _seed_like()

    assert total_income(collection) == Decimal("3500")
    assert total_expenses(collection) == Decimal("1600")
    assert balance(collection) == Decimal("1900")


def test_totals_are_zero_for_empty_collection() -> None:
    """An empty collection should aggregate to zero everywhere."""
    collection = EntryCollection()

    assert total_income(collection) == Decimal("0")
    assert total_expenses(collection) == Decimal("0")
    assert balance(collection) == Decimal("0")


@pytest.mark.parametrize(
    "amounts",
    [
        [("1", True)],
        [("4.50", False)],
        [("0.01", True), ("999999.99", False), ("12.34", True)],
    ],
)
def test_balance_matches_income_minus_expenses(amounts) -> None:
    """Balance should always equal income minus expenses exactly."""
    collection = EntryCollection.of(
        _entry(str(index), amount, is_income)
        for index, (amount, is_income) in enumerate(amounts)
    )

    assert balance(collection) == (
        total_income(collection) - total_expenses(collection)
    )


def test_summarize_accepts_one_shot_iterables() -> None:
    """summarize should not exhaust a generator before both totals."""
    entries = (entry for entry in _seed_like())

    summary = summarize(entries)

    assert summary == BalanceSummary(
        total_income=Decimal("3500"),
        total_expenses=Decimal("1600"),
    )
    assert summary.balance == Decimal("1900")


def test_tilt_angle_is_zero_without_amounts() -> None:
    """No income and no expenses should keep the scale level."""
    assert tilt_angle(0, 0) == 0


@pytest.mark.parametrize("amount", ["0.01", "1", "1600", "1e9"])
def test_tilt_angle_is_zero_for_equal_sides(amount) -> None:
    """Equal sides should keep the scale level."""
    assert tilt_angle(Decimal(amount), Decimal(amount)) == 0


def test_tilt_angle_follows_ratio() -> None:
    """The tilt should be the signed difference over the larger side."""
    assert tilt_angle(Decimal("3500"), Decimal("1600")) == pytest.approx(
        1900 / 3500 * 30
    )
    assert tilt_angle(Decimal("1600"), Decimal("3500")) == pytest.approx(
        -1900 / 3500 * 30
    )


def test_tilt_angle_saturates_at_one_sided_totals() -> None:
    """A single non-empty side should give the full tilt."""
    assert tilt_angle(Decimal("100"), Decimal("0")) == 30
    assert tilt_angle(Decimal("0"), Decimal("100")) == -30


@pytest.mark.parametrize(
    ("income", "expenses"),
    [(0, 1), (1, 0), (5, 7), (1e-6, 1e6), (123456, 0.5), (2, 2)],
)
def test_tilt_angle_stays_within_bounds(income, expenses) -> None:
    """The tilt should stay within [-30, 30] for non-negative totals."""
    angle = tilt_angle(income, expenses)

    assert -30 <= angle <= 30


def test_ball_size_is_base_for_empty_side() -> None:
    """A side without amount should render at base size."""
    assert ball_size(0, 500, 70, 140) == 70
    assert ball_size(Decimal("0"), Decimal("0"), 24, 40) == 24


@pytest.mark.parametrize("amount", ["1", "250", "3500"])
def test_ball_size_is_max_for_ties(amount) -> None:
    """Equal positive amounts should both render at max size."""
    value = Decimal(amount)

    assert ball_size(value, value, 70, 140) == 140


def test_ball_size_scales_smaller_side() -> None:
    """The smaller side should grow proportionally above base size."""
    assert ball_size(Decimal("1600"), Decimal("3500"), 70, 140) == (
        pytest.approx(70 + 70 * 1600 / 3500)
    )
    assert ball_size(Decimal("3500"), Decimal("1600"), 70, 140) == 140


def test_ball_size_uses_floor_of_one_for_tiny_amounts() -> None:
    """Amounts below one should be measured against a floor of one."""
    assert ball_size(Decimal("0.5"), Decimal("0.25"), 70, 140) == (
        pytest.approx(105)
    )


def test_scale_geometry_puts_expenses_on_the_left() -> None:
    """scale_geometry should size each pan from its own side."""
    geometry = scale_geometry(
        Decimal("3500"),
        Decimal("1600"),
        APP_BALL_SIZING,
    )

    assert geometry.tilt_angle == pytest.approx(1900 / 3500 * 30)
    assert geometry.income_ball_size == 140
    assert geometry.expense_ball_size == pytest.approx(70 + 70 * 1600 / 3500)


def test_scale_geometry_for_widget_sizes() -> None:
    """Widget sizing should use its own bounds."""
    geometry = scale_geometry(Decimal("0"), Decimal("0"), WIDGET_BALL_SIZING)

    assert geometry.tilt_angle == 0
    assert geometry.income_ball_size == 24
    assert geometry.expense_ball_size == 24


def test_ball_size_tie_below_one_is_measured_against_floor() -> None:
    """Ties below one unit stay under max size because of the floor."""
    value = Decimal("0.5")

    assert ball_size(value, value, 70, 140) == pytest.approx(105)
