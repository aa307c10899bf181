"""Tests for the widget CLI adapter."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from balance_scale.adapters import widget_cli
from balance_scale.application.use_cases.get_widget_timeline import (
    placeholder_entry,
)
from balance_scale.domain.models.balance import BalanceSummary


NOW = datetime(2025, 5, 27, 8, 0, tzinfo=timezone.utc)


class _Reader:
    def __init__(self, summary: BalanceSummary) -> None:
        self.summary = summary

    def read(self) -> BalanceSummary:
        return self.summary


def test_render_placeholder_lines() -> None:
    """The placeholder should lean towards income."""
    lines = widget_cli._render(placeholder_entry(NOW))

    assert lines == [
        "Balance Scale",
        "Expenses: $1,600.00 (ball 31.3)",
        "Income:   $3,500.00 (ball 40.0)",
        "Tilt:     +16.3° (income side)",
        "Balance:  $1,900.00",
        "Next refresh: 2025-05-27 08:05 UTC",
    ]


def test_main_prints_snapshot(monkeypatch, capsys) -> None:
    """The CLI should read the shared snapshot and print the widget."""
    summary = BalanceSummary(
        total_income=Decimal("500"),
        total_expenses=Decimal("1000"),
    )
    monkeypatch.setattr(widget_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        widget_cli,
        "build_snapshot_store",
        lambda: _Reader(summary),
    )

    widget_cli.main()

    output = capsys.readouterr().out
    assert "Expenses: $1,000.00 (ball 40.0)" in output
    assert "Tilt:     -15.0° (expense side)" in output
    assert "Balance:  -$500.00" in output


def test_main_prints_level_scale_for_empty_snapshot(
    monkeypatch,
    capsys,
) -> None:
    """An empty snapshot should render a level scale with base balls."""
    monkeypatch.setattr(widget_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        widget_cli,
        "build_snapshot_store",
        lambda: _Reader(BalanceSummary(Decimal("0"), Decimal("0"))),
    )

    widget_cli.main()

    output = capsys.readouterr().out
    assert "Tilt:     +0.0° (level)" in output
    assert "(ball 24.0)" in output
