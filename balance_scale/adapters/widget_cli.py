"""CLI adapter rendering the balance widget from the shared snapshot.

The widget never touches the entry collection. It reads the totals the
dashboard published and derives the scale with the shared aggregation
functions.
"""

from balance_scale.adapters.formatting import format_money, format_tilt
from balance_scale.application.use_cases.get_widget_timeline import (
    GetWidgetTimelineUseCase,
    WidgetTimelineEntry,
)
from balance_scale.infrastructure.container import build_snapshot_store
from balance_scale.infrastructure.logging.logger import get_app_logger


def _render(entry: WidgetTimelineEntry) -> list[str]:
    """Return the widget lines for a timeline entry."""
    summary = entry.summary
    geometry = entry.geometry
    if geometry.tilt_angle > 0:
        lean = "income side"
    elif geometry.tilt_angle < 0:
        lean = "expense side"
    else:
        lean = "level"
    return [
        "Balance Scale",
        f"Expenses: {format_money(summary.total_expenses)} "
        f"(ball {geometry.expense_ball_size:.1f})",
        f"Income:   {format_money(summary.total_income)} "
        f"(ball {geometry.income_ball_size:.1f})",
        f"Tilt:     {format_tilt(geometry.tilt_angle)} ({lean})",
        f"Balance:  {format_money(summary.balance)}",
        f"Next refresh: {entry.next_refresh:%Y-%m-%d %H:%M} UTC",
    ]


def main() -> None:
    """Print the widget for the current snapshot."""
    logger = get_app_logger()
    use_case = GetWidgetTimelineUseCase(
        reader=build_snapshot_store(),
        logger=logger,
    )
    entry = use_case.execute()
    for line in _render(entry):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
