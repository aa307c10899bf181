"""Streamlit dashboard entry point."""

from collections.abc import Sequence
import math

import altair as alt
import streamlit as st

from balance_scale.adapters.formatting import (
    format_entry_amount,
    format_money,
    format_tilt,
)
from balance_scale.application.entry_store import EntryStore
from balance_scale.application.use_cases.entry_filters import (
    EntryFilter,
    empty_state_message,
    filter_entries,
    list_title,
    to_collection_indices,
)
from balance_scale.application.use_cases.get_balance_view import (
    BalanceView,
    GetBalanceViewUseCase,
)
from balance_scale.domain.errors import ValidationError
from balance_scale.domain.models.entries import Entry
from balance_scale.infrastructure.container import build_entry_store
from balance_scale.infrastructure.logging.logger import get_usage_logger


STORE_KEY = "entry_store"
EXPENSE_COLOR = "#e76f51"
INCOME_COLOR = "#2e7d32"
BEAM_COLOR = "#8d99ae"
FILTER_OPTIONS = {
    "All": None,
    "Income": EntryFilter.INCOME,
    "Expenses": EntryFilter.EXPENSE,
}


def _get_store() -> EntryStore:
    """Return the session's entry store, loading it on first use."""
    if STORE_KEY not in st.session_state:
        st.session_state[STORE_KEY] = build_entry_store()
    return st.session_state[STORE_KEY]


def _build_scale_chart_data(
    view: BalanceView,
    half_beam: float = 1.0,
    drop: float = 0.35,
) -> tuple[list[dict[str, float]], list[dict[str, str | float]]]:
    """Compute beam end points and pan balls for the scale chart.

    Positive tilt lowers the right (income) end of the beam.

    Args:
        view: Totals and geometry to render.
        half_beam: Distance from the pivot to each beam end.
        drop: Vertical distance between a beam end and its ball.

    Returns:
        Tuple with the beam points and the ball rows.
    """
    radians = math.radians(view.geometry.tilt_angle)
    dx = half_beam * math.cos(radians)
    dy = half_beam * math.sin(radians)
    beam = [
        {"x": -dx, "y": dy},
        {"x": dx, "y": -dy},
    ]
    balls: list[dict[str, str | float]] = [
        {
            "side": "Expenses",
            "x": -dx,
            "y": dy - drop,
            "size": view.geometry.expense_ball_size,
            "amount_label": format_money(view.summary.total_expenses),
        },
        {
            "side": "Income",
            "x": dx,
            "y": -dy - drop,
            "size": view.geometry.income_ball_size,
            "amount_label": format_money(view.summary.total_income),
        },
    ]
    return beam, balls


def _render_scale(view: BalanceView, chart_size: int = 420) -> None:
    """Render the balance scale with Altair."""
    beam, balls = _build_scale_chart_data(view)
    x_scale = alt.Scale(domain=[-1.5, 1.5])
    y_scale = alt.Scale(domain=[-1.5, 1.0])

    beam_chart = alt.Chart(alt.Data(values=beam)).mark_line(
        strokeWidth=8,
        color=BEAM_COLOR,
    ).encode(
        x=alt.X("x:Q", scale=x_scale, axis=None),
        y=alt.Y("y:Q", scale=y_scale, axis=None),
    )
    fulcrum = alt.Chart(alt.Data(values=[{"x": 0.0, "y": -0.2}])).mark_point(
        shape="triangle-up",
        size=1800,
        filled=True,
        color=BEAM_COLOR,
    ).encode(
        x=alt.X("x:Q", scale=x_scale, axis=None),
        y=alt.Y("y:Q", scale=y_scale, axis=None),
    )
    ball_chart = alt.Chart(alt.Data(values=balls)).transform_calculate(
        area="datum.size * datum.size"
    ).mark_circle(opacity=0.9).encode(
        x=alt.X("x:Q", scale=x_scale, axis=None),
        y=alt.Y("y:Q", scale=y_scale, axis=None),
        size=alt.Size("area:Q", scale=None, legend=None),
        color=alt.Color(
            "side:N",
            scale=alt.Scale(
                domain=["Expenses", "Income"],
                range=[EXPENSE_COLOR, INCOME_COLOR],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("side:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )
    ball_labels = alt.Chart(alt.Data(values=balls)).mark_text(
        fontSize=14,
        fontWeight="bold",
        color="#ffffff",
    ).encode(
        x=alt.X("x:Q", scale=x_scale, axis=None),
        y=alt.Y("y:Q", scale=y_scale, axis=None),
        text="amount_label:N",
    )

    chart = alt.layer(fulcrum, beam_chart, ball_chart, ball_labels).properties(
        width=chart_size,
        height=int(chart_size * 0.7),
    ).configure_view(stroke=None)
    st.altair_chart(chart, width="stretch")
    st.caption(f"Tilt {format_tilt(view.geometry.tilt_angle)}")


def _render_summary(view: BalanceView) -> None:
    """Render income, expense and balance metrics."""
    income_col, expenses_col, balance_col = st.columns(3)
    income_col.metric("Income", format_money(view.summary.total_income))
    expenses_col.metric("Expenses", format_money(view.summary.total_expenses))
    balance_col.metric("Balance", format_money(view.summary.balance))


def _render_add_form(store: EntryStore) -> None:
    """Render the single entry form."""
    with st.form("add_entry", clear_on_submit=True):
        st.subheader("Add New Item")
        name = st.text_input("Name")
        amount = st.text_input("Amount", placeholder="0.00")
        kind = st.radio("Type", ["Income", "Expense"], horizontal=True)
        submitted = st.form_submit_button("Add")
    if not submitted:
        return
    try:
        entry = store.add(name, amount, is_income=kind == "Income")
    except ValidationError as exc:
        st.error(str(exc))
        return
    get_usage_logger().info(f"Entry added from dashboard: {entry.id}")
    st.success(f"Added {entry.name} ({format_entry_amount(entry)})")


def _parse_batch_lines(raw_text: str) -> list[tuple[str, str, bool]]:
    """Parse ``name, amount, income|expense`` lines into add-many items.

    Blank lines are skipped.

    Raises:
        ValidationError: If a line does not have three fields or an
            unknown type.
    """
    items: list[tuple[str, str, bool]] = []
    for line_number, line in enumerate(raw_text.splitlines(), start=1):
        if not line.strip():
            continue
        parts = [part.strip() for part in line.rsplit(",", 2)]
        if len(parts) != 3:
            raise ValidationError(
                f"Line {line_number}: expected 'name, amount, type'"
            )
        name, amount, kind = parts
        kind = kind.lower()
        if kind not in ("income", "expense"):
            raise ValidationError(
                f"Line {line_number}: type must be income or expense"
            )
        items.append((name, amount, kind == "income"))
    return items


def _render_batch_form(store: EntryStore) -> None:
    """Render the form adding several entries at once."""
    with st.form("add_entries", clear_on_submit=False):
        st.subheader("Add Several Items")
        raw_text = st.text_area(
            "One item per line",
            placeholder="Coffee, 4.50, expense\nBonus, 250, income",
        )
        submitted = st.form_submit_button("Add all")
    if not submitted:
        return
    try:
        created = store.add_many(_parse_batch_lines(raw_text))
    except ValidationError as exc:
        st.error(str(exc))
        return
    get_usage_logger().info(f"{len(created)} entries added from dashboard")
    st.success(f"Added {len(created)} items")


def _entry_rows(entries: Sequence[Entry]) -> list[dict[str, str]]:
    """Return table rows for the entries list."""
    return [
        {
            "Name": entry.name,
            "Date": entry.date.strftime("%b %d, %Y"),
            "Amount": format_entry_amount(entry),
        }
        for entry in entries
    ]


def _render_entries(store: EntryStore) -> None:
    """Render the filtered entries list with deletion."""
    choice = st.selectbox("Show", list(FILTER_OPTIONS), index=0)
    entry_filter = FILTER_OPTIONS[choice]
    st.subheader(list_title(entry_filter))

    collection = store.entries
    shown = filter_entries(collection, entry_filter)
    if not shown:
        st.info(empty_state_message(entry_filter))
        return

    st.dataframe(_entry_rows(shown), width="stretch", hide_index=True)
    labels = [
        f"{position + 1}. {entry.name} {format_entry_amount(entry)}"
        for position, entry in enumerate(shown)
    ]
    selected = st.multiselect("Select items to delete", labels)
    if st.button("Delete selected", disabled=not selected):
        positions = [labels.index(label) for label in selected]
        removed = store.delete(
            to_collection_indices(collection, shown, positions)
        )
        get_usage_logger().info(f"{len(removed)} entries deleted")
        st.rerun()


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Balance Scale", layout="wide")
    st.title("Balance Scale")

    store = _get_store()
    if store.last_error is not None:
        st.warning(f"Changes could not be saved: {store.last_error}")

    scale_col, forms_col = st.columns([3, 2])
    with forms_col:
        _render_add_form(store)
        _render_batch_form(store)

    view = GetBalanceViewUseCase().execute(store.entries)
    with scale_col:
        _render_scale(view)
        _render_summary(view)

    _render_entries(store)


if __name__ == "__main__":  # pragma: no cover
    main()
