"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from src.adapters.interface.presentation import (
    STATUS_LABELS,
    TREND_LABELS,
    category_color_by_id,
    format_currency,
    format_delta,
    format_percent,
    resolve_icon,
)
from src.domain.exceptions import ExpenseTrackerError
from src.domain.models import (
    BudgetStatus,
    Category,
    CycleComparison,
    CycleHistory,
    CycleInsights,
    CycleSummary,
)
from src.domain.services.comparison import compare_cycles
from src.domain.services.normalization import normalize_category_id
from src.infrastructure.container import (
    build_budget_status_use_case,
    build_cycle_history_use_case,
    build_cycle_insights_use_case,
    build_settings,
)
from src.infrastructure.settings import BudgetSettings


def _fetch_cycle_history(
    history_count: int,
    reference: date,
) -> CycleHistory:
    """Fetch the current and past cycle summaries."""
    use_case = build_cycle_history_use_case(build_settings())
    return use_case.execute(history_count=history_count, reference=reference)


@st.cache_data(show_spinner=False)
def _load_cycle_history(
    history_count: int,
    reference: date,
    schema_version: int = 1,
) -> CycleHistory:
    """Cached wrapper around _fetch_cycle_history."""
    _ = schema_version
    return _fetch_cycle_history(history_count, reference)


def _fetch_budget_status(reference: date) -> BudgetStatus:
    """Fetch the budget status of the running cycle."""
    use_case = build_budget_status_use_case(build_settings())
    return use_case.execute(reference=reference)


@st.cache_data(show_spinner=False)
def _load_budget_status(
    reference: date,
    schema_version: int = 1,
) -> BudgetStatus:
    """Cached wrapper around _fetch_budget_status."""
    _ = schema_version
    return _fetch_budget_status(reference)


def _fetch_cycle_insights(cycle_id: str, reference: date) -> CycleInsights:
    """Fetch the daily trend and top merchant of a cycle."""
    use_case = build_cycle_insights_use_case(build_settings())
    return use_case.execute(cycle_id=cycle_id, reference=reference)


@st.cache_data(show_spinner=False)
def _load_cycle_insights(
    cycle_id: str,
    reference: date,
    schema_version: int = 1,
) -> CycleInsights:
    """Cached wrapper around _fetch_cycle_insights."""
    _ = schema_version
    return _fetch_cycle_insights(cycle_id, reference)


def _cycle_label(summary: CycleSummary) -> str:
    """Return a human readable label for a cycle selector."""
    cycle = summary.cycle
    return (
        f"{cycle.start_date:%d %b %Y} - {cycle.end_date:%d %b %Y}"
    )


def _prepare_donut_chart_data(
    summary: CycleSummary,
    categories: Sequence[Category],
    currency_symbol: str,
    max_categories: int = 6,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        summary: Cycle summary with the category breakdown.
        categories: Category catalog used for colors.
        currency_symbol: Symbol used in labels.
        max_categories: Maximum categories to keep before grouping.

    Returns:
        Altair-ready rows with category, amount, labels and color.
    """
    breakdown = summary.category_breakdown
    top_items = breakdown[:max_categories]
    other_items = breakdown[max_categories:]
    data: list[dict[str, str | float]] = [
        {
            "category": item.category_name,
            "amount": float(item.amount),
            "amount_label": format_currency(item.amount, currency_symbol),
            "share_label": f"{item.percent_of_total:.1f}%",
            "color": category_color_by_id(item.category_id, categories),
        }
        for item in top_items
    ]
    other_amount = sum(
        (item.amount for item in other_items),
        start=Decimal("0"),
    )
    if other_items and other_amount != 0:
        other_share = sum(
            (item.percent_of_total for item in other_items),
            start=Decimal("0"),
        )
        data.append(
            {
                "category": "Other",
                "amount": float(other_amount),
                "amount_label": format_currency(other_amount, currency_symbol),
                "share_label": f"{other_share:.1f}%",
                "color": "#6b7280",
            }
        )
    return data


def _render_category_chart(
    data: list[dict[str, str | float]],
    title: str,
    chart_size: int = 300,
) -> None:
    """Render a donut chart of spending by category."""
    if not data:
        st.info("No expenses recorded in this cycle yet.")
        return
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                domain=[row["category"] for row in data],
                range=[row["color"] for row in data],
            ),
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.35)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(stroke=None)
    st.subheader(title)
    st.altair_chart(chart, width="stretch")


def _top_expense_rows(
    summary: CycleSummary,
    settings: BudgetSettings,
) -> list[dict[str, str]]:
    """Return table rows for the largest expenses of a cycle."""
    catalog = {category.id: category for category in settings.categories}
    rows = []
    for expense in summary.top_expenses:
        category = catalog.get(normalize_category_id(expense.category))
        rows.append(
            {
                "Date": f"{expense.date:%Y-%m-%d}",
                "Category": (
                    f"{resolve_icon(category.icon if category else None)} "
                    f"{category.name if category else expense.category}"
                ),
                "Merchant": expense.merchant or "-",
                "Amount": format_currency(
                    expense.amount,
                    settings.currency_symbol,
                ),
            }
        )
    return rows


def _daily_trend_rows(
    insights: CycleInsights,
    currency_symbol: str,
) -> list[dict[str, str | float | int]]:
    """Return Altair-ready rows for the daily spending bar chart."""
    return [
        {
            "day": f"{item.day:%a %d}",
            "amount": float(item.total),
            "amount_label": format_currency(item.total, currency_symbol),
            "count": item.expense_count,
        }
        for item in insights.daily_trend
    ]


def _render_insights(insights: CycleInsights, currency_symbol: str) -> None:
    """Render the daily spending trend and the top merchant."""
    data = _daily_trend_rows(insights, currency_symbol)
    st.subheader(f"Last {len(data)} days")
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("day:N", sort=None, title=None),
        y=alt.Y("amount:Q", title=None),
        tooltip=[
            alt.Tooltip("day:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("count:Q"),
        ],
    )
    st.altair_chart(chart, width="stretch")
    merchant = insights.top_merchant
    st.metric(
        "Top merchant",
        merchant.name,
        format_currency(merchant.total, currency_symbol)
        if merchant.total
        else None,
        delta_color="off",
    )


def _comparison_rows(
    comparison: CycleComparison,
    currency_symbol: str,
) -> list[dict[str, str]]:
    """Return table rows for the per-category comparison."""
    return [
        {
            "Category": item.category_name,
            comparison.cycle1.cycle_id: format_currency(
                item.cycle1_amount,
                currency_symbol,
            ),
            comparison.cycle2.cycle_id: format_currency(
                item.cycle2_amount,
                currency_symbol,
            ),
            "Change": format_delta(item.difference, currency_symbol),
            "Change %": format_percent(item.percent_change),
            "Trend": TREND_LABELS[item.trend],
        }
        for item in comparison.category_comparisons
    ]


def _render_summary(
    summary: CycleSummary,
    settings: BudgetSettings,
    status: BudgetStatus | None,
) -> None:
    """Render headline metrics, chart and top expenses for a cycle."""
    symbol = settings.currency_symbol
    spent_col, budget_col, daily_col = st.columns(3)
    spent_col.metric(
        "Spent",
        format_currency(summary.total_spent, symbol),
        f"{summary.percent_used:.1f}% of budget",
        delta_color="inverse",
    )
    budget_col.metric(
        "Budget",
        format_currency(summary.budget_limit, symbol),
        STATUS_LABELS[status.status] if status else None,
        delta_color="off",
    )
    daily_col.metric(
        "Daily average",
        format_currency(summary.avg_daily_spending, symbol),
    )
    if status is not None:
        st.caption(
            f"{status.days_remaining} days left, "
            f"{format_currency(status.daily_budget, symbol)} per day, "
            f"{format_currency(status.today_spent, symbol)} spent today"
        )
    _render_category_chart(
        _prepare_donut_chart_data(summary, settings.categories, symbol),
        "Spending by category",
    )
    st.subheader("Top expenses")
    st.dataframe(
        _top_expense_rows(summary, settings),
        width="stretch",
        hide_index=True,
    )


def _render_comparison(
    comparison: CycleComparison,
    currency_symbol: str,
) -> None:
    """Render overall deltas and the per-category comparison table."""
    metrics = comparison.metrics
    total_col, daily_col, count_col = st.columns(3)
    total_col.metric(
        "Total spent",
        format_currency(comparison.cycle1.total_spent, currency_symbol),
        f"{format_delta(comparison.total_spent_diff)} "
        f"({format_percent(comparison.total_spent_diff_percent)})",
        delta_color="inverse",
    )
    daily_col.metric(
        "Daily average",
        format_currency(metrics.avg_daily_spending.cycle1, currency_symbol),
        format_percent(metrics.avg_daily_spending.percent_change),
        delta_color="inverse",
    )
    count_col.metric(
        "Expenses",
        f"{comparison.cycle1.expense_count}",
        f"{metrics.expense_count.difference:+}",
        delta_color="off",
    )
    st.caption(
        f"Overall: {TREND_LABELS[comparison.overall_trend]}, "
        f"largest expense {format_delta(metrics.largest_expense.difference)}"
    )
    st.dataframe(
        _comparison_rows(comparison, currency_symbol),
        width="stretch",
        hide_index=True,
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Expense Cycles", layout="wide")
    st.title("Expense Cycles")

    try:
        settings = build_settings()
        history = _load_cycle_history(6, date.today())
    except (ExpenseTrackerError, RuntimeError) as exc:
        st.warning(str(exc))
        return

    summaries = [history.current, *history.past]
    labels = [_cycle_label(summary) for summary in summaries]
    page = st.sidebar.selectbox("Page", ["Cycle", "Compare"])

    if page == "Cycle":
        selected = st.sidebar.selectbox(
            "Cycle",
            range(len(summaries)),
            format_func=lambda index: labels[index],
        )
        summary = summaries[selected]
        status = (
            _load_budget_status(date.today())
            if summary is history.current
            else None
        )
        st.header(labels[selected])
        _render_summary(summary, settings, status)
        _render_insights(
            _load_cycle_insights(summary.cycle_id, date.today()),
            settings.currency_symbol,
        )
        return

    if len(summaries) < 2:
        st.info("At least two cycles are needed for a comparison.")
        return
    first = st.sidebar.selectbox(
        "Cycle",
        range(len(summaries)),
        format_func=lambda index: labels[index],
    )
    second = st.sidebar.selectbox(
        "Compared with",
        range(len(summaries)),
        index=min(first + 1, len(summaries) - 1),
        format_func=lambda index: labels[index],
    )
    st.header(f"{labels[first]} vs {labels[second]}")
    _render_comparison(
        compare_cycles(summaries[first], summaries[second]),
        settings.currency_symbol,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
