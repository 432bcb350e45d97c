"""CLI adapter printing a billing cycle report.

Prints the summary of the current cycle (or the cycle named by
``REPORT_CYCLE_ID``), the running budget status, and the comparison with
the previous cycle.
"""

import os

from src.adapters.interface.presentation import (
    STATUS_LABELS,
    TREND_LABELS,
    format_currency,
    format_delta,
    format_percent,
)
from src.domain.exceptions import ExpenseTrackerError
from src.infrastructure.container import (
    build_budget_status_use_case,
    build_compare_cycles_use_case,
    build_cycle_summary_use_case,
    build_expense_source,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def main() -> None:
    """Run the cycle report."""
    logger = get_app_logger()
    try:
        settings = build_settings()
        expense_source = build_expense_source(settings)
    except (ExpenseTrackerError, RuntimeError) as exc:
        logger.error(str(exc))
        return

    cycle_id = os.getenv("REPORT_CYCLE_ID") or None
    get_usage_logger().info(f"cycle_report_cli run cycle_id={cycle_id}")
    symbol = settings.currency_symbol

    try:
        summary = build_cycle_summary_use_case(
            settings, expense_source
        ).execute(cycle_id=cycle_id)
        comparison = build_compare_cycles_use_case(
            settings, expense_source
        ).execute(cycle_id_1=cycle_id)
    except ExpenseTrackerError as exc:
        logger.error(str(exc))
        return

    cycle = summary.cycle
    print(
        f"Cycle {summary.cycle_id} "
        f"({cycle.start_date.date()} -> {cycle.end_date.date()}, "
        f"day {cycle.days_elapsed}/{cycle.days_total})"
    )
    print(
        f"Spent {format_currency(summary.total_spent, symbol)} of "
        f"{format_currency(summary.budget_limit, symbol)} "
        f"({summary.percent_used:.1f}%), "
        f"{summary.expense_count} expenses, "
        f"{format_currency(summary.avg_daily_spending, symbol)}/day"
    )
    for item in summary.category_breakdown:
        print(
            f"  {item.category_name}: "
            f"{format_currency(item.amount, symbol)} "
            f"({item.percent_of_total:.1f}%, {item.expense_count} expenses)"
        )

    if cycle_id is None:
        status = build_budget_status_use_case(
            settings, expense_source
        ).execute()
        print(
            f"Budget: {STATUS_LABELS[status.status]}, "
            f"remaining {format_currency(status.remaining, symbol)}, "
            f"{format_currency(status.daily_budget, symbol)}/day for "
            f"{status.days_remaining} days"
        )

    print(
        f"Versus {comparison.cycle2.cycle_id}: "
        f"{format_delta(comparison.total_spent_diff, symbol)} "
        f"({format_percent(comparison.total_spent_diff_percent)}), "
        f"{TREND_LABELS[comparison.overall_trend]}"
    )
    for item in comparison.category_comparisons:
        print(
            f"  {item.category_name}: "
            f"{format_delta(item.difference, symbol)} "
            f"({format_percent(item.percent_change)}) "
            f"{TREND_LABELS[item.trend]}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
