"""Domain services comparing two cycle summaries."""

from decimal import Decimal

from src.domain.constants import TREND_THRESHOLD_PERCENT, UNKNOWN_CATEGORY_NAME
from src.domain.models import (
    CategoryComparison,
    CategorySpending,
    CycleComparison,
    CycleSummary,
    MetricComparison,
    MetricsComparison,
    Trend,
)
from src.utils.decimal_utils import coerce_decimal, percent_of


def classify_trend(percent_change: Decimal) -> Trend:
    """Classify a percent change against the stability band.

    Args:
        percent_change: Change relative to the baseline, in percent.

    Returns:
        Trend: ``improved`` below -5%, ``worsened`` above +5%, else stable.
    """
    if percent_change < -TREND_THRESHOLD_PERCENT:
        return Trend.IMPROVED
    if percent_change > TREND_THRESHOLD_PERCENT:
        return Trend.WORSENED
    return Trend.STABLE


def compare_cycles(
    summary1: CycleSummary,
    summary2: CycleSummary,
) -> CycleComparison:
    """Compare a cycle summary against a baseline summary.

    Args:
        summary1: Summary of the newer cycle.
        summary2: Summary of the older cycle used as the baseline.

    Returns:
        CycleComparison: Overall, per-category and metric deltas.
    """
    total_spent_diff = summary1.total_spent - summary2.total_spent
    total_spent_diff_percent = percent_of(total_spent_diff, summary2.total_spent)

    return CycleComparison(
        cycle1=summary1,
        cycle2=summary2,
        total_spent_diff=total_spent_diff,
        total_spent_diff_percent=total_spent_diff_percent,
        budget_performance_diff=summary1.percent_used - summary2.percent_used,
        category_comparisons=_compare_categories(
            summary1.category_breakdown,
            summary2.category_breakdown,
        ),
        metrics=_compare_metrics(summary1, summary2),
        overall_trend=classify_trend(total_spent_diff_percent),
    )


def _compare_categories(
    breakdown1: list[CategorySpending],
    breakdown2: list[CategorySpending],
) -> list[CategoryComparison]:
    by_id1 = {item.category_id: item for item in breakdown1}
    by_id2 = {item.category_id: item for item in breakdown2}
    category_ids = list(by_id1)
    category_ids.extend(
        category_id for category_id in by_id2 if category_id not in by_id1
    )

    comparisons: list[CategoryComparison] = []
    for category_id in category_ids:
        item1 = by_id1.get(category_id)
        item2 = by_id2.get(category_id)
        amount1 = item1.amount if item1 else Decimal("0")
        amount2 = item2.amount if item2 else Decimal("0")
        difference = amount1 - amount2
        percent_change = percent_of(difference, amount2)
        comparisons.append(
            CategoryComparison(
                category_id=category_id,
                category_name=_category_name(item1, item2),
                cycle1_amount=amount1,
                cycle2_amount=amount2,
                difference=difference,
                percent_change=percent_change,
                trend=classify_trend(percent_change),
            )
        )
    comparisons.sort(key=lambda item: abs(item.difference), reverse=True)
    return comparisons


def _compare_metrics(
    summary1: CycleSummary,
    summary2: CycleSummary,
) -> MetricsComparison:
    avg1 = summary1.avg_daily_spending
    avg2 = summary2.avg_daily_spending
    largest1 = _largest_expense(summary1)
    largest2 = _largest_expense(summary2)
    count1 = Decimal(summary1.expense_count)
    count2 = Decimal(summary2.expense_count)
    return MetricsComparison(
        avg_daily_spending=MetricComparison(
            cycle1=avg1,
            cycle2=avg2,
            difference=avg1 - avg2,
            percent_change=percent_of(avg1 - avg2, avg2),
        ),
        largest_expense=MetricComparison(
            cycle1=largest1,
            cycle2=largest2,
            difference=largest1 - largest2,
        ),
        expense_count=MetricComparison(
            cycle1=count1,
            cycle2=count2,
            difference=count1 - count2,
            percent_change=percent_of(count1 - count2, count2),
        ),
    )


def _largest_expense(summary: CycleSummary) -> Decimal:
    if not summary.top_expenses:
        return Decimal("0")
    return coerce_decimal(summary.top_expenses[0].amount)


def _category_name(
    item1: CategorySpending | None,
    item2: CategorySpending | None,
) -> str:
    if item1 and item1.category_name:
        return item1.category_name
    if item2 and item2.category_name:
        return item2.category_name
    return UNKNOWN_CATEGORY_NAME


__all__ = ["classify_trend", "compare_cycles"]
