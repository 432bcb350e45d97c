"""Domain models for cycle summaries, comparisons and budget status."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from .billing import BillingCycle
from .expenses import Expense


class Trend(str, Enum):
    """Direction of a spending change between two cycles."""

    IMPROVED = "improved"
    STABLE = "stable"
    WORSENED = "worsened"


class BudgetHealth(str, Enum):
    """Traffic-light status of the remaining budget."""

    GOOD = "good"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class CategorySpending:
    """Amount spent in one category during a cycle."""

    category_id: str
    category_name: str
    amount: Decimal
    expense_count: int
    percent_of_total: Decimal


@dataclass(frozen=True)
class CycleSummary:
    """Aggregated spending picture for one billing cycle.

    Attributes:
        cycle: Billing cycle covered by the summary.
        cycle_id: Identifier derived from the cycle start date.
        total_spent: Sum of expense amounts in the cycle.
        budget_limit: Budget configured for the cycle.
        percent_used: Share of the budget spent, in percent.
        is_over_budget: Whether spending exceeds the budget.
        expense_count: Number of expenses in the cycle.
        avg_daily_spending: Total spent divided by elapsed days.
        category_breakdown: Per-category totals, largest first.
        top_expenses: Largest expenses, largest first.
    """

    cycle: BillingCycle
    cycle_id: str
    total_spent: Decimal
    budget_limit: Decimal
    percent_used: Decimal
    is_over_budget: bool
    expense_count: int
    avg_daily_spending: Decimal
    category_breakdown: list[CategorySpending]
    top_expenses: list[Expense]


@dataclass(frozen=True)
class CategoryComparison:
    """Change in one category's spending between two cycles."""

    category_id: str
    category_name: str
    cycle1_amount: Decimal
    cycle2_amount: Decimal
    difference: Decimal
    percent_change: Decimal
    trend: Trend


@dataclass(frozen=True)
class MetricComparison:
    """Values of one metric for both cycles.

    ``percent_change`` is None for metrics that do not report one.
    """

    cycle1: Decimal
    cycle2: Decimal
    difference: Decimal
    percent_change: Decimal | None = None


@dataclass(frozen=True)
class MetricsComparison:
    """Fixed set of cross-cycle metrics."""

    avg_daily_spending: MetricComparison
    largest_expense: MetricComparison
    expense_count: MetricComparison


@dataclass(frozen=True)
class CycleComparison:
    """Structured difference between two cycle summaries.

    Attributes:
        cycle1: Summary of the newer cycle.
        cycle2: Summary of the older cycle used as the baseline.
        total_spent_diff: cycle1 total minus cycle2 total.
        total_spent_diff_percent: Change relative to the cycle2 total.
        budget_performance_diff: Difference in percent of budget used.
        category_comparisons: Per-category changes, largest swing first.
        metrics: Average daily spend, largest expense and count deltas.
        overall_trend: Trend of the total spend.
    """

    cycle1: CycleSummary
    cycle2: CycleSummary
    total_spent_diff: Decimal
    total_spent_diff_percent: Decimal
    budget_performance_diff: Decimal
    category_comparisons: list[CategoryComparison]
    metrics: MetricsComparison
    overall_trend: Trend


@dataclass(frozen=True)
class BudgetStatus:
    """Budget position for the running cycle."""

    cycle: BillingCycle
    spent: Decimal
    limit: Decimal
    remaining: Decimal
    percent_used: int
    days_remaining: int
    daily_budget: Decimal
    today_spent: Decimal
    is_over_budget: bool
    status: BudgetHealth
    alert_thresholds_reached: list[int]


@dataclass(frozen=True)
class DailySpending:
    """Total spent on one calendar day."""

    day: date
    total: Decimal
    expense_count: int


@dataclass(frozen=True)
class MerchantSpending:
    """Merchant with the largest total spend in a set of expenses."""

    name: str
    total: Decimal


@dataclass(frozen=True)
class CycleInsights:
    """Recent daily spending and top merchant for one billing cycle.

    Attributes:
        cycle_id: Identifier of the cycle the insights describe.
        daily_trend: Per-day totals for the trailing days, oldest first.
        top_merchant: Merchant with the highest total in the cycle.
    """

    cycle_id: str
    daily_trend: list[DailySpending]
    top_merchant: MerchantSpending


@dataclass(frozen=True)
class CycleHistory:
    """Current cycle summary plus past summaries, most recent first."""

    current: CycleSummary
    past: list[CycleSummary]

    def find(self, cycle_id: str) -> CycleSummary | None:
        """Return the summary with the given identifier, if loaded."""
        if self.current.cycle_id == cycle_id:
            return self.current
        for summary in self.past:
            if summary.cycle_id == cycle_id:
                return summary
        return None


__all__ = [
    "Trend",
    "BudgetHealth",
    "CategorySpending",
    "CycleSummary",
    "CategoryComparison",
    "MetricComparison",
    "MetricsComparison",
    "CycleComparison",
    "BudgetStatus",
    "DailySpending",
    "MerchantSpending",
    "CycleInsights",
    "CycleHistory",
]
