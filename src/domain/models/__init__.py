"""Domain models package."""

from .billing import BillingCycle
from .expenses import Category, Expense
from .finance import (
    BudgetHealth,
    BudgetStatus,
    CategoryComparison,
    CategorySpending,
    CycleComparison,
    CycleHistory,
    CycleInsights,
    CycleSummary,
    DailySpending,
    MerchantSpending,
    MetricComparison,
    MetricsComparison,
    Trend,
)

__all__ = [
    "BillingCycle",
    "Category",
    "Expense",
    "BudgetHealth",
    "BudgetStatus",
    "CategoryComparison",
    "CategorySpending",
    "CycleComparison",
    "CycleHistory",
    "CycleInsights",
    "CycleSummary",
    "DailySpending",
    "MerchantSpending",
    "MetricComparison",
    "MetricsComparison",
    "Trend",
]
