"""Domain package for billing cycle rules and spending analytics."""

from .constants import (
    DEFAULT_ALERT_THRESHOLDS,
    DEFAULT_BILLING_DAY,
    DEFAULT_CATEGORIES,
    DEFAULT_MONTHLY_LIMIT,
    MAX_BILLING_DAY,
    MIN_BILLING_DAY,
)
from .exceptions import (
    ConfigurationError,
    ExpenseTrackerError,
    InvalidCycleIdError,
    InvalidExpenseError,
)
from .models import (
    BillingCycle,
    BudgetHealth,
    BudgetStatus,
    Category,
    CategoryComparison,
    CategorySpending,
    CycleComparison,
    CycleHistory,
    CycleInsights,
    CycleSummary,
    DailySpending,
    Expense,
    MerchantSpending,
    MetricComparison,
    MetricsComparison,
    Trend,
)
from .services import (
    build_budget_status,
    classify_trend,
    compare_cycles,
    compute_billing_cycle,
    cycle_id,
    daily_spending_trend,
    parse_cycle_id,
    past_billing_cycles,
    summarize_cycle,
    top_merchant,
    validate_billing_day,
    validate_budget_limit,
)

__all__ = [
    "DEFAULT_ALERT_THRESHOLDS",
    "DEFAULT_BILLING_DAY",
    "DEFAULT_CATEGORIES",
    "DEFAULT_MONTHLY_LIMIT",
    "MAX_BILLING_DAY",
    "MIN_BILLING_DAY",
    "ConfigurationError",
    "ExpenseTrackerError",
    "InvalidCycleIdError",
    "InvalidExpenseError",
    "BillingCycle",
    "BudgetHealth",
    "BudgetStatus",
    "Category",
    "CategoryComparison",
    "CategorySpending",
    "CycleComparison",
    "CycleHistory",
    "CycleInsights",
    "CycleSummary",
    "DailySpending",
    "Expense",
    "MerchantSpending",
    "MetricComparison",
    "MetricsComparison",
    "Trend",
    "build_budget_status",
    "classify_trend",
    "compare_cycles",
    "compute_billing_cycle",
    "cycle_id",
    "daily_spending_trend",
    "parse_cycle_id",
    "past_billing_cycles",
    "summarize_cycle",
    "top_merchant",
    "validate_billing_day",
    "validate_budget_limit",
]
