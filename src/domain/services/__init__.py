"""Domain services package."""

from .billing_cycle import (
    add_months,
    compute_billing_cycle,
    cycle_for_date,
    end_of_day,
    is_in_cycle,
    past_billing_cycles,
    start_of_day,
)
from .comparison import classify_trend, compare_cycles
from .cycle_identity import cycle_id, parse_cycle_id
from .normalization import normalize_category_id, normalize_text
from .summary import (
    build_budget_status,
    daily_spending_trend,
    summarize_cycle,
    top_merchant,
)
from .validation import validate_billing_day, validate_budget_limit

__all__ = [
    "add_months",
    "compute_billing_cycle",
    "cycle_for_date",
    "end_of_day",
    "is_in_cycle",
    "past_billing_cycles",
    "start_of_day",
    "classify_trend",
    "compare_cycles",
    "cycle_id",
    "parse_cycle_id",
    "normalize_category_id",
    "normalize_text",
    "build_budget_status",
    "daily_spending_trend",
    "summarize_cycle",
    "top_merchant",
    "validate_billing_day",
    "validate_budget_limit",
]
