"""Domain constants for billing cycles and budget analytics."""

from decimal import Decimal

MIN_BILLING_DAY = 1
MAX_BILLING_DAY = 28
DEFAULT_BILLING_DAY = 15

DEFAULT_MONTHLY_LIMIT = Decimal("100000")
DEFAULT_CURRENCY_SYMBOL = "Rs."

TOP_EXPENSES_LIMIT = 5
TREND_THRESHOLD_PERCENT = Decimal("5")
UNKNOWN_CATEGORY_NAME = "Unknown"

# Remaining budget below this share of the limit flags a warning.
WARNING_REMAINING_RATIO = Decimal("0.1")
DEFAULT_ALERT_THRESHOLDS = (50, 75, 90, 100)

DEFAULT_HISTORY_COUNT = 6
DEFAULT_EXPENSE_LIST_LIMIT = 20
DAILY_TREND_DAYS = 7
NO_MERCHANT_NAME = "N/A"

DEFAULT_CATEGORIES = (
    ("groceries", "Groceries", "ShoppingCart", "bg-green-500"),
    ("dining", "Dining", "Utensils", "bg-orange-500"),
    ("fuel", "Fuel", "Fuel", "bg-blue-500"),
    ("shopping", "Shopping", "ShoppingBag", "bg-pink-500"),
    ("subscriptions", "Subscriptions", "CreditCard", "bg-purple-500"),
    ("health", "Health", "Heart", "bg-red-500"),
    ("entertainment", "Entertainment", "Gamepad2", "bg-indigo-500"),
    ("transport", "Transport", "Car", "bg-cyan-500"),
    ("utilities", "Utilities", "Zap", "bg-yellow-500"),
    ("other", "Other", "MoreHorizontal", "bg-gray-500"),
)


__all__ = [
    "MIN_BILLING_DAY",
    "MAX_BILLING_DAY",
    "DEFAULT_BILLING_DAY",
    "DEFAULT_MONTHLY_LIMIT",
    "DEFAULT_CURRENCY_SYMBOL",
    "TOP_EXPENSES_LIMIT",
    "TREND_THRESHOLD_PERCENT",
    "UNKNOWN_CATEGORY_NAME",
    "WARNING_REMAINING_RATIO",
    "DEFAULT_ALERT_THRESHOLDS",
    "DEFAULT_HISTORY_COUNT",
    "DEFAULT_EXPENSE_LIST_LIMIT",
    "DAILY_TREND_DAYS",
    "NO_MERCHANT_NAME",
    "DEFAULT_CATEGORIES",
]
