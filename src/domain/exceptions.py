"""Domain exceptions for the expense tracker."""


class ExpenseTrackerError(Exception):
    """Base exception for expense tracker errors."""


class ConfigurationError(ExpenseTrackerError):
    """User settings are invalid (billing day, budget limit, catalog)."""


class InvalidCycleIdError(ExpenseTrackerError, ValueError):
    """A cycle identifier cannot be parsed back into a billing cycle."""


class InvalidExpenseError(ExpenseTrackerError, ValueError):
    """An expense record is missing fields or carries invalid values."""


__all__ = [
    "ExpenseTrackerError",
    "ConfigurationError",
    "InvalidCycleIdError",
    "InvalidExpenseError",
]
