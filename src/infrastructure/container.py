"""Composition root for wiring infrastructure adapters."""

from src.application.ports.expense_source import ExpenseSourcePort
from src.application.use_cases.compare_cycles import CompareCyclesUseCase
from src.application.use_cases.get_budget_status import GetBudgetStatusUseCase
from src.application.use_cases.get_cycle_history import GetCycleHistoryUseCase
from src.application.use_cases.get_cycle_insights import GetCycleInsightsUseCase
from src.application.use_cases.get_cycle_summary import GetCycleSummaryUseCase
from src.application.use_cases.list_cycle_expenses import (
    ListCategoryExpensesUseCase,
    ListCycleExpensesUseCase,
)
from src.infrastructure.json_expense_repository import JsonExpenseRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings


def build_settings() -> BudgetSettings:
    """Return settings sourced from the environment."""
    return BudgetSettings.from_env()


def build_expense_source(
    settings: BudgetSettings | None = None,
) -> ExpenseSourcePort:
    """Return the configured expense source adapter."""
    resolved = settings or build_settings()
    if resolved.expenses_file is None:
        raise RuntimeError(
            "No expense source configured. Set EXPENSES_FILE or add "
            "data/expenses.json."
        )
    return JsonExpenseRepository(resolved.expenses_file, logger=get_app_logger())


def build_cycle_summary_use_case(
    settings: BudgetSettings | None = None,
    expense_source: ExpenseSourcePort | None = None,
) -> GetCycleSummaryUseCase:
    """Return the cycle summary use case."""
    resolved = settings or build_settings()
    return GetCycleSummaryUseCase(
        expense_source or build_expense_source(resolved),
        resolved,
        logger=get_app_logger(),
    )


def build_cycle_history_use_case(
    settings: BudgetSettings | None = None,
    expense_source: ExpenseSourcePort | None = None,
) -> GetCycleHistoryUseCase:
    """Return the cycle history use case."""
    resolved = settings or build_settings()
    return GetCycleHistoryUseCase(
        expense_source or build_expense_source(resolved),
        resolved,
        logger=get_app_logger(),
    )


def build_cycle_insights_use_case(
    settings: BudgetSettings | None = None,
    expense_source: ExpenseSourcePort | None = None,
) -> GetCycleInsightsUseCase:
    """Return the cycle insights use case."""
    resolved = settings or build_settings()
    return GetCycleInsightsUseCase(
        expense_source or build_expense_source(resolved),
        resolved,
        logger=get_app_logger(),
    )


def build_compare_cycles_use_case(
    settings: BudgetSettings | None = None,
    expense_source: ExpenseSourcePort | None = None,
) -> CompareCyclesUseCase:
    """Return the cycle comparison use case."""
    resolved = settings or build_settings()
    return CompareCyclesUseCase(
        expense_source or build_expense_source(resolved),
        resolved,
        logger=get_app_logger(),
    )


def build_budget_status_use_case(
    settings: BudgetSettings | None = None,
    expense_source: ExpenseSourcePort | None = None,
) -> GetBudgetStatusUseCase:
    """Return the budget status use case."""
    resolved = settings or build_settings()
    return GetBudgetStatusUseCase(
        expense_source or build_expense_source(resolved),
        resolved,
        logger=get_app_logger(),
    )


def build_list_expenses_use_case(
    settings: BudgetSettings | None = None,
    expense_source: ExpenseSourcePort | None = None,
) -> ListCycleExpensesUseCase:
    """Return the recent expenses use case."""
    resolved = settings or build_settings()
    return ListCycleExpensesUseCase(
        expense_source or build_expense_source(resolved),
        resolved,
        logger=get_app_logger(),
    )


def build_category_expenses_use_case(
    settings: BudgetSettings | None = None,
    expense_source: ExpenseSourcePort | None = None,
) -> ListCategoryExpensesUseCase:
    """Return the per-category expenses use case."""
    resolved = settings or build_settings()
    return ListCategoryExpensesUseCase(
        expense_source or build_expense_source(resolved),
        resolved,
        logger=get_app_logger(),
    )


__all__ = [
    "build_settings",
    "build_expense_source",
    "build_cycle_summary_use_case",
    "build_cycle_history_use_case",
    "build_cycle_insights_use_case",
    "build_compare_cycles_use_case",
    "build_budget_status_use_case",
    "build_list_expenses_use_case",
    "build_category_expenses_use_case",
]
