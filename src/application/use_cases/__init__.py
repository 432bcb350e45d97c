"""Application use cases package."""

from .compare_cycles import CompareCyclesUseCase, CycleComparison
from .get_budget_status import BudgetStatus, GetBudgetStatusUseCase
from .get_cycle_history import CycleHistory, GetCycleHistoryUseCase
from .get_cycle_insights import CycleInsights, GetCycleInsightsUseCase
from .get_cycle_summary import CycleSummary, GetCycleSummaryUseCase
from .list_cycle_expenses import (
    ListCategoryExpensesUseCase,
    ListCycleExpensesUseCase,
)

__all__ = [
    "CompareCyclesUseCase",
    "CycleComparison",
    "BudgetStatus",
    "GetBudgetStatusUseCase",
    "CycleHistory",
    "GetCycleHistoryUseCase",
    "CycleInsights",
    "GetCycleInsightsUseCase",
    "CycleSummary",
    "GetCycleSummaryUseCase",
    "ListCategoryExpensesUseCase",
    "ListCycleExpensesUseCase",
]
