"""Use cases listing expense records for a window or a category."""

from datetime import date, datetime

from src.application.ports.expense_source import ExpenseSourcePort
from src.application.use_cases.cycle_utils import resolve_cycle
from src.domain.constants import DEFAULT_EXPENSE_LIST_LIMIT
from src.domain.models import Expense
from src.domain.services.normalization import normalize_category_id
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings


class ListCycleExpensesUseCase:
    """Return recent expenses, newest first, within a date window."""

    def __init__(
        self,
        expense_source: ExpenseSourcePort,
        settings: BudgetSettings,
        logger=None,
    ) -> None:
        self._expense_source = expense_source
        self._settings = settings
        self._logger = logger or get_app_logger()

    def execute(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
        limit: int = DEFAULT_EXPENSE_LIST_LIMIT,
        reference: date | datetime | None = None,
    ) -> list[Expense]:
        """Return at most ``limit`` expenses between start and end.

        Args:
            start: Lower bound; the current cycle start when None.
            end: Upper bound; the current cycle end when None.
            limit: Maximum number of expenses to return.
            reference: Moment counted as now. Defaults to now.

        Returns:
            list[Expense]: Expenses sorted by date, newest first.
        """
        cycle = resolve_cycle(self._settings, None, reference)
        start = start or cycle.start_date
        end = end or cycle.end_date
        expenses = self._expense_source.fetch_expenses(start, end)
        newest_first = sorted(
            expenses,
            key=lambda expense: expense.date.replace(tzinfo=None),
            reverse=True,
        )
        selected = newest_first[: max(limit, 0)]
        self._logger.info(
            f"Listing {len(selected)} of {len(expenses)} expenses between "
            f"{start.date()} and {end.date()}"
        )
        return selected


class ListCategoryExpensesUseCase:
    """Return one category's expenses within a billing cycle."""

    def __init__(
        self,
        expense_source: ExpenseSourcePort,
        settings: BudgetSettings,
        logger=None,
    ) -> None:
        self._expense_source = expense_source
        self._settings = settings
        self._logger = logger or get_app_logger()

    def execute(
        self,
        category_id: str,
        cycle_id: str | None = None,
        reference: date | datetime | None = None,
    ) -> list[Expense]:
        """Return the category's expenses in the cycle, newest first.

        Args:
            category_id: Category identifier to filter on.
            cycle_id: Optional cycle identifier; current cycle if None.
            reference: Moment counted as now. Defaults to now.

        Returns:
            list[Expense]: Matching expenses sorted by date, newest first.
        """
        cycle = resolve_cycle(self._settings, cycle_id, reference)
        wanted = normalize_category_id(category_id)
        expenses = [
            expense
            for expense in self._expense_source.fetch_expenses(
                cycle.start_date,
                cycle.end_date,
            )
            if normalize_category_id(expense.category) == wanted
            and cycle.contains(expense.date)
        ]
        self._logger.info(
            f"Found {len(expenses)} '{wanted}' expenses in cycle "
            f"{cycle.start_date.date()}"
        )
        return sorted(
            expenses,
            key=lambda expense: expense.date.replace(tzinfo=None),
            reverse=True,
        )


__all__ = ["ListCycleExpensesUseCase", "ListCategoryExpensesUseCase"]
