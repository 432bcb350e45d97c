"""Use case to compare two billing cycles."""

from datetime import date, datetime

from src.application.ports.expense_source import ExpenseSourcePort
from src.application.use_cases.cycle_utils import (
    previous_cycle,
    resolve_cycle,
    summarize_window,
)
from src.domain.models import CycleComparison
from src.domain.services.comparison import compare_cycles
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings


class CompareCyclesUseCase:
    """Compare a cycle against a baseline cycle."""

    def __init__(
        self,
        expense_source: ExpenseSourcePort,
        settings: BudgetSettings,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            expense_source: Port providing the user's expenses.
            settings: Billing day, budget limit and category catalog.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._expense_source = expense_source
        self._settings = settings
        self._logger = logger or get_app_logger()

    def execute(
        self,
        cycle_id_1: str | None = None,
        cycle_id_2: str | None = None,
        reference: date | datetime | None = None,
    ) -> CycleComparison:
        """Return the comparison of cycle 1 against cycle 2.

        Args:
            cycle_id_1: Newer cycle; the current cycle when None.
            cycle_id_2: Baseline cycle; the cycle before cycle 1 when None.
            reference: Moment counted as now. Defaults to now.

        Returns:
            CycleComparison: Overall, per-category and metric deltas.
        """
        cycle1 = resolve_cycle(self._settings, cycle_id_1, reference)
        if cycle_id_2 is None:
            cycle2 = previous_cycle(self._settings, cycle1)
        else:
            cycle2 = resolve_cycle(self._settings, cycle_id_2, reference)

        summary1, _ = summarize_window(
            self._expense_source, self._settings, cycle1, self._logger
        )
        summary2, _ = summarize_window(
            self._expense_source, self._settings, cycle2, self._logger
        )
        comparison = compare_cycles(summary1, summary2)
        self._logger.info(
            f"Compared cycles {summary1.cycle_id} vs {summary2.cycle_id}: "
            f"diff={comparison.total_spent_diff}, "
            f"trend={comparison.overall_trend.value}"
        )
        return comparison


__all__ = ["CompareCyclesUseCase", "CycleComparison"]
