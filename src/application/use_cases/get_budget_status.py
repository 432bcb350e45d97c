"""Use case to report the running cycle's budget position."""

from datetime import date, datetime

from src.application.ports.expense_source import ExpenseSourcePort
from src.application.use_cases.cycle_utils import resolve_cycle, summarize_window
from src.domain.models import BudgetHealth, BudgetStatus
from src.domain.services.summary import build_budget_status
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings


class GetBudgetStatusUseCase:
    """Compute remaining budget, daily allowance and alert status."""

    def __init__(
        self,
        expense_source: ExpenseSourcePort,
        settings: BudgetSettings,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            expense_source: Port providing the user's expenses.
            settings: Billing day, budget limit and alert thresholds.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._expense_source = expense_source
        self._settings = settings
        self._logger = logger or get_app_logger()

    def execute(
        self,
        reference: date | datetime | None = None,
    ) -> BudgetStatus:
        """Return the budget status of the current cycle.

        Args:
            reference: Moment counted as now. Defaults to now.

        Returns:
            BudgetStatus: Budget position for the running cycle.
        """
        now = reference if reference is not None else datetime.now()
        cycle = resolve_cycle(self._settings, None, now)
        summary, expenses = summarize_window(
            self._expense_source,
            self._settings,
            cycle,
            self._logger,
        )
        status = build_budget_status(
            summary,
            expenses,
            now,
            alert_thresholds=self._settings.alert_thresholds,
        )
        if status.status is BudgetHealth.DANGER:
            self._logger.warning(
                f"Budget exceeded for cycle {summary.cycle_id}: "
                f"spent={status.spent}, limit={status.limit}"
            )
        return status


__all__ = ["GetBudgetStatusUseCase", "BudgetStatus"]
