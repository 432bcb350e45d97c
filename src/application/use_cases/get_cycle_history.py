"""Use case to load the current cycle and its predecessors."""

from datetime import date, datetime

from src.application.ports.expense_source import ExpenseSourcePort
from src.application.use_cases.cycle_utils import summarize_window
from src.domain.constants import DEFAULT_HISTORY_COUNT
from src.domain.models import CycleHistory
from src.domain.services.billing_cycle import (
    compute_billing_cycle,
    past_billing_cycles,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings


class GetCycleHistoryUseCase:
    """Summarize the current cycle and a number of past cycles."""

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
        history_count: int = DEFAULT_HISTORY_COUNT,
        reference: date | datetime | None = None,
    ) -> CycleHistory:
        """Return the current summary and past summaries, newest first.

        Args:
            history_count: Number of past cycles to include.
            reference: Moment counted as now. Defaults to now.

        Returns:
            CycleHistory: Current and past cycle summaries.
        """
        now = reference if reference is not None else datetime.now()
        billing_day = self._settings.billing_day
        current_cycle = compute_billing_cycle(billing_day, now)
        past_cycles = past_billing_cycles(billing_day, history_count, now)

        current, _ = summarize_window(
            self._expense_source,
            self._settings,
            current_cycle,
            self._logger,
        )
        past = [
            summarize_window(
                self._expense_source,
                self._settings,
                cycle,
                self._logger,
            )[0]
            for cycle in past_cycles
        ]
        self._logger.info(
            f"Loaded cycle history: current={current.cycle_id}, "
            f"past={len(past)}"
        )
        return CycleHistory(current=current, past=past)


__all__ = ["GetCycleHistoryUseCase", "CycleHistory"]
