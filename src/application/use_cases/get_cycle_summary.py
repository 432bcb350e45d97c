"""Use case to summarize spending for one billing cycle."""

from datetime import date, datetime

from src.application.ports.expense_source import ExpenseSourcePort
from src.application.use_cases.cycle_utils import resolve_cycle, summarize_window
from src.domain.models import CycleSummary
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings


class GetCycleSummaryUseCase:
    """Compute the summary of the current or an identified cycle."""

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
        cycle_id: str | None = None,
        reference: date | datetime | None = None,
    ) -> CycleSummary:
        """Return the summary for the requested cycle.

        Args:
            cycle_id: Optional ``YYYY-MM-DD`` identifier; current cycle if None.
            reference: Moment counted as now. Defaults to now.

        Returns:
            CycleSummary: Aggregated spending for the cycle.
        """
        cycle = resolve_cycle(self._settings, cycle_id, reference)
        summary, _ = summarize_window(
            self._expense_source,
            self._settings,
            cycle,
            self._logger,
        )
        return summary


__all__ = ["GetCycleSummaryUseCase", "CycleSummary"]
