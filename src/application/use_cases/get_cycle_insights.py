"""Use case to compute daily trend and top merchant insights."""

from datetime import date, datetime

from src.application.ports.expense_source import ExpenseSourcePort
from src.application.use_cases.cycle_utils import resolve_cycle
from src.domain.constants import DAILY_TREND_DAYS
from src.domain.models import CycleInsights
from src.domain.services.cycle_identity import cycle_id as build_cycle_id
from src.domain.services.summary import daily_spending_trend, top_merchant
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings


class GetCycleInsightsUseCase:
    """Summarize recent daily spending and the top merchant of a cycle."""

    def __init__(
        self,
        expense_source: ExpenseSourcePort,
        settings: BudgetSettings,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            expense_source: Port providing the user's expenses.
            settings: Billing day used to resolve cycles.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._expense_source = expense_source
        self._settings = settings
        self._logger = logger or get_app_logger()

    def execute(
        self,
        cycle_id: str | None = None,
        reference: date | datetime | None = None,
        days: int = DAILY_TREND_DAYS,
    ) -> CycleInsights:
        """Return the insights for the requested cycle.

        The daily trend ends on the reference day, or on the last day of the
        cycle when the cycle is already over.

        Args:
            cycle_id: Optional ``YYYY-MM-DD`` identifier; current cycle if None.
            reference: Moment counted as now. Defaults to now.
            days: Number of trailing days in the trend.

        Returns:
            CycleInsights: Daily trend and top merchant.
        """
        now = reference if reference is not None else datetime.now()
        cycle = resolve_cycle(self._settings, cycle_id, now)
        expenses = [
            expense
            for expense in self._expense_source.fetch_expenses(
                cycle.start_date,
                cycle.end_date,
            )
            if cycle.contains(expense.date)
        ]
        today = now.date() if isinstance(now, datetime) else now
        trend_end = min(today, cycle.end_date.date())
        insights = CycleInsights(
            cycle_id=build_cycle_id(cycle),
            daily_trend=daily_spending_trend(expenses, trend_end, days),
            top_merchant=top_merchant(expenses),
        )
        self._logger.info(
            f"Cycle {insights.cycle_id} insights: "
            f"top merchant={insights.top_merchant.name}"
        )
        return insights


__all__ = ["GetCycleInsightsUseCase", "CycleInsights"]
