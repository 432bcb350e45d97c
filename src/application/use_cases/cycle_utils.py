"""Shared helpers for cycle-based use cases."""

from datetime import date, datetime, timedelta

from src.application.ports.expense_source import ExpenseSourcePort
from src.domain.models import BillingCycle, CycleSummary, Expense
from src.domain.services.billing_cycle import compute_billing_cycle
from src.domain.services.cycle_identity import parse_cycle_id
from src.domain.services.summary import summarize_cycle
from src.infrastructure.settings import BudgetSettings


def resolve_cycle(
    settings: BudgetSettings,
    cycle_id: str | None = None,
    reference: date | datetime | None = None,
) -> BillingCycle:
    """Return the cycle for an identifier, or the current cycle.

    Cycles that ended before the reference day are returned fully elapsed,
    and the running cycle is measured against the reference day.

    Args:
        settings: User settings providing the billing day.
        cycle_id: Optional ``YYYY-MM-DD`` cycle identifier.
        reference: Moment counted as now. Defaults to now.

    Returns:
        BillingCycle: Resolved cycle window.
    """
    now = reference if reference is not None else datetime.now()
    current = compute_billing_cycle(settings.billing_day, now)
    if cycle_id is None:
        return current
    cycle = parse_cycle_id(cycle_id, settings.billing_day)
    if cycle.start_date.date() == current.start_date.date():
        return current
    if cycle.end_date.date() < current.start_date.date():
        return compute_billing_cycle(settings.billing_day, cycle.end_date)
    return cycle


def previous_cycle(settings: BudgetSettings, cycle: BillingCycle) -> BillingCycle:
    """Return the fully elapsed cycle right before the given one."""
    return compute_billing_cycle(
        settings.billing_day,
        cycle.start_date - timedelta(days=1),
    )


def summarize_window(
    expense_source: ExpenseSourcePort,
    settings: BudgetSettings,
    cycle: BillingCycle,
    logger,
) -> tuple[CycleSummary, list[Expense]]:
    """Fetch a cycle's expenses and summarize them.

    Returns:
        tuple[CycleSummary, list[Expense]]: Summary and the raw expenses.
    """
    expenses = expense_source.fetch_expenses(cycle.start_date, cycle.end_date)
    summary = summarize_cycle(
        cycle,
        expenses,
        settings.monthly_limit,
        settings.categories,
        logger=logger,
    )
    logger.info(
        f"Cycle {summary.cycle_id} summarized: spent={summary.total_spent}, "
        f"expenses={summary.expense_count}"
    )
    return summary, expenses


__all__ = ["resolve_cycle", "previous_cycle", "summarize_window"]
