"""Domain services aggregating expenses into cycle summaries."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta
from decimal import ROUND_FLOOR, Decimal
from logging import Logger

from src.domain.constants import (
    DAILY_TREND_DAYS,
    DEFAULT_ALERT_THRESHOLDS,
    NO_MERCHANT_NAME,
    TOP_EXPENSES_LIMIT,
    UNKNOWN_CATEGORY_NAME,
    WARNING_REMAINING_RATIO,
)
from src.domain.models import (
    BillingCycle,
    BudgetHealth,
    BudgetStatus,
    Category,
    CategorySpending,
    CycleSummary,
    DailySpending,
    Expense,
    MerchantSpending,
)
from src.domain.services.cycle_identity import cycle_id
from src.domain.services.normalization import normalize_category_id
from src.utils.decimal_utils import (
    coerce_decimal,
    percent_of,
    round_half_up,
    safe_divide,
)


def summarize_cycle(
    cycle: BillingCycle,
    expenses: Iterable[Expense],
    budget_limit,
    categories: Iterable[Category],
    *,
    logger: Logger | None = None,
    top_n: int = TOP_EXPENSES_LIMIT,
) -> CycleSummary:
    """Aggregate expenses into a summary for one billing cycle.

    Expenses dated outside the cycle window are ignored, so callers may pass
    a broader list without double counting.

    Args:
        cycle: Billing cycle being summarized.
        expenses: Expense records, ideally already scoped to the cycle.
        budget_limit: Budget configured for the cycle.
        categories: Category catalog used to resolve display names.
        logger: Optional logger for skipped-record diagnostics.
        top_n: Number of largest expenses to keep.

    Returns:
        CycleSummary: Totals, budget usage and category breakdown.
    """
    budget_limit = coerce_decimal(budget_limit)
    records = list(expenses)
    in_cycle = [expense for expense in records if cycle.contains(expense.date)]
    skipped = len(records) - len(in_cycle)
    if skipped and logger is not None:
        logger.debug(
            f"Ignored {skipped} expenses outside cycle {cycle_id(cycle)}"
        )

    total_spent = Decimal("0")
    amounts: dict[str, Decimal] = {}
    counts: dict[str, int] = {}
    for expense in in_cycle:
        amount = coerce_decimal(expense.amount)
        total_spent += amount
        amounts[expense.category] = (
            amounts.get(expense.category, Decimal("0")) + amount
        )
        counts[expense.category] = counts.get(expense.category, 0) + 1

    names = _catalog_names(categories)
    breakdown = [
        CategorySpending(
            category_id=category_id,
            category_name=names.get(
                normalize_category_id(category_id),
                UNKNOWN_CATEGORY_NAME,
            ),
            amount=amount,
            expense_count=counts[category_id],
            percent_of_total=percent_of(amount, total_spent),
        )
        for category_id, amount in amounts.items()
    ]
    breakdown.sort(key=lambda item: item.amount, reverse=True)

    top_expenses = sorted(
        in_cycle,
        key=lambda expense: coerce_decimal(expense.amount),
        reverse=True,
    )[:top_n]

    return CycleSummary(
        cycle=cycle,
        cycle_id=cycle_id(cycle),
        total_spent=total_spent,
        budget_limit=budget_limit,
        percent_used=percent_of(total_spent, budget_limit),
        is_over_budget=total_spent > budget_limit,
        expense_count=len(in_cycle),
        avg_daily_spending=safe_divide(total_spent, cycle.days_elapsed),
        category_breakdown=breakdown,
        top_expenses=top_expenses,
    )


def build_budget_status(
    summary: CycleSummary,
    expenses: Iterable[Expense] = (),
    reference: date | datetime | None = None,
    *,
    alert_thresholds: Iterable[int] = DEFAULT_ALERT_THRESHOLDS,
) -> BudgetStatus:
    """Derive the remaining-budget position from a cycle summary.

    Args:
        summary: Summary of the running cycle.
        expenses: Raw expenses, used only to total today's spending.
        reference: Day counted as today. Defaults to now.
        alert_thresholds: Percent-used levels that trigger alerts.

    Returns:
        BudgetStatus: Remaining budget, daily allowance and health status.
    """
    if reference is None:
        reference = datetime.now()
    today = reference.date() if isinstance(reference, datetime) else reference

    spent = summary.total_spent
    limit = summary.budget_limit
    remaining = limit - spent
    days_remaining = summary.cycle.days_remaining
    daily_budget = (
        (remaining / days_remaining).to_integral_value(rounding=ROUND_FLOOR)
        if days_remaining > 0
        else Decimal("0")
    )
    today_spent = sum(
        (
            coerce_decimal(expense.amount)
            for expense in expenses
            if _day_of(expense.date) == today
        ),
        Decimal("0"),
    )

    if remaining < 0:
        status = BudgetHealth.DANGER
    elif remaining < limit * WARNING_REMAINING_RATIO:
        status = BudgetHealth.WARNING
    else:
        status = BudgetHealth.GOOD

    return BudgetStatus(
        cycle=summary.cycle,
        spent=spent,
        limit=limit,
        remaining=remaining,
        percent_used=int(round_half_up(summary.percent_used)),
        days_remaining=days_remaining,
        daily_budget=daily_budget,
        today_spent=today_spent,
        is_over_budget=remaining < 0,
        status=status,
        alert_thresholds_reached=sorted(
            threshold
            for threshold in alert_thresholds
            if summary.percent_used >= threshold
        ),
    )


def daily_spending_trend(
    expenses: Iterable[Expense],
    reference: date | datetime | None = None,
    days: int = DAILY_TREND_DAYS,
) -> list[DailySpending]:
    """Total spending per calendar day over the trailing window.

    Every day in the window is present, including days with no expenses.

    Args:
        expenses: Expense records to bucket by day.
        reference: Last day of the window. Defaults to today.
        days: Number of days in the window, ending on the reference day.

    Returns:
        list[DailySpending]: One entry per day, oldest first.
    """
    if reference is None:
        reference = datetime.now()
    last_day = _day_of(reference)
    window = [last_day - timedelta(days=offset) for offset in range(days)]
    totals = {day: Decimal("0") for day in window}
    counts = {day: 0 for day in window}
    for expense in expenses:
        day = _day_of(expense.date)
        if day in totals:
            totals[day] += coerce_decimal(expense.amount)
            counts[day] += 1
    return [
        DailySpending(day=day, total=totals[day], expense_count=counts[day])
        for day in reversed(window)
    ]


def top_merchant(expenses: Iterable[Expense]) -> MerchantSpending:
    """Return the merchant with the largest total spend.

    Expenses without a merchant are ignored. On a tie the merchant seen
    first wins.

    Returns:
        MerchantSpending: Top merchant, or ``N/A`` with a zero total.
    """
    totals: dict[str, Decimal] = {}
    for expense in expenses:
        if expense.merchant:
            totals[expense.merchant] = totals.get(
                expense.merchant, Decimal("0")
            ) + coerce_decimal(expense.amount)

    top = MerchantSpending(name=NO_MERCHANT_NAME, total=Decimal("0"))
    for name, total in totals.items():
        if total > top.total:
            top = MerchantSpending(name=name, total=total)
    return top


def _catalog_names(categories: Iterable[Category]) -> dict[str, str]:
    names: dict[str, str] = {}
    for category in categories:
        names.setdefault(category.id, category.name)
    return names


def _day_of(moment: date | datetime) -> date:
    return moment.date() if isinstance(moment, datetime) else moment


__all__ = [
    "summarize_cycle",
    "build_budget_status",
    "daily_spending_trend",
    "top_merchant",
]
