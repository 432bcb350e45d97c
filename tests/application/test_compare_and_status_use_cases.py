"""Tests for the comparison, budget status and listing use cases."""

from datetime import date, datetime
from decimal import Decimal

from src.application.use_cases.compare_cycles import CompareCyclesUseCase
from src.application.use_cases.get_budget_status import GetBudgetStatusUseCase
from src.application.use_cases.get_cycle_insights import GetCycleInsightsUseCase
from src.application.use_cases.get_cycle_summary import GetCycleSummaryUseCase
from src.application.use_cases.list_cycle_expenses import (
    ListCategoryExpensesUseCase,
    ListCycleExpensesUseCase,
)
from src.domain.models import BudgetHealth, Trend
from src.infrastructure.settings import BudgetSettings

REFERENCE = datetime(2024, 3, 10, 18, 0)


def test_compare_defaults_to_previous_cycle(
    expense_source,
    settings,
    logger,
) -> None:
    """Without ids the current cycle is compared with the one before."""
    use_case = CompareCyclesUseCase(expense_source, settings, logger=logger)

    comparison = use_case.execute(reference=REFERENCE)

    assert comparison.cycle1.cycle_id == "2024-02-15"
    assert comparison.cycle2.cycle_id == "2024-01-15"
    assert comparison.cycle2.cycle.days_remaining == 0
    assert comparison.total_spent_diff == Decimal("2340")
    assert comparison.total_spent_diff_percent == Decimal("156")
    assert comparison.overall_trend is Trend.WORSENED
    assert comparison.category_comparisons[0].category_id == "groceries"
    assert comparison.category_comparisons[0].difference == Decimal("1300")


def test_compare_explicit_cycles(expense_source, settings, logger) -> None:
    """Explicit ids select both sides of the comparison."""
    use_case = CompareCyclesUseCase(expense_source, settings, logger=logger)

    comparison = use_case.execute(
        cycle_id_1="2023-12-15",
        cycle_id_2="2024-01-15",
        reference=REFERENCE,
    )

    assert comparison.cycle1.total_spent == Decimal("400")
    assert comparison.cycle2.total_spent == Decimal("1500")
    assert comparison.overall_trend is Trend.IMPROVED


def test_budget_status_for_running_cycle(
    expense_source,
    settings,
    logger,
) -> None:
    """Budget status reports remaining budget and today's spending."""
    use_case = GetBudgetStatusUseCase(expense_source, settings, logger=logger)

    status = use_case.execute(reference=REFERENCE)

    assert status.spent == Decimal("3840")
    assert status.remaining == Decimal("6160")
    assert status.percent_used == 38
    assert status.days_remaining == 4
    assert status.daily_budget == Decimal("1540")
    assert status.today_spent == Decimal("140")
    assert status.status is BudgetHealth.GOOD
    logger.warning.assert_not_called()


def test_budget_status_logs_overspending(expense_source, logger) -> None:
    """Exceeding the budget is logged as a warning."""
    settings = BudgetSettings(billing_day=15, monthly_limit=Decimal("3000"))
    use_case = GetBudgetStatusUseCase(expense_source, settings, logger=logger)

    status = use_case.execute(reference=REFERENCE)

    assert status.status is BudgetHealth.DANGER
    assert status.alert_thresholds_reached == [50, 75, 90, 100]
    logger.warning.assert_called_once()


def test_list_expenses_newest_first_with_limit(
    expense_source,
    settings,
    logger,
) -> None:
    """Listing defaults to the current cycle and truncates to the limit."""
    use_case = ListCycleExpensesUseCase(expense_source, settings, logger=logger)

    expenses = use_case.execute(limit=3, reference=REFERENCE)

    assert [expense.id for expense in expenses] == ["d2", "f1", "d1"]


def test_list_expenses_custom_window(expense_source, settings, logger) -> None:
    """An explicit window overrides the cycle bounds."""
    use_case = ListCycleExpensesUseCase(expense_source, settings, logger=logger)

    expenses = use_case.execute(
        start=datetime(2024, 1, 1),
        end=datetime(2024, 2, 28),
        reference=REFERENCE,
    )

    assert [expense.amount for expense in expenses] == [
        Decimal("2500"),
        Decimal("300"),
        Decimal("1200"),
    ]
    assert use_case.execute(limit=0, reference=REFERENCE) == []


def test_list_category_expenses(expense_source, settings, logger) -> None:
    """Category listing filters one normalized category in a cycle."""
    use_case = ListCategoryExpensesUseCase(
        expense_source,
        settings,
        logger=logger,
    )

    expenses = use_case.execute(" Dining ", reference=REFERENCE)
    past = use_case.execute(
        "dining",
        cycle_id="2024-01-15",
        reference=REFERENCE,
    )

    assert [expense.id for expense in expenses] == ["d2", "d1"]
    assert [expense.amount for expense in past] == [Decimal("300")]


def test_list_expenses_logs_selection(expense_source, settings, logger) -> None:
    """The listing reports how many records were kept."""
    use_case = ListCycleExpensesUseCase(expense_source, settings, logger=logger)

    use_case.execute(limit=3, reference=REFERENCE)

    logger.info.assert_called_once_with(
        "Listing 3 of 4 expenses between 2024-02-15 and 2024-03-14"
    )


def test_category_expenses_accepts_breakdown_ids(
    expense_source,
    settings,
    logger,
) -> None:
    """Ids taken from a cycle breakdown select the same records."""
    summary = GetCycleSummaryUseCase(
        expense_source,
        settings,
        logger=logger,
    ).execute(reference=REFERENCE)
    use_case = ListCategoryExpensesUseCase(
        expense_source,
        settings,
        logger=logger,
    )

    for item in summary.category_breakdown:
        expenses = use_case.execute(item.category_id, reference=REFERENCE)
        assert len(expenses) == item.expense_count
    assert [e.id for e in use_case.execute("Fuel", reference=REFERENCE)] == [
        "f1"
    ]


def test_cycle_insights_for_current_cycle(
    expense_source,
    settings,
    logger,
) -> None:
    """Insights cover the trailing week and the top merchant."""
    use_case = GetCycleInsightsUseCase(expense_source, settings, logger=logger)

    insights = use_case.execute(reference=REFERENCE)

    assert insights.cycle_id == "2024-02-15"
    assert insights.daily_trend[0].day == date(2024, 3, 4)
    assert insights.daily_trend[-1].day == date(2024, 3, 10)
    assert insights.daily_trend[-1].total == Decimal("140")
    assert insights.daily_trend[-1].expense_count == 2
    assert insights.top_merchant.name == "Fuel Station"
    assert insights.top_merchant.total == Decimal("80")


def test_cycle_insights_for_past_cycle_end_on_last_day(
    expense_source,
    settings,
    logger,
) -> None:
    """A finished cycle's trend ends on its last day."""
    use_case = GetCycleInsightsUseCase(expense_source, settings, logger=logger)

    insights = use_case.execute(
        cycle_id="2024-01-15",
        reference=REFERENCE,
        days=3,
    )

    assert [item.day for item in insights.daily_trend] == [
        date(2024, 2, 12),
        date(2024, 2, 13),
        date(2024, 2, 14),
    ]
    assert insights.top_merchant.name == "N/A"
