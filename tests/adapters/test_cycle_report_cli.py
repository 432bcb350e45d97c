"""Tests for the cycle report CLI."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.adapters import cycle_report_cli
from src.domain.exceptions import ConfigurationError, InvalidCycleIdError
from src.domain.models import Expense
from src.domain.services.billing_cycle import compute_billing_cycle
from src.domain.services.comparison import compare_cycles
from src.domain.services.summary import build_budget_status, summarize_cycle
from src.infrastructure.settings import BudgetSettings

REFERENCE = datetime(2024, 3, 10, 18, 0)


class _FakeUseCase:
    def __init__(self, result=None, error=None) -> None:
        self.result = result
        self.error = error
        self.calls: list[dict] = []

    def execute(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.result


def _summaries(settings: BudgetSettings):
    current_cycle = compute_billing_cycle(settings.billing_day, REFERENCE)
    previous = compute_billing_cycle(settings.billing_day, datetime(2024, 2, 1))
    current_expenses = [
        Expense(Decimal("2500"), "groceries", datetime(2024, 2, 16, 9)),
        Expense(Decimal("1340"), "dining", datetime(2024, 3, 10, 13)),
    ]
    previous_expenses = [
        Expense(Decimal("1500"), "groceries", datetime(2024, 1, 20, 9)),
    ]
    current = summarize_cycle(
        current_cycle,
        current_expenses,
        settings.monthly_limit,
        settings.categories,
    )
    past = summarize_cycle(
        previous,
        previous_expenses,
        settings.monthly_limit,
        settings.categories,
    )
    status = build_budget_status(current, current_expenses, REFERENCE)
    return current, compare_cycles(current, past), status


@pytest.fixture
def settings() -> BudgetSettings:
    return BudgetSettings(billing_day=15, monthly_limit=Decimal("10000"))


@pytest.fixture
def loggers(monkeypatch) -> tuple[MagicMock, MagicMock]:
    app_logger = MagicMock()
    usage_logger = MagicMock()
    monkeypatch.setattr(cycle_report_cli, "get_app_logger", lambda: app_logger)
    monkeypatch.setattr(
        cycle_report_cli,
        "get_usage_logger",
        lambda: usage_logger,
    )
    return app_logger, usage_logger


@pytest.fixture
def use_cases(monkeypatch, settings):
    summary, comparison, status = _summaries(settings)
    fakes = {
        "summary": _FakeUseCase(summary),
        "compare": _FakeUseCase(comparison),
        "status": _FakeUseCase(status),
    }
    monkeypatch.delenv("REPORT_CYCLE_ID", raising=False)
    monkeypatch.setattr(cycle_report_cli, "build_settings", lambda: settings)
    monkeypatch.setattr(
        cycle_report_cli,
        "build_expense_source",
        lambda _settings: "source",
    )
    monkeypatch.setattr(
        cycle_report_cli,
        "build_cycle_summary_use_case",
        lambda *_args: fakes["summary"],
    )
    monkeypatch.setattr(
        cycle_report_cli,
        "build_compare_cycles_use_case",
        lambda *_args: fakes["compare"],
    )
    monkeypatch.setattr(
        cycle_report_cli,
        "build_budget_status_use_case",
        lambda *_args: fakes["status"],
    )
    return fakes


def test_main_prints_current_cycle_report(use_cases, loggers, capsys) -> None:
    """The report covers summary, budget status and comparison."""
    cycle_report_cli.main()

    output = capsys.readouterr().out
    assert "Cycle 2024-02-15 (2024-02-15 -> 2024-03-14, day 25/29)" in output
    assert "Spent Rs. 3,840.00 of Rs. 10,000.00 (38.4%), 2 expenses" in output
    assert "  Groceries: Rs. 2,500.00 (65.1%, 1 expenses)" in output
    assert "Budget: On track, remaining Rs. 6,160.00" in output
    assert "Rs. 1,540.00/day for 4 days" in output
    assert "Versus 2024-01-15: +Rs. 2,340.00 (+156.0%), ▲ worsened" in output
    assert use_cases["summary"].calls == [{"cycle_id": None}]
    assert use_cases["compare"].calls == [{"cycle_id_1": None}]
    loggers[1].info.assert_called_once()


def test_main_skips_budget_status_for_named_cycle(
    monkeypatch,
    use_cases,
    loggers,
    capsys,
) -> None:
    """A named cycle is reported without the running budget status."""
    monkeypatch.setenv("REPORT_CYCLE_ID", "2024-02-15")

    cycle_report_cli.main()

    output = capsys.readouterr().out
    assert "Budget:" not in output
    assert use_cases["status"].calls == []
    assert use_cases["summary"].calls == [{"cycle_id": "2024-02-15"}]


def test_main_logs_invalid_cycle_id(monkeypatch, use_cases, loggers, capsys):
    """Invalid identifiers are logged instead of printed."""
    monkeypatch.setenv("REPORT_CYCLE_ID", "bad")
    use_cases["summary"].error = InvalidCycleIdError("Invalid cycle id 'bad'")

    cycle_report_cli.main()

    assert capsys.readouterr().out == ""
    loggers[0].error.assert_called_once_with("Invalid cycle id 'bad'")


def test_main_logs_configuration_errors(monkeypatch, loggers, capsys) -> None:
    """Configuration problems stop the report before any use case runs."""

    def _raise():
        raise ConfigurationError("Billing start day must be between 1 and 28")

    monkeypatch.setattr(cycle_report_cli, "build_settings", _raise)

    cycle_report_cli.main()

    assert capsys.readouterr().out == ""
    loggers[0].error.assert_called_once()
    loggers[1].info.assert_not_called()


def test_main_logs_missing_expense_source(
    monkeypatch,
    settings,
    loggers,
) -> None:
    """A missing expenses file is reported through the app logger."""
    monkeypatch.setattr(cycle_report_cli, "build_settings", lambda: settings)

    cycle_report_cli.main()

    message = loggers[0].error.call_args.args[0]
    assert "EXPENSES_FILE" in message
