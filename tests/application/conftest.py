"""Fixtures shared by use case tests."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models import Expense
from src.infrastructure.settings import BudgetSettings


class FakeExpenseSource:
    """Expense source returning records from an in-memory list."""

    def __init__(self, expenses: list[Expense]) -> None:
        self._expenses = expenses
        self.calls: list[tuple[datetime, datetime]] = []

    def fetch_expenses(self, start: datetime, end: datetime) -> list[Expense]:
        self.calls.append((start, end))
        return [
            expense
            for expense in self._expenses
            if start <= expense.date <= end
        ]


def _expense(amount: str, category: str, when: datetime, **kwargs) -> Expense:
    return Expense(amount=Decimal(amount), category=category, date=when, **kwargs)


@pytest.fixture
def settings() -> BudgetSettings:
    return BudgetSettings(billing_day=15, monthly_limit=Decimal("10000"))


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def expenses() -> list[Expense]:
    return [
        _expense("400", "groceries", datetime(2023, 12, 20, 10, 0)),
        _expense("1200", "groceries", datetime(2024, 1, 16, 10, 0)),
        _expense("300", "dining", datetime(2024, 2, 2, 19, 30)),
        _expense("2500", "groceries", datetime(2024, 2, 16, 9, 0), id="g1"),
        _expense("1200", "dining", datetime(2024, 3, 1, 20, 0), id="d1"),
        _expense(
            "80",
            "Fuel",
            datetime(2024, 3, 10, 8, 0),
            id="f1",
            merchant="Fuel Station",
        ),
        _expense("60", "dining", datetime(2024, 3, 10, 13, 0), id="d2"),
    ]


@pytest.fixture
def expense_source(expenses) -> FakeExpenseSource:
    return FakeExpenseSource(expenses)
