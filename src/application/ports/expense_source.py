"""Port for reading expense records scoped to a date window."""

from datetime import datetime
from typing import Protocol

from src.domain.models import Expense


class ExpenseSourcePort(Protocol):
    """Port exposing one user's expenses to the analytics use cases.

    Implementations own persistence and user scoping; use cases only ask
    for the records dated inside a window.
    """

    def fetch_expenses(
        self,
        start: datetime,
        end: datetime,
    ) -> list[Expense]:
        """Return expenses dated in ``[start, end]``, oldest first.

        Args:
            start: Inclusive lower bound.
            end: Inclusive upper bound.

        Returns:
            list[Expense]: Matching expense records.
        """


__all__ = ["ExpenseSourcePort"]
