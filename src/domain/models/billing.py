"""Domain model for billing cycle windows."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class BillingCycle:
    """Billing cycle window anchored to a day of month.

    Both bounds are inclusive: ``start_date`` is the first instant of the
    first day and ``end_date`` the last instant of the last day.

    Attributes:
        start_date: Start of day of the cycle's first included day.
        end_date: End of day of the cycle's last included day.
        days_total: Number of days spanned, both ends included.
        days_elapsed: Days from the start through the reference day.
        days_remaining: Days left after the reference day, floored at 0.
    """

    start_date: datetime
    end_date: datetime
    days_total: int
    days_elapsed: int
    days_remaining: int

    def contains(self, moment: date | datetime) -> bool:
        """Return True when the moment's calendar day lies in the window."""
        day = moment.date() if isinstance(moment, datetime) else moment
        return self.start_date.date() <= day <= self.end_date.date()


__all__ = ["BillingCycle"]
