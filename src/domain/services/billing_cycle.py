"""Domain services deriving billing cycle windows from an anchor day."""

import calendar
from datetime import date, datetime, time, timedelta

from src.domain.models import BillingCycle


def start_of_day(moment: datetime) -> datetime:
    """Return the first instant of the moment's calendar day."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(moment: datetime) -> datetime:
    """Return the last instant of the moment's calendar day."""
    return datetime.combine(moment.date(), time.max, tzinfo=moment.tzinfo)


def add_months(moment: datetime, months: int) -> datetime:
    """Shift a moment by whole calendar months.

    The day of month is clamped to the length of the target month, so
    March 31 shifted back one month lands on the last day of February.

    Args:
        moment: Moment to shift.
        months: Number of months, negative to go back.

    Returns:
        datetime: Shifted moment with the same time of day.
    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def compute_billing_cycle(
    anchor_day: int,
    reference: date | datetime | None = None,
) -> BillingCycle:
    """Compute the billing cycle containing the reference moment.

    The cycle starts on ``anchor_day`` of the reference month, or of the
    previous month when that day has not been reached yet, and ends on the
    day before the next anchor day. The anchor day must be in 1..28; callers
    validate it where user settings are accepted.

    Args:
        anchor_day: Day of month on which cycles start.
        reference: Moment inside the wanted cycle. Defaults to now.

    Returns:
        BillingCycle: Cycle window with day counts relative to reference.
    """
    today = start_of_day(_as_datetime(reference))
    cycle_start = today.replace(day=anchor_day)
    if today < cycle_start:
        cycle_start = add_months(cycle_start, -1)

    next_start = add_months(cycle_start, 1)
    cycle_end = end_of_day(next_start - timedelta(days=1))

    days_total = (cycle_end.date() - cycle_start.date()).days + 1
    days_elapsed = (today.date() - cycle_start.date()).days + 1
    return BillingCycle(
        start_date=cycle_start,
        end_date=cycle_end,
        days_total=days_total,
        days_elapsed=days_elapsed,
        days_remaining=max(0, days_total - days_elapsed),
    )


def past_billing_cycles(
    anchor_day: int,
    count: int,
    reference: date | datetime | None = None,
) -> list[BillingCycle]:
    """Return the cycles preceding the current one, most recent first.

    Each cycle is computed from the day before the start of the cycle that
    follows it, so consecutive windows are contiguous and every returned
    cycle is fully elapsed.

    Args:
        anchor_day: Day of month on which cycles start.
        count: Number of past cycles to return.
        reference: Moment inside the current cycle. Defaults to now.

    Returns:
        list[BillingCycle]: Past cycles, current cycle excluded.
    """
    cycles: list[BillingCycle] = []
    cycle = compute_billing_cycle(anchor_day, reference)
    for _ in range(count):
        previous_day = cycle.start_date - timedelta(days=1)
        cycle = compute_billing_cycle(anchor_day, previous_day)
        cycles.append(cycle)
    return cycles


def cycle_for_date(anchor_day: int, moment: date | datetime) -> BillingCycle:
    """Return the billing cycle containing an arbitrary date."""
    return compute_billing_cycle(anchor_day, moment)


def is_in_cycle(moment: date | datetime, cycle: BillingCycle) -> bool:
    """Return True when the moment falls inside the cycle window."""
    return cycle.contains(moment)


def _as_datetime(reference: date | datetime | None) -> datetime:
    if reference is None:
        return datetime.now()
    if isinstance(reference, datetime):
        return reference
    return datetime.combine(reference, time.min)


__all__ = [
    "start_of_day",
    "end_of_day",
    "add_months",
    "compute_billing_cycle",
    "past_billing_cycles",
    "cycle_for_date",
    "is_in_cycle",
]
