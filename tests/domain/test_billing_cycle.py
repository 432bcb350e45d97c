"""Tests for the billing cycle calculator."""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from src.domain.services.billing_cycle import (
    add_months,
    compute_billing_cycle,
    cycle_for_date,
    is_in_cycle,
    past_billing_cycles,
)


def test_cycle_started_previous_month_when_anchor_not_reached() -> None:
    """Reference before the anchor day should fall in last month's cycle."""
    cycle = compute_billing_cycle(15, datetime(2024, 3, 10, 14, 30))

    assert cycle.start_date == datetime(2024, 2, 15)
    assert cycle.end_date == datetime(2024, 3, 14, 23, 59, 59, 999999)
    assert cycle.days_total == 29
    assert cycle.days_elapsed == 25
    assert cycle.days_remaining == 4


def test_cycle_starts_on_anchor_day() -> None:
    """The anchor day itself is the first day of a new cycle."""
    cycle = compute_billing_cycle(15, datetime(2024, 3, 15, 8, 0))

    assert cycle.start_date == datetime(2024, 3, 15)
    assert cycle.end_date.date() == date(2024, 4, 14)
    assert cycle.days_total == 31
    assert cycle.days_elapsed == 1
    assert cycle.days_remaining == 30


def test_cycle_spanning_year_boundary() -> None:
    """Cycles anchored late in December end in January."""
    cycle = compute_billing_cycle(20, datetime(2024, 1, 5))

    assert cycle.start_date == datetime(2023, 12, 20)
    assert cycle.end_date.date() == date(2024, 1, 19)
    assert cycle.days_total == 31
    assert cycle.days_elapsed == 17


def test_last_day_of_cycle_has_no_remaining_days() -> None:
    """On the last day elapsed equals total and nothing remains."""
    cycle = compute_billing_cycle(1, datetime(2024, 2, 29, 23, 0))

    assert cycle.start_date == datetime(2024, 2, 1)
    assert cycle.end_date.date() == date(2024, 2, 29)
    assert cycle.days_total == 29
    assert cycle.days_elapsed == 29
    assert cycle.days_remaining == 0


@pytest.mark.parametrize("anchor_day", [1, 2, 14, 15, 27, 28])
@pytest.mark.parametrize(
    "reference",
    [
        datetime(2023, 2, 28, 12, 0),
        datetime(2024, 2, 29, 0, 0),
        datetime(2024, 3, 1, 23, 59),
        datetime(2024, 7, 31, 6, 0),
        datetime(2024, 12, 31, 18, 0),
        datetime(2025, 1, 1, 0, 0),
    ],
)
def test_cycle_invariants_hold(anchor_day: int, reference: datetime) -> None:
    """Day counts add up and the reference day lies inside the window."""
    cycle = compute_billing_cycle(anchor_day, reference)

    assert cycle.days_elapsed + cycle.days_remaining == cycle.days_total
    assert 1 <= cycle.days_elapsed <= cycle.days_total
    assert cycle.start_date <= cycle.end_date
    assert cycle.start_date.day == anchor_day
    assert cycle.start_date.date() <= reference.date() <= cycle.end_date.date()
    next_start = cycle.end_date.date() + timedelta(days=1)
    assert next_start.day == anchor_day


def test_timezone_is_preserved() -> None:
    """Aware references produce aware cycle bounds in the same zone."""
    cycle = compute_billing_cycle(
        15,
        datetime(2024, 3, 10, 9, 0, tzinfo=timezone.utc),
    )

    assert cycle.start_date == datetime(2024, 2, 15, tzinfo=timezone.utc)
    assert cycle.end_date.tzinfo is timezone.utc


def test_cycle_end_across_daylight_saving_change() -> None:
    """Cycle bounds follow calendar days when the UTC offset changes."""
    new_york = ZoneInfo("America/New_York")

    reference = datetime(2024, 3, 20, 12, 0, tzinfo=new_york)

    cycle = compute_billing_cycle(1, reference)

    assert cycle.start_date == datetime(2024, 3, 1, tzinfo=new_york)
    assert cycle.end_date == datetime(
        2024, 3, 31, 23, 59, 59, 999999, tzinfo=new_york
    )
    assert cycle.start_date.utcoffset() == timedelta(hours=-5)
    assert cycle.end_date.utcoffset() == timedelta(hours=-4)
    assert cycle.days_total == 31
    assert cycle.days_elapsed == 20


def test_cycle_starting_on_daylight_saving_day() -> None:
    """A cycle starting on the short day keeps full-day bounds."""
    new_york = ZoneInfo("America/New_York")
    reference = datetime(2024, 3, 10, 12, 0, tzinfo=new_york)

    cycle = compute_billing_cycle(10, reference)
    previous = past_billing_cycles(10, 1, reference)[0]

    assert cycle.start_date == datetime(2024, 3, 10, tzinfo=new_york)
    assert cycle.end_date.date() == date(2024, 4, 9)
    assert cycle.days_elapsed == 1
    assert cycle.days_total == 31
    assert previous.end_date == datetime(
        2024, 3, 9, 23, 59, 59, 999999, tzinfo=new_york
    )
    assert previous.days_total == 29


def test_plain_date_reference_is_accepted() -> None:
    """A date reference behaves like midnight of that day."""
    assert compute_billing_cycle(15, date(2024, 3, 10)) == compute_billing_cycle(
        15,
        datetime(2024, 3, 10, 17, 45),
    )


def test_cycle_for_date_matches_compute() -> None:
    """cycle_for_date is the lookup for arbitrary expense dates."""
    moment = datetime(2024, 5, 2, 10, 0)

    assert cycle_for_date(3, moment) == compute_billing_cycle(3, moment)


def test_past_cycles_are_contiguous_and_fully_elapsed() -> None:
    """Past cycles are returned newest first without gaps or overlaps."""
    cycles = past_billing_cycles(15, 3, datetime(2024, 3, 10))

    assert [cycle.start_date.date() for cycle in cycles] == [
        date(2024, 1, 15),
        date(2023, 12, 15),
        date(2023, 11, 15),
    ]
    assert [cycle.end_date.date() for cycle in cycles] == [
        date(2024, 2, 14),
        date(2024, 1, 14),
        date(2023, 12, 14),
    ]
    for cycle in cycles:
        assert cycle.days_elapsed == cycle.days_total
        assert cycle.days_remaining == 0
    for newer, older in zip(cycles, cycles[1:]):
        assert older.end_date.date() + timedelta(days=1) == newer.start_date.date()


def test_past_cycles_near_month_end() -> None:
    """Month-end references still chain back one cycle at a time."""
    cycles = past_billing_cycles(28, 2, datetime(2024, 3, 31))

    assert [cycle.start_date.date() for cycle in cycles] == [
        date(2024, 2, 28),
        date(2024, 1, 28),
    ]
    assert cycles[0].end_date.date() == date(2024, 3, 27)


def test_past_cycles_excludes_current_and_handles_zero() -> None:
    """The current cycle is never part of the history."""
    reference = datetime(2024, 3, 10)
    current = compute_billing_cycle(15, reference)

    assert past_billing_cycles(15, 0, reference) == []
    assert current not in past_billing_cycles(15, 4, reference)


@pytest.mark.parametrize(
    ("moment", "months", "expected"),
    [
        (datetime(2024, 3, 31), -1, datetime(2024, 2, 29)),
        (datetime(2023, 3, 31), -1, datetime(2023, 2, 28)),
        (datetime(2024, 1, 15), -1, datetime(2023, 12, 15)),
        (datetime(2024, 11, 30), 3, datetime(2025, 2, 28)),
        (datetime(2024, 5, 10, 7, 30), 12, datetime(2025, 5, 10, 7, 30)),
    ],
)
def test_add_months_clamps_day(
    moment: datetime,
    months: int,
    expected: datetime,
) -> None:
    """Month shifts clamp the day to the target month length."""
    assert add_months(moment, months) == expected


def test_is_in_cycle_uses_inclusive_calendar_days() -> None:
    """Both boundary days are inside; neighbours are outside."""
    cycle = compute_billing_cycle(15, datetime(2024, 3, 10))

    assert is_in_cycle(datetime(2024, 2, 15, 0, 0), cycle)
    assert is_in_cycle(datetime(2024, 3, 14, 23, 59), cycle)
    assert is_in_cycle(date(2024, 3, 1), cycle)
    assert not is_in_cycle(datetime(2024, 2, 14, 23, 59), cycle)
    assert not is_in_cycle(datetime(2024, 3, 15, 0, 0), cycle)
