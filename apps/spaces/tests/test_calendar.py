"""Unit tests for the weekly calendar and open-day arithmetic."""

from __future__ import annotations

from datetime import date, time, timedelta

import pytest

from shared.domain.exceptions import InvalidAvailabilityError, InvalidRangeError
from apps.spaces.domain.calendar import AvailabilityCalendar, OpenDayCalculator
from apps.spaces.domain.entities import Availability, AvailabilityInput

from .fakes import week


def test_validate_complete_orders_entries_monday_first():
    entries = list(reversed(week()))

    ordered = AvailabilityCalendar.validate_complete(entries)

    assert [entry.day_of_week for entry in ordered] == [1, 2, 3, 4, 5, 6, 7]
    assert entries[0].day_of_week == 7


@pytest.mark.parametrize("count", [0, 6, 8])
def test_validate_complete_rejects_wrong_count(count):
    entries = [AvailabilityInput(day_of_week=(i % 7) + 1, is_open=True) for i in range(count)]

    with pytest.raises(InvalidAvailabilityError):
        AvailabilityCalendar.validate_complete(entries)


def test_validate_complete_rejects_none():
    with pytest.raises(InvalidAvailabilityError):
        AvailabilityCalendar.validate_complete(None)


def test_validate_complete_reports_missing_day():
    entries = [entry for entry in week() if entry.day_of_week != 3]
    entries.append(AvailabilityInput(day_of_week=2, is_open=False))

    with pytest.raises(InvalidAvailabilityError) as excinfo:
        AvailabilityCalendar.validate_complete(entries)

    assert "missing [3]" in str(excinfo.value)


def test_validate_complete_rejects_day_outside_week():
    entries = week()[:6] + [AvailabilityInput(day_of_week=8, is_open=True)]

    with pytest.raises(InvalidAvailabilityError):
        AvailabilityCalendar.validate_complete(entries)


def test_validate_complete_rejects_closing_before_opening():
    entries = week()
    entries[0] = AvailabilityInput(day_of_week=1, is_open=True, open_from=time(18), open_to=time(9))

    with pytest.raises(InvalidAvailabilityError):
        AvailabilityCalendar.validate_complete(entries)


def test_missing_weekday_counts_as_closed():
    calendar = AvailabilityCalendar([AvailabilityInput(day_of_week=1, is_open=True)])

    assert calendar.is_open_on(1) is True
    assert calendar.is_open_on(2) is False
    assert calendar.opening_hours(2) is None


def test_opening_hours_of_open_day():
    calendar = AvailabilityCalendar(week())

    assert calendar.opening_hours(1) == (time(9), time(18))
    assert calendar.opening_hours(6) is None


def test_replace_all_keeps_identity_of_existing_entries():
    existing = [
        Availability(id=100 + day, day_of_week=day, is_open=False, space_id=1)
        for day in range(7, 0, -1)
    ]
    originals = {entry.day_of_week: entry for entry in existing}

    updated = AvailabilityCalendar.replace_all(existing, week(open_days=(6, 7)))

    assert [entry.day_of_week for entry in updated] == [1, 2, 3, 4, 5, 6, 7]
    for entry in updated:
        assert entry is originals[entry.day_of_week]
        assert entry.id == 100 + entry.day_of_week
        assert entry.space_id == 1
    assert [entry.is_open for entry in updated] == [False] * 5 + [True] * 2
    assert updated[5].open_from == time(9)


def test_count_open_days_over_first_days_of_june():
    # 2024-06-01 is a Saturday; Monday to Friday are open
    calendar = AvailabilityCalendar(week())

    assert OpenDayCalculator.count_open_days(calendar, date(2024, 6, 1), date(2024, 6, 5)) == 3


def test_count_open_days_single_day():
    calendar = AvailabilityCalendar(week())
    monday = date(2024, 6, 3)

    assert OpenDayCalculator.count_open_days(calendar, monday, monday) == 1
    assert OpenDayCalculator.count_open_days(calendar, monday - timedelta(days=1), monday - timedelta(days=1)) == 0


def test_count_open_days_is_additive_over_adjacent_ranges():
    calendar = AvailabilityCalendar(week(open_days=(1, 3, 6)))
    start, middle, end = date(2024, 1, 1), date(2024, 1, 17), date(2024, 2, 29)

    whole = OpenDayCalculator.count_open_days(calendar, start, end)
    first = OpenDayCalculator.count_open_days(calendar, start, middle)
    second = OpenDayCalculator.count_open_days(calendar, middle + timedelta(days=1), end)

    assert whole == first + second


def test_count_open_days_full_week_counts_open_weekdays():
    calendar = AvailabilityCalendar(week(open_days=(2, 4)))

    assert OpenDayCalculator.count_open_days(calendar, date(2024, 6, 3), date(2024, 6, 9)) == 2


def test_count_open_days_rejects_reversed_range():
    calendar = AvailabilityCalendar(week())

    with pytest.raises(InvalidRangeError):
        OpenDayCalculator.count_open_days(calendar, date(2024, 6, 5), date(2024, 6, 1))


def test_open_dates_lists_open_days_in_order():
    calendar = AvailabilityCalendar(week())

    dates = OpenDayCalculator.open_dates(calendar, date(2024, 6, 1), date(2024, 6, 5))

    assert dates == [date(2024, 6, 3), date(2024, 6, 4), date(2024, 6, 5)]


def test_open_dates_rejects_reversed_range_immediately():
    calendar = AvailabilityCalendar(week())

    with pytest.raises(InvalidRangeError):
        OpenDayCalculator.open_dates(calendar, date(2024, 6, 5), date(2024, 6, 1))
