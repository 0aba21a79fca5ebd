"""
Availability Calendar

The weekly open/closed schedule of a space and the date arithmetic built
on it.

Weekdays follow ISO numbering, the same as ``date.isoweekday()``:
1 = Monday .. 7 = Sunday.
"""

from __future__ import annotations

from datetime import date, time
from typing import Iterable, Iterator, Protocol, Sequence

from shared.domain.exceptions import InvalidAvailabilityError
from shared.domain.value_objects import DateRange

WEEKDAYS = tuple(range(1, 8))


class WeekdayEntry(Protocol):
    day_of_week: int
    is_open: bool
    open_from: time | None
    open_to: time | None


def _by_day(entry: WeekdayEntry) -> int:
    return entry.day_of_week


class AvailabilityCalendar:
    """
    Read-only view over the seven weekday entries of one space

    Works with anything shaped like a weekday entry: stored
    ``Availability`` entities or incoming ``AvailabilityInput`` values.
    """

    def __init__(self, entries: Iterable[WeekdayEntry]):
        self._entries = sorted(entries, key=_by_day)

    @staticmethod
    def validate_complete(entries: Sequence[WeekdayEntry] | None) -> list[WeekdayEntry]:
        """
        Check that entries cover every weekday exactly once

        Returns the entries ordered Monday first. The input sequence is
        left untouched.

        Raises:
            InvalidAvailabilityError: wrong count, a duplicate or missing
                weekday, or opening hours that end before they start
        """
        if entries is None or len(entries) != len(WEEKDAYS):
            count = 0 if entries is None else len(entries)
            raise InvalidAvailabilityError(
                f"Availability must be given for all {len(WEEKDAYS)} days of the week, got {count}"
            )

        days = [getattr(entry, 'day_of_week', None) for entry in entries]
        if any(not isinstance(day, int) or isinstance(day, bool) for day in days):
            raise InvalidAvailabilityError(f"Day of week must be an integer 1-7, got {days}")

        ordered = sorted(entries, key=_by_day)
        ordered_days = tuple(entry.day_of_week for entry in ordered)
        if ordered_days != WEEKDAYS:
            missing = sorted(set(WEEKDAYS) - set(ordered_days))
            raise InvalidAvailabilityError(
                f"Availability must be given for all days of the week "
                f"(got {list(ordered_days)}, missing {missing})"
            )

        for entry in ordered:
            open_from = getattr(entry, 'open_from', None)
            open_to = getattr(entry, 'open_to', None)
            if open_from is not None and open_to is not None and open_from >= open_to:
                raise InvalidAvailabilityError(
                    f"Opening time {open_from} must be before closing time {open_to} "
                    f"on day {entry.day_of_week}"
                )

        return ordered

    @staticmethod
    def replace_all(
        existing: Sequence[WeekdayEntry],
        new: Sequence[WeekdayEntry],
    ) -> list[WeekdayEntry]:
        """
        Overwrite existing entries with the values of the new ones

        Both sequences are sorted by weekday on their own and paired by
        position. Existing entries are updated in place so their identity
        (and every row that refers to them) is kept; nothing is added or
        removed. Both sides must already pass validate_complete().
        """
        ordered_existing = sorted(existing, key=_by_day)
        ordered_new = sorted(new, key=_by_day)

        for current, incoming in zip(ordered_existing, ordered_new):
            current.is_open = incoming.is_open
            current.open_from = incoming.open_from
            current.open_to = incoming.open_to

        return ordered_existing

    def is_open_on(self, day_of_week: int) -> bool:
        """Open flag for a weekday; a weekday without an entry counts as closed"""
        entry = self._entry_for(day_of_week)
        return bool(entry.is_open) if entry is not None else False

    def opening_hours(self, day_of_week: int) -> tuple[time | None, time | None] | None:
        """(open_from, open_to) for an open weekday, None when closed"""
        entry = self._entry_for(day_of_week)
        if entry is None or not entry.is_open:
            return None
        return entry.open_from, entry.open_to

    def is_open_at(self, day: date) -> bool:
        return self.is_open_on(day.isoweekday())

    def _entry_for(self, day_of_week: int) -> WeekdayEntry | None:
        return next((entry for entry in self._entries if entry.day_of_week == day_of_week), None)

    def __iter__(self) -> Iterator[WeekdayEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        open_days = [entry.day_of_week for entry in self._entries if entry.is_open]
        return f"AvailabilityCalendar(open_days={open_days})"


class OpenDayCalculator:
    """Counts the billable (open) days of a space within a date range"""

    @staticmethod
    def count_open_days(calendar: AvailabilityCalendar, start_date: date, end_date: date) -> int:
        """
        Number of open days from start_date through end_date, both included

        Raises:
            InvalidRangeError: end_date is before start_date
        """
        days = 0
        for day in DateRange(start_date, end_date).days():
            if calendar.is_open_on(day.isoweekday()):
                days += 1
        return days

    @staticmethod
    def open_dates(calendar: AvailabilityCalendar, start_date: date, end_date: date) -> list[date]:
        """Every open date from start_date through end_date, in order"""
        period = DateRange(start_date, end_date)
        return [day for day in period.days() if calendar.is_open_at(day)]
