"""
Common Value Objects

- DateRange: inclusive range of calendar dates (first day to last day)
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator

from shared.domain.base import ValueObject
from shared.domain.exceptions import InvalidRangeError


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Both ends are inclusive: a reservation from Monday to Wednesday
    covers three days. A single-day range has start_date == end_date.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.end_date < self.start_date:
            raise InvalidRangeError(
                f"End date ({self.end_date}) must not be before start date ({self.start_date})"
            )

    def days(self) -> Iterator[date]:
        """Iterate over every date in the range, in order"""
        current = self.start_date
        while current <= self.end_date:
            yield current
            current += timedelta(days=1)

    def __len__(self) -> int:
        """Number of calendar days covered, ends included"""
        return (self.end_date - self.start_date).days + 1

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"
