"""
Reservation validation and pricing

Pure functions over a space and a requested booking; nothing here reads
or writes the store.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from shared.domain.exceptions import InvalidDeskError
from shared.domain.value_objects import DateRange
from apps.spaces.domain.calendar import OpenDayCalculator
from apps.spaces.domain.entities import Space

CENT = Decimal('0.01')


class ReservationValidator:

    @staticmethod
    def validate(space: Space, desk: int, start_date: date, end_date: date) -> None:
        """
        Check the requested dates and desk against the space

        A range in which the space is never open is accepted; it simply
        costs nothing.

        Raises:
            InvalidRangeError: end_date is before start_date
            InvalidDeskError: desk is not within 1..space.capacity
        """
        DateRange(start_date, end_date)

        if desk is None or desk < 1 or desk > space.capacity:
            raise InvalidDeskError(
                f"Desk {desk} does not exist in space {space.id} "
                f"(desks 1-{space.capacity})"
            )

    @staticmethod
    def compute_price(space: Space, start_date: date, end_date: date) -> Decimal:
        """Daily rate times the number of open days in the range"""
        open_days = OpenDayCalculator.count_open_days(space.calendar, start_date, end_date)
        price = Decimal(space.daily_rate) * open_days
        return price.quantize(CENT, rounding=ROUND_HALF_UP)
