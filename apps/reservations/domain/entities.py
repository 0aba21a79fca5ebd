"""
Reservation Domain Entities

- Reservation: one desk of one space booked by a user for a date range
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from shared.domain.base import Entity
from shared.domain.value_objects import DateRange


@dataclass(eq=False)
class Reservation(Entity):
    """
    Reservation entity

    Key invariants:
    - start_date <= end_date, both days included
    - price is derived from the space and the dates, never set directly
    - space_id becomes None when the space is deleted; the reservation
      itself is kept
    """
    user_id: int
    space_id: int | None
    desk: int
    start_date: date
    end_date: date
    price: Decimal = Decimal('0.00')

    @property
    def dates(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)

    def __str__(self):
        return f"Reservation of desk {self.desk} in space {self.space_id} ({self.dates})"
