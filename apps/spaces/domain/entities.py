"""
Space Domain Entities

- Space: aggregate root owning its address, calendar and images
- Availability: one weekday of the weekly calendar
- Address, Image: owned satellite records
- AvailabilityInput, AddressInput: incoming values used to create or
  overwrite owned records

Owned records point back to their space through ``space_id``; the space
holds plain lists, never a live object graph.
"""

from dataclasses import dataclass, field
from datetime import datetime, time
from decimal import Decimal

from apps.spaces.domain.calendar import AvailabilityCalendar
from shared.domain.base import Entity, ValueObject


@dataclass(frozen=True)
class AvailabilityInput(ValueObject):
    day_of_week: int
    is_open: bool
    open_from: time | None = None
    open_to: time | None = None


@dataclass(frozen=True)
class AddressInput(ValueObject):
    street: str
    city: str
    postal_code: str = ''
    country: str = ''


@dataclass(eq=False)
class Availability(Entity):
    """Open/closed flag of a space for one ISO weekday (1=Monday .. 7=Sunday)"""
    day_of_week: int
    is_open: bool = False
    open_from: time | None = None
    open_to: time | None = None
    space_id: int | None = None

    @classmethod
    def from_input(cls, data: AvailabilityInput) -> 'Availability':
        return cls(
            day_of_week=data.day_of_week,
            is_open=data.is_open,
            open_from=data.open_from,
            open_to=data.open_to,
        )


@dataclass(eq=False)
class Address(Entity):
    street: str
    city: str
    postal_code: str = ''
    country: str = ''
    space_id: int | None = None


@dataclass(eq=False)
class Image(Entity):
    file: str
    caption: str
    url: str = ''
    uploaded_at: datetime | None = None
    space_id: int | None = None


@dataclass(eq=False)
class Space(Entity):
    """
    Space Aggregate Root

    Key invariants:
    - name is unique across all spaces
    - availabilities holds exactly one entry for each weekday 1..7
    - capacity is the number of bookable desks, numbered 1..capacity
    """
    name: str
    description: str
    capacity: int
    owner_id: int
    daily_rate: Decimal = Decimal('0.00')
    conveniences: set[str] = field(default_factory=set)
    address: Address | None = None
    availabilities: list[Availability] = field(default_factory=list)
    images: list[Image] = field(default_factory=list)

    @property
    def calendar(self) -> AvailabilityCalendar:
        return AvailabilityCalendar(self.availabilities)

    def sort_availabilities(self) -> None:
        """Order the calendar Monday first; a presentation guarantee only"""
        self.availabilities.sort(key=lambda entry: entry.day_of_week)

    def find_image(self, image_id: int) -> Image | None:
        return next((image for image in self.images if image.id == image_id), None)

    def __str__(self):
        return f"Space {self.name} (capacity {self.capacity})"
