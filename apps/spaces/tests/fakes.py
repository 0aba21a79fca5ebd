"""In-memory stand-ins for the space and reservation ports.

Rows live in plain dicts on an ``InMemoryStore``; every read hands out a
copy so use cases cannot change stored state without going through a
port, the same as with the database adapters.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, replace
from datetime import time
from decimal import Decimal
from typing import Any, Mapping

from shared.application.uow import AbstractUnitOfWork
from shared.domain.exceptions import NotFoundError
from apps.reservations.application.ports import ReservationRepository
from apps.reservations.domain.entities import Reservation
from apps.spaces.application.lifecycle import SpaceCommand, SpaceLifecycleManager
from apps.spaces.application.ports import (
    AddressStore,
    AvailabilityStore,
    ImageStore,
    SpacePersistence,
    UserDirectory,
)
from apps.spaces.domain.entities import (
    Address,
    AddressInput,
    Availability,
    AvailabilityInput,
    Image,
    Space,
)


@dataclass
class FakeUser:
    id: int
    email: str = ""
    is_staff: bool = False


class InMemoryStore:
    TABLES = ("users", "spaces", "addresses", "availabilities", "images", "reservations")

    def __init__(self):
        for table in self.TABLES:
            setattr(self, table, {})
        self.last_id = 0
        # files live outside the transactional tables
        self.discarded_files: list[str] = []

    def next_id(self) -> int:
        self.last_id += 1
        return self.last_id

    def add_user(self, email: str = "owner@example.com") -> FakeUser:
        user = FakeUser(id=self.next_id(), email=email)
        self.users[user.id] = user
        return user

    def dump(self) -> dict[str, Any]:
        state = {table: getattr(self, table) for table in self.TABLES}
        state["last_id"] = self.last_id
        return copy.deepcopy(state)

    def load(self, state: dict[str, Any]) -> None:
        state = copy.deepcopy(state)
        self.last_id = state.pop("last_id")
        for table, rows in state.items():
            setattr(self, table, rows)

    def counts(self) -> dict[str, int]:
        return {table: len(getattr(self, table)) for table in self.TABLES}


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Snapshots the store on entry and restores it when the block fails"""

    def __init__(self, store: InMemoryStore, label: str = ""):
        self.store = store
        self.label = label
        self._state: dict[str, Any] | None = None

    def __enter__(self):
        self._state = self.store.dump()
        return self

    def commit(self):
        self._state = None

    def rollback(self):
        if self._state is not None:
            self.store.load(self._state)
        self._state = None


class FakeUserDirectory(UserDirectory):

    def __init__(self, store: InMemoryStore):
        self.store = store

    def get_by_id(self, user_id: int) -> FakeUser:
        user = self.store.users.get(user_id)
        if user is None:
            raise NotFoundError(f"User with id {user_id} does not exist")
        return user


class FakeAddressStore(AddressStore):

    def __init__(self, store: InMemoryStore):
        self.store = store

    def create(self, address_input: AddressInput) -> Address:
        address = Address(
            id=self.store.next_id(),
            street=address_input.street,
            city=address_input.city,
            postal_code=address_input.postal_code,
            country=address_input.country,
        )
        self.store.addresses[address.id] = copy.deepcopy(address)
        return address

    def delete(self, address_id: int) -> None:
        if self.store.addresses.pop(address_id, None) is None:
            raise NotFoundError(f"Address with id {address_id} does not exist")


class FakeAvailabilityStore(AvailabilityStore):

    def __init__(self, store: InMemoryStore):
        self.store = store

    def create(self, entry: AvailabilityInput) -> Availability:
        availability = Availability.from_input(entry)
        availability.id = self.store.next_id()
        self.store.availabilities[availability.id] = copy.deepcopy(availability)
        return availability

    def update(self, availability: Availability) -> Availability:
        if availability.id not in self.store.availabilities:
            raise NotFoundError(f"Availability with id {availability.id} does not exist")
        self.store.availabilities[availability.id] = copy.deepcopy(availability)
        return availability

    def delete(self, availability_id: int) -> None:
        if self.store.availabilities.pop(availability_id, None) is None:
            raise NotFoundError(f"Availability with id {availability_id} does not exist")


class FakeImageStore(ImageStore):

    def __init__(self, store: InMemoryStore):
        self.store = store

    def add(self, file: Any, caption: str) -> Image:
        image = Image(id=self.store.next_id(), file=str(file), caption=caption, url=f"/media/{file}")
        self.store.images[image.id] = copy.deepcopy(image)
        return image

    def get_by_id(self, image_id: int) -> Image | None:
        image = self.store.images.get(image_id)
        return copy.deepcopy(image) if image is not None else None

    def delete(self, image_id: int) -> None:
        if self.store.images.pop(image_id, None) is None:
            raise NotFoundError(f"Image with id {image_id} does not exist")

    def discard_upload(self, image: Image) -> None:
        self.store.discarded_files.append(image.file)


class FakeSpacePersistence(SpacePersistence):
    """Stores the scalar part of a space; owned records are found by space_id"""

    def __init__(self, store: InMemoryStore):
        self.store = store

    def _load(self, row: Space) -> Space:
        space = copy.deepcopy(row)
        owned = lambda table: [copy.deepcopy(r) for r in table.values() if r.space_id == space.id]  # noqa: E731
        addresses = owned(self.store.addresses)
        space.address = addresses[0] if addresses else None
        space.availabilities = owned(self.store.availabilities)
        space.images = owned(self.store.images)
        return space

    def find_all(self, filters: Mapping[str, Any] | None = None) -> list[Space]:
        rows = sorted(self.store.spaces.values(), key=lambda row: row.id)
        name = (filters or {}).get("name")
        if name:
            rows = [row for row in rows if name.lower() in row.name.lower()]
        return [self._load(row) for row in rows]

    def find_by_id(self, space_id: int) -> Space | None:
        row = self.store.spaces.get(space_id)
        return self._load(row) if row is not None else None

    def exists_by_name(self, name: str) -> bool:
        return any(row.name == name for row in self.store.spaces.values())

    def save(self, space: Space) -> Space:
        if space.id is None:
            space.id = self.store.next_id()
        elif space.id not in self.store.spaces:
            raise NotFoundError(f"Space with id {space.id} does not exist")

        self.store.spaces[space.id] = replace(
            copy.deepcopy(space), address=None, availabilities=[], images=[]
        )

        owned = [space.address] if space.address is not None else []
        for table, records in (
            (self.store.addresses, owned),
            (self.store.availabilities, space.availabilities),
            (self.store.images, space.images),
        ):
            for record in records:
                record.space_id = space.id
                table[record.id].space_id = space.id
        return space

    def delete(self, space: Space) -> None:
        if self.store.spaces.pop(space.id, None) is None:
            raise NotFoundError(f"Space with id {space.id} does not exist")
        for reservation in self.store.reservations.values():
            if reservation.space_id == space.id:
                reservation.space_id = None


class FakeReservationRepository(ReservationRepository):

    def __init__(self, store: InMemoryStore):
        self.store = store

    def find_all(self, filters: Mapping[str, Any] | None = None) -> list[Reservation]:
        rows = sorted(self.store.reservations.values(), key=lambda row: row.id)
        user = (filters or {}).get("user")
        if user is not None:
            rows = [row for row in rows if row.user_id == int(user)]
        return [copy.deepcopy(row) for row in rows]

    def find_by_id(self, reservation_id: int) -> Reservation | None:
        row = self.store.reservations.get(reservation_id)
        return copy.deepcopy(row) if row is not None else None

    def find_by_user(self, user_id: int) -> list[Reservation]:
        return self.find_all({"user": user_id})

    def find_by_space(self, space_id: int) -> list[Reservation]:
        return [row for row in self.find_all() if row.space_id == space_id]

    def save(self, reservation: Reservation) -> Reservation:
        if reservation.id is None:
            reservation.id = self.store.next_id()
        elif reservation.id not in self.store.reservations:
            raise NotFoundError(f"Reservation with id {reservation.id} does not exist")
        self.store.reservations[reservation.id] = copy.deepcopy(reservation)
        return reservation

    def delete(self, reservation: Reservation) -> None:
        if self.store.reservations.pop(reservation.id, None) is None:
            raise NotFoundError(f"Reservation with id {reservation.id} does not exist")


def build_manager(store: InMemoryStore) -> SpaceLifecycleManager:
    return SpaceLifecycleManager(
        spaces=FakeSpacePersistence(store),
        addresses=FakeAddressStore(store),
        availabilities=FakeAvailabilityStore(store),
        users=FakeUserDirectory(store),
        images=FakeImageStore(store),
        uow_factory=lambda label="": InMemoryUnitOfWork(store, label),
    )


def week(open_days=(1, 2, 3, 4, 5)) -> list[AvailabilityInput]:
    """A full week, open 09:00-18:00 on the given ISO weekdays"""
    return [
        AvailabilityInput(
            day_of_week=day,
            is_open=day in open_days,
            open_from=time(9) if day in open_days else None,
            open_to=time(18) if day in open_days else None,
        )
        for day in range(1, 8)
    ]


def space_command(owner_id: int, name: str = "Loft", **overrides: Any) -> SpaceCommand:
    values: dict[str, Any] = dict(
        name=name,
        description="Open plan floor",
        capacity=10,
        owner_id=owner_id,
        address=AddressInput(street="Main 1", city="Warsaw", postal_code="00-001", country="PL"),
        availability=week(),
        conveniences={"wifi", "coffee"},
        daily_rate=Decimal("50.00"),
    )
    values.update(overrides)
    return SpaceCommand(**values)
