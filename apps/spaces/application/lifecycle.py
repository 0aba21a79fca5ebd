"""
Space Lifecycle

Use cases for spaces. A space owns its address, its seven availability
entries and its images; every write below keeps those owned records in
step with the space inside one unit of work.

Commands:
- SpaceCommand: full description of a space for create and update
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Callable, Mapping
import logging

from shared.application.uow import AbstractUnitOfWork, DjangoUnitOfWork
from shared.domain.exceptions import DuplicateNameError, InvalidArgumentError, NotFoundError
from apps.spaces.application.ports import (
    AddressStore,
    AvailabilityStore,
    ImageStore,
    SpacePersistence,
    UserDirectory,
)
from apps.spaces.domain.calendar import AvailabilityCalendar, OpenDayCalculator
from apps.spaces.domain.entities import AddressInput, AvailabilityInput, Image, Space

logger = logging.getLogger(__name__)

Authorize = Callable[[Space], None]


@dataclass
class SpaceCommand:
    """Everything needed to create a space or overwrite an existing one"""
    name: str
    description: str
    capacity: int
    owner_id: int
    address: AddressInput
    availability: list[AvailabilityInput]
    conveniences: set[str] = field(default_factory=set)
    daily_rate: Decimal = Decimal('0.00')


class SpaceLifecycleManager:
    """
    Create, update and delete spaces together with their owned records

    Key invariants kept here:
    - space names are unique (renaming a space to its own name is allowed)
    - a space always has exactly one availability entry per weekday
    - deleting a space deletes its availabilities, address and images,
      all or nothing

    Write use cases take an optional ``authorize`` callback. It receives
    the loaded space inside the unit of work and raises to refuse the
    change.
    """

    def __init__(
        self,
        spaces: SpacePersistence,
        addresses: AddressStore,
        availabilities: AvailabilityStore,
        users: UserDirectory,
        images: ImageStore,
        uow_factory: Callable[[str], AbstractUnitOfWork] = DjangoUnitOfWork,
    ):
        self.spaces = spaces
        self.addresses = addresses
        self.availabilities = availabilities
        self.users = users
        self.images = images
        self.uow_factory = uow_factory

    # ===== Queries =====

    def get_all(self, filters: Mapping[str, Any] | None = None) -> list[Space]:
        spaces = list(self.spaces.find_all(filters))
        for space in spaces:
            space.sort_availabilities()
        return spaces

    def get_by_id(self, space_id: int) -> Space:
        space = self._get_space(space_id)
        space.sort_availabilities()
        return space

    def count_open_days(self, space_id: int, start_date: date, end_date: date) -> int:
        space = self._get_space(space_id)
        return OpenDayCalculator.count_open_days(space.calendar, start_date, end_date)

    def open_dates(self, space_id: int, start_date: date, end_date: date) -> list[date]:
        space = self._get_space(space_id)
        return OpenDayCalculator.open_dates(space.calendar, start_date, end_date)

    # ===== Commands =====

    def create(self, command: SpaceCommand) -> Space:
        """
        Create a space with its address and weekly calendar

        Raises:
            DuplicateNameError: a space with this name already exists
            NotFoundError: the owner does not exist
            InvalidAvailabilityError: the calendar is not a complete week
        """
        logger.info(f"Creating space '{command.name}' for owner {command.owner_id}")

        with self.uow_factory('create_space'):
            if self.spaces.exists_by_name(command.name):
                raise DuplicateNameError(f"Space with name {command.name} already exists")

            address = self.addresses.create(command.address)
            owner = self.users.get_by_id(command.owner_id)

            entries = AvailabilityCalendar.validate_complete(command.availability)

            space = Space(
                name=command.name,
                description=command.description,
                capacity=command.capacity,
                owner_id=owner.id,
                daily_rate=command.daily_rate,
                conveniences=set(command.conveniences),
                address=address,
                availabilities=[self.availabilities.create(entry) for entry in entries],
                images=[],
            )
            space = self.spaces.save(space)

        logger.info(f"Space created: {space.name} (ID: {space.id})")
        return space

    def update(self, space_id: int, command: SpaceCommand, authorize: Authorize | None = None) -> Space:
        """
        Overwrite a space; availability entries are updated in place

        Raises:
            NotFoundError: no such space, or the owner does not exist
            DuplicateNameError: the new name belongs to another space
            InvalidAvailabilityError: the calendar is not a complete week
        """
        logger.info(f"Updating space {space_id}")

        with self.uow_factory('update_space'):
            space = self._get_space(space_id)
            if authorize is not None:
                authorize(space)

            if command.name != space.name and self.spaces.exists_by_name(command.name):
                raise DuplicateNameError(f"Space with name {command.name} already exists")

            previous_address = space.address
            if previous_address is not None and previous_address.id is not None:
                self.addresses.delete(previous_address.id)
            space.address = self.addresses.create(command.address)

            owner = self.users.get_by_id(command.owner_id)

            space.name = command.name
            space.description = command.description
            space.capacity = command.capacity
            space.owner_id = owner.id
            space.daily_rate = command.daily_rate
            space.conveniences = set(command.conveniences)

            entries = AvailabilityCalendar.validate_complete(command.availability)
            AvailabilityCalendar.validate_complete(space.availabilities)
            updated = AvailabilityCalendar.replace_all(space.availabilities, entries)
            space.availabilities = [self.availabilities.update(entry) for entry in updated]

            space = self.spaces.save(space)

        logger.info(f"Space updated: {space.name} (ID: {space.id})")
        return space

    def delete(self, space_id: int, authorize: Authorize | None = None) -> Space:
        """
        Delete a space and everything it owns

        Children are deleted one by one inside a single unit of work; if
        any of them fails nothing is deleted. Returns the space as it was
        before deletion.
        """
        logger.info(f"Deleting space {space_id}")

        with self.uow_factory('delete_space'):
            space = self._get_space(space_id)
            if authorize is not None:
                authorize(space)
            space.sort_availabilities()
            snapshot = copy.deepcopy(space)

            for availability in space.availabilities:
                self.availabilities.delete(availability.id)
            space.availabilities.clear()

            if space.address is not None:
                self.addresses.delete(space.address.id)
                space.address = None

            if space.images:
                for image in space.images:
                    self.images.delete(image.id)
                space.images = []

            self.spaces.delete(space)

        logger.info(
            f"Space deleted: {snapshot.name} (ID: {snapshot.id}) with "
            f"{len(snapshot.availabilities)} availabilities and {len(snapshot.images)} images"
        )
        return snapshot

    def add_image(
        self,
        space_id: int,
        file: Any,
        caption: str | None,
        authorize: Authorize | None = None,
    ) -> Image:
        """
        Store an image and attach it to the space

        Raises:
            NotFoundError: no such space
            InvalidArgumentError: file or caption missing
        """
        with self.uow_factory('add_image'):
            space = self._get_space(space_id)
            if authorize is not None:
                authorize(space)

            if file is None or caption is None:
                raise InvalidArgumentError("Image and caption must be present")

            image = self.images.add(file, caption)
            try:
                space.images.append(image)
                self.spaces.save(space)
            except Exception:
                self.images.discard_upload(image)
                raise

        logger.info(f"Image {image.id} added to space {space_id}")
        return image

    def delete_image(self, space_id: int, image_id: int, authorize: Authorize | None = None) -> Image:
        """
        Detach and delete one image of the space

        Raises:
            NotFoundError: no such space, or the image is not one of its images
        """
        with self.uow_factory('delete_image'):
            space = self._get_space(space_id)
            if authorize is not None:
                authorize(space)

            image = self.images.get_by_id(image_id)
            member = space.find_image(image_id)
            if image is None or member is None:
                raise NotFoundError(f"Image with id {image_id} does not exist in the space")

            space.images.remove(member)
            self.images.delete(image_id)
            self.spaces.save(space)

        logger.info(f"Image {image_id} removed from space {space_id}")
        return image

    def _get_space(self, space_id: int) -> Space:
        space = self.spaces.find_by_id(space_id)
        if space is None:
            raise NotFoundError(f"Space with id {space_id} does not exist")
        return space
