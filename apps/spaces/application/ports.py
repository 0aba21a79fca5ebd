"""
Collaborator interfaces consumed by SpaceLifecycleManager

Each port has a Django adapter in ``apps.spaces.infrastructure`` (and
``apps.users.services`` for the user directory). Tests substitute
in-memory implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from apps.spaces.domain.entities import (
    Address,
    AddressInput,
    Availability,
    AvailabilityInput,
    Image,
    Space,
)
from apps.users.services import UserDirectory  # noqa: F401


class AddressStore(ABC):
    @abstractmethod
    def create(self, address_input: AddressInput) -> Address:
        pass

    @abstractmethod
    def delete(self, address_id: int) -> None:
        pass


class AvailabilityStore(ABC):
    @abstractmethod
    def create(self, entry: AvailabilityInput) -> Availability:
        pass

    @abstractmethod
    def update(self, availability: Availability) -> Availability:
        pass

    @abstractmethod
    def delete(self, availability_id: int) -> None:
        pass


class ImageStore(ABC):
    @abstractmethod
    def add(self, file: Any, caption: str) -> Image:
        pass

    @abstractmethod
    def get_by_id(self, image_id: int) -> Image | None:
        pass

    @abstractmethod
    def delete(self, image_id: int) -> None:
        pass

    @abstractmethod
    def discard_upload(self, image: Image) -> None:
        """Remove the stored file of an image whose record is being rolled back"""
        pass


class SpacePersistence(ABC):
    @abstractmethod
    def find_all(self, filters: Mapping[str, Any] | None = None) -> Sequence[Space]:
        """All spaces, optionally narrowed by list filters"""
        pass

    @abstractmethod
    def find_by_id(self, space_id: int) -> Space | None:
        pass

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        pass

    @abstractmethod
    def save(self, space: Space) -> Space:
        """Insert or update the space and attach its owned records to it"""
        pass

    @abstractmethod
    def delete(self, space: Space) -> None:
        pass
