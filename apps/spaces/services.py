"""Wiring of the space lifecycle use cases to their Django adapters."""

from __future__ import annotations

from apps.spaces.application.lifecycle import SpaceLifecycleManager
from apps.spaces.infrastructure.repositories import (
    DjangoAddressStore,
    DjangoAvailabilityStore,
    DjangoImageStore,
    DjangoSpacePersistence,
)
from apps.users.services import DjangoUserDirectory
from shared.application.uow import DjangoUnitOfWork


def get_space_lifecycle_manager() -> SpaceLifecycleManager:
    return SpaceLifecycleManager(
        spaces=DjangoSpacePersistence(),
        addresses=DjangoAddressStore(),
        availabilities=DjangoAvailabilityStore(),
        users=DjangoUserDirectory(),
        images=DjangoImageStore(),
        uow_factory=DjangoUnitOfWork,
    )
