"""Wiring of the reservation use cases to their Django adapters."""

from __future__ import annotations

from apps.reservations.application.service import ReservationService
from apps.reservations.infrastructure.repositories import DjangoReservationRepository
from apps.spaces.infrastructure.repositories import DjangoSpacePersistence
from apps.users.services import DjangoUserDirectory
from shared.application.uow import DjangoUnitOfWork


def get_reservation_service() -> ReservationService:
    return ReservationService(
        reservations=DjangoReservationRepository(),
        spaces=DjangoSpacePersistence(),
        users=DjangoUserDirectory(),
        uow_factory=DjangoUnitOfWork,
    )
