"""
Reservation Use Cases

Commands:
- ReservationCommand: user, space, desk and dates of a booking

Every write resolves the user and the space, validates the request and
recomputes the price from the space's current calendar and rate.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Mapping
import logging

from shared.application.uow import AbstractUnitOfWork, DjangoUnitOfWork
from shared.domain.exceptions import NotFoundError
from apps.reservations.application.ports import ReservationRepository
from apps.reservations.domain.entities import Reservation
from apps.reservations.domain.validator import ReservationValidator
from apps.spaces.application.ports import SpacePersistence
from apps.spaces.domain.entities import Space
from apps.users.services import UserDirectory

logger = logging.getLogger(__name__)


@dataclass
class ReservationCommand:
    user_id: int
    space_id: int
    desk: int
    start_date: date
    end_date: date


class ReservationService:

    def __init__(
        self,
        reservations: ReservationRepository,
        spaces: SpacePersistence,
        users: UserDirectory,
        uow_factory: Callable[[str], AbstractUnitOfWork] = DjangoUnitOfWork,
    ):
        self.reservations = reservations
        self.spaces = spaces
        self.users = users
        self.uow_factory = uow_factory

    # ===== Queries =====

    def get_all(self, filters: Mapping[str, Any] | None = None) -> list[Reservation]:
        return list(self.reservations.find_all(filters))

    def get_by_id(self, reservation_id: int) -> Reservation:
        reservation = self.reservations.find_by_id(reservation_id)
        if reservation is None:
            raise NotFoundError(f"Reservation with id {reservation_id} does not exist")
        return reservation

    def list_for_user(self, user_id: int) -> list[Reservation]:
        return list(self.reservations.find_by_user(user_id))

    def list_for_space(self, space_id: int) -> list[Reservation]:
        return list(self.reservations.find_by_space(space_id))

    def get_space(self, space_id: int) -> Space:
        space = self.spaces.find_by_id(space_id)
        if space is None:
            raise NotFoundError(f"Space with id {space_id} does not exist")
        return space

    # ===== Commands =====

    def create(self, command: ReservationCommand) -> Reservation:
        """
        Book a desk

        Raises:
            NotFoundError: user or space does not exist
            InvalidRangeError: end date before start date
            InvalidDeskError: desk outside the space capacity
        """
        logger.info(
            f"Creating reservation for user {command.user_id}, space {command.space_id}, "
            f"desk {command.desk}, dates {command.start_date} - {command.end_date}"
        )

        with self.uow_factory('create_reservation'):
            user = self.users.get_by_id(command.user_id)
            space = self.get_space(command.space_id)

            ReservationValidator.validate(space, command.desk, command.start_date, command.end_date)

            reservation = Reservation(
                user_id=user.id,
                space_id=space.id,
                desk=command.desk,
                start_date=command.start_date,
                end_date=command.end_date,
                price=ReservationValidator.compute_price(space, command.start_date, command.end_date),
            )
            reservation = self.reservations.save(reservation)

        self._log_saved(reservation, 'created')
        return reservation

    def update(self, reservation_id: int, command: ReservationCommand) -> Reservation:
        """
        Change a reservation; the price is recomputed

        Raises:
            NotFoundError: reservation, user or space does not exist
            InvalidRangeError: end date before start date
            InvalidDeskError: desk outside the space capacity
        """
        logger.info(f"Updating reservation {reservation_id}")

        with self.uow_factory('update_reservation'):
            reservation = self.get_by_id(reservation_id)
            user = self.users.get_by_id(command.user_id)
            space = self.get_space(command.space_id)

            ReservationValidator.validate(space, command.desk, command.start_date, command.end_date)

            reservation.user_id = user.id
            reservation.space_id = space.id
            reservation.desk = command.desk
            reservation.start_date = command.start_date
            reservation.end_date = command.end_date
            reservation.price = ReservationValidator.compute_price(
                space, command.start_date, command.end_date
            )
            reservation = self.reservations.save(reservation)

        self._log_saved(reservation, 'updated')
        return reservation

    def delete(self, reservation_id: int) -> Reservation:
        with self.uow_factory('delete_reservation'):
            reservation = self.get_by_id(reservation_id)
            snapshot = copy.deepcopy(reservation)
            self.reservations.delete(reservation)

        logger.info(f"Reservation deleted: {reservation_id}")
        return snapshot

    def _log_saved(self, reservation: Reservation, verb: str) -> None:
        logger.info(f"Reservation {verb}: {reservation.id} (price {reservation.price})")
