"""Persistence interface consumed by ReservationService."""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from apps.reservations.domain.entities import Reservation


class ReservationRepository(ABC):
    @abstractmethod
    def find_all(self, filters: Mapping[str, Any] | None = None) -> Sequence[Reservation]:
        pass

    @abstractmethod
    def find_by_id(self, reservation_id: int) -> Reservation | None:
        pass

    @abstractmethod
    def find_by_user(self, user_id: int) -> Sequence[Reservation]:
        pass

    @abstractmethod
    def find_by_space(self, space_id: int) -> Sequence[Reservation]:
        pass

    @abstractmethod
    def save(self, reservation: Reservation) -> Reservation:
        pass

    @abstractmethod
    def delete(self, reservation: Reservation) -> None:
        pass
