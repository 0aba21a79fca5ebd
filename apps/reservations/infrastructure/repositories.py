"""Django adapter for the reservation repository."""

from __future__ import annotations

from typing import Any, Mapping

from shared.domain.exceptions import InvalidArgumentError, NotFoundError
from apps.reservations.application.ports import ReservationRepository
from apps.reservations.domain.entities import Reservation
from apps.reservations.filters import ReservationFilterSet
from apps.reservations.models import Reservation as ReservationModel


def reservation_to_domain(row: ReservationModel) -> Reservation:
    return Reservation(
        id=row.pk,
        user_id=row.user_id,
        space_id=row.space_id,
        desk=row.desk,
        start_date=row.start_date,
        end_date=row.end_date,
        price=row.price,
    )


class DjangoReservationRepository(ReservationRepository):

    def find_all(self, filters: Mapping[str, Any] | None = None) -> list[Reservation]:
        queryset = ReservationModel.objects.all()
        if filters:
            filterset = ReservationFilterSet(data=filters, queryset=queryset)
            if not filterset.is_valid():
                raise InvalidArgumentError(f"Invalid reservation filters: {dict(filterset.errors)}")
            queryset = filterset.qs
        return [reservation_to_domain(row) for row in queryset]

    def find_by_id(self, reservation_id: int) -> Reservation | None:
        row = ReservationModel.objects.filter(pk=reservation_id).first()
        return reservation_to_domain(row) if row is not None else None

    def find_by_user(self, user_id: int) -> list[Reservation]:
        return [reservation_to_domain(row) for row in ReservationModel.objects.filter(user_id=user_id)]

    def find_by_space(self, space_id: int) -> list[Reservation]:
        return [reservation_to_domain(row) for row in ReservationModel.objects.filter(space_id=space_id)]

    def save(self, reservation: Reservation) -> Reservation:
        if not reservation.is_persisted:
            row = ReservationModel()
        else:
            row = ReservationModel.objects.filter(pk=reservation.id).first()
            if row is None:
                raise NotFoundError(f"Reservation with id {reservation.id} does not exist")

        row.user_id = reservation.user_id
        row.space_id = reservation.space_id
        row.desk = reservation.desk
        row.start_date = reservation.start_date
        row.end_date = reservation.end_date
        row.price = reservation.price
        row.save()

        reservation.id = row.pk
        return reservation

    def delete(self, reservation: Reservation) -> None:
        deleted, _ = ReservationModel.objects.filter(pk=reservation.id).delete()
        if not deleted:
            raise NotFoundError(f"Reservation with id {reservation.id} does not exist")
