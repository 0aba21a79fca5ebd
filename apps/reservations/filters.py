"""FilterSet for reservation listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Reservation


class ReservationFilterSet(django_filters.FilterSet):

    user = django_filters.NumberFilter(field_name="user_id", lookup_expr="exact")
    space = django_filters.NumberFilter(field_name="space_id", lookup_expr="exact")
    desk = django_filters.NumberFilter(field_name="desk", lookup_expr="exact")
    # Reservations overlapping [date_from, date_to]
    date_from = django_filters.DateFilter(field_name="end_date", lookup_expr="gte")
    date_to = django_filters.DateFilter(field_name="start_date", lookup_expr="lte")

    class Meta:
        model = Reservation
        fields = ["user", "space", "desk"]
