"""FilterSet for space listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Space


class SpaceFilterSet(django_filters.FilterSet):
    """Filters accepted by the space list endpoint."""

    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    city = django_filters.CharFilter(field_name="address__city", lookup_expr="icontains")
    owner = django_filters.NumberFilter(field_name="owner_id", lookup_expr="exact")
    capacity_min = django_filters.NumberFilter(field_name="capacity", lookup_expr="gte")
    rate_max = django_filters.NumberFilter(field_name="daily_rate", lookup_expr="lte")
    open_on = django_filters.NumberFilter(method="filter_open_on")

    class Meta:
        model = Space
        fields = ["name", "city", "owner"]

    def filter_open_on(self, queryset, name, value):  # type: ignore
        # value is an ISO weekday, 1 = Monday
        return queryset.filter(
            availabilities__day_of_week=int(value),
            availabilities__is_open=True,
        ).distinct()
