"""Serializers for the reservations domain."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.reservations.application.service import ReservationCommand


class ReservationSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    user_id = serializers.IntegerField(read_only=True)
    space_id = serializers.IntegerField(read_only=True, allow_null=True)
    desk = serializers.IntegerField(read_only=True)
    start_date = serializers.DateField(read_only=True)
    end_date = serializers.DateField(read_only=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    currency = serializers.SerializerMethodField()

    def get_currency(self, obj) -> str:  # type: ignore
        return settings.COSPACE_CURRENCY


class ReservationWriteSerializer(serializers.Serializer):
    """Booking request; a price sent by the client is ignored."""

    user_id = serializers.IntegerField(required=False)
    space_id = serializers.IntegerField()
    desk = serializers.IntegerField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()

    def to_command(self, default_user_id: int) -> ReservationCommand:
        data = self.validated_data
        return ReservationCommand(
            user_id=data.get("user_id", default_user_id),
            space_id=data["space_id"],
            desk=data["desk"],
            start_date=data["start_date"],
            end_date=data["end_date"],
        )
