"""Serializers for the spaces domain.

Read serializers render domain dataclasses; write serializers only check
the shape of the payload and turn it into a SpaceCommand. Business rules
(complete week, unique name) are enforced by the lifecycle manager.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.spaces.application.lifecycle import SpaceCommand
from apps.spaces.domain.entities import AddressInput, AvailabilityInput


class AvailabilitySerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    day_of_week = serializers.IntegerField(min_value=1, max_value=7)
    is_open = serializers.BooleanField()
    open_from = serializers.TimeField(required=False, allow_null=True, default=None)
    open_to = serializers.TimeField(required=False, allow_null=True, default=None)


class AddressSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    street = serializers.CharField(max_length=255)
    city = serializers.CharField(max_length=100)
    postal_code = serializers.CharField(max_length=20, required=False, allow_blank=True, default="")
    country = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")


class ImageSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    caption = serializers.CharField(read_only=True)
    url = serializers.CharField(read_only=True)
    uploaded_at = serializers.DateTimeField(read_only=True)


class SpaceSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    capacity = serializers.IntegerField(read_only=True)
    daily_rate = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    currency = serializers.SerializerMethodField()
    conveniences = serializers.SerializerMethodField()
    owner_id = serializers.IntegerField(read_only=True)
    address = AddressSerializer(read_only=True, allow_null=True)
    availabilities = AvailabilitySerializer(many=True, read_only=True)
    images = ImageSerializer(many=True, read_only=True)

    def get_currency(self, obj) -> str:  # type: ignore
        return settings.COSPACE_CURRENCY

    def get_conveniences(self, obj) -> list[str]:  # type: ignore
        return sorted(obj.conveniences)


class SpaceWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    capacity = serializers.IntegerField(min_value=1)
    daily_rate = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0.00"),
        required=False,
        default=Decimal("0.00"),
    )
    conveniences = serializers.ListField(
        child=serializers.CharField(max_length=100),
        required=False,
        default=list,
    )
    owner_id = serializers.IntegerField()
    address = AddressSerializer()
    availability = AvailabilitySerializer(many=True)

    def to_command(self) -> SpaceCommand:
        data = self.validated_data
        address = data["address"]
        return SpaceCommand(
            name=data["name"],
            description=data["description"],
            capacity=data["capacity"],
            owner_id=data["owner_id"],
            daily_rate=data["daily_rate"],
            conveniences=set(data["conveniences"]),
            address=AddressInput(
                street=address["street"],
                city=address["city"],
                postal_code=address["postal_code"],
                country=address["country"],
            ),
            availability=[
                AvailabilityInput(
                    day_of_week=entry["day_of_week"],
                    is_open=entry["is_open"],
                    open_from=entry.get("open_from"),
                    open_to=entry.get("open_to"),
                )
                for entry in data["availability"]
            ],
        )


class ImageUploadSerializer(serializers.Serializer):
    image = serializers.FileField(required=False, allow_null=True, default=None)
    caption = serializers.CharField(max_length=255, required=False, allow_null=True, default=None)


class OpenDaysQuerySerializer(serializers.Serializer):
    start = serializers.DateField()
    end = serializers.DateField()


class OpenDaysSerializer(serializers.Serializer):
    space_id = serializers.IntegerField()
    start = serializers.DateField()
    end = serializers.DateField()
    open_days = serializers.IntegerField()
    dates = serializers.ListField(child=serializers.DateField())
