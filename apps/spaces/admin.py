"""Admin registrations for the spaces domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Space, SpaceAddress, SpaceAvailability, SpaceImage


class SpaceAvailabilityInline(admin.TabularInline):
    model = SpaceAvailability
    extra = 0
    max_num = 7
    can_delete = False
    fields = ("day_of_week", "is_open", "open_from", "open_to")
    readonly_fields = ("day_of_week",)


class SpaceImageInline(admin.TabularInline):
    model = SpaceImage
    extra = 0
    fields = ("image", "caption", "uploaded_at")
    readonly_fields = ("uploaded_at",)


@admin.register(Space)
class SpaceAdmin(admin.ModelAdmin):
    list_display = ("name", "owner", "capacity", "daily_rate", "created_at")
    search_fields = ("name", "description", "owner__email")
    readonly_fields = ("created_at", "updated_at")
    inlines = [SpaceAvailabilityInline, SpaceImageInline]


@admin.register(SpaceAddress)
class SpaceAddressAdmin(admin.ModelAdmin):
    list_display = ("street", "city", "postal_code", "country", "space")
    search_fields = ("street", "city")
