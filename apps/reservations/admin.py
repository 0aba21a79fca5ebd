"""Admin registrations for the reservations domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = ("id", "space", "desk", "user", "start_date", "end_date", "price")
    list_filter = ("start_date",)
    search_fields = ("space__name", "user__email")
    readonly_fields = ("price", "created_at", "updated_at")
