"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "resource",
        "requested_by",
        "start_time",
        "end_time",
        "created_at",
    )
    list_filter = ("resource", "start_time")
    search_fields = ("id", "resource__name", "requested_by")
    readonly_fields = ("id", "created_at")
    date_hierarchy = "start_time"
