"""Admin registration for reservations."""

from __future__ import annotations

from django.contrib import admin

from .models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "room",
        "user_name",
        "university_number",
        "date",
        "start_time",
        "end_time",
        "created_at",
    )
    list_filter = ("date", "room__building_name")
    search_fields = ("user_name", "university_number", "room__room_number")
    list_select_related = ("room",)

    # Reservations are immutable once created
    def has_add_permission(self, request):  # type: ignore
        return False

    def has_change_permission(self, request, obj=None):  # type: ignore
        return False
