"""Admin registrations for rooms."""

from __future__ import annotations

from django.contrib import admin

from .models import Room


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("id", "building_name", "room_number", "seat_count")
    list_filter = ("building_name",)
    search_fields = ("building_name", "room_number")
    ordering = ("building_name", "room_number")
