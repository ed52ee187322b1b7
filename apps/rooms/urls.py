"""URL routing for the rooms domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import RoomListView

urlpatterns = [
    path("rooms", RoomListView.as_view(), name="room-list"),
]
