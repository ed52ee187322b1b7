"""URL routing for the reservations domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import (
    AvailabilityView,
    CancelLatestReservationView,
    HealthCheckView,
    ReservationListView,
    ReserveView,
)

urlpatterns = [
    path("test", HealthCheckView.as_view(), name="health-check"),
    path("reservations", ReservationListView.as_view(), name="reservation-list"),
    path("rooms-with-equipment", ReservationListView.as_view(), name="reservation-list-legacy"),
    path("reserve", ReserveView.as_view(), name="reserve"),
    path("reserve/latest", CancelLatestReservationView.as_view(), name="reserve-latest"),
    path("check-availability", AvailabilityView.as_view(), name="check-availability"),
]
