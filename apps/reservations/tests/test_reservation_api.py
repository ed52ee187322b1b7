"""Integration tests for the reservation API endpoints."""

from __future__ import annotations

from unittest import mock

from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.reservations.models import Reservation
from apps.reservations.services import BookingEngine
from apps.rooms.models import Room
from shared.domain.exceptions import Internal, Unavailable


class ReservationAPITests(APITestCase):
    """Covers booking, conflicts, cancellation and availability."""

    def setUp(self) -> None:
        self.room = Room.objects.create(id=5, building_name="Engineering", room_number="301", seat_count=40)
        self.reserve_url = reverse("reserve")
        self.latest_url = reverse("reserve-latest")
        self.availability_url = reverse("check-availability")

    def _payload(self, user_name: str, start: str, end: str, **extra) -> dict:
        payload = {
            "room_id": self.room.id,
            "user_name": user_name,
            "date": "2030-01-01",
            "start_time": start,
            "end_time": end,
        }
        payload.update(extra)
        return payload

    def test_health_check(self) -> None:
        response = self.client.get(reverse("health-check"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"message": "Server is running."})

    def test_reserve_returns_identifier_and_message(self) -> None:
        response = self.client.post(
            self.reserve_url,
            self._payload("Kim", "09:00:00", "10:00:00", university_number="20231234"),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertGreater(response.data["reservation_id"], 0)
        self.assertIn("Kim", response.data["message"])
        self.assertIn("20231234", response.data["message"])
        reservation = Reservation.objects.get(pk=response.data["reservation_id"])
        self.assertEqual(reservation.room, self.room)
        self.assertEqual(reservation.university_number, "20231234")

    def test_overlap_is_conflict_and_adjacent_is_allowed(self) -> None:
        first = self.client.post(self.reserve_url, self._payload("Kim", "09:00:00", "10:00:00"), format="json")
        self.assertEqual(first.status_code, status.HTTP_201_CREATED, first.data)

        conflict = self.client.post(self.reserve_url, self._payload("Lee", "09:30:00", "10:30:00"), format="json")
        self.assertEqual(conflict.status_code, status.HTTP_409_CONFLICT, conflict.data)
        self.assertIn("already reserved", conflict.data["error"])

        adjacent = self.client.post(self.reserve_url, self._payload("Park", "10:00:00", "11:00:00"), format="json")
        self.assertEqual(adjacent.status_code, status.HTTP_201_CREATED, adjacent.data)
        self.assertEqual(Reservation.objects.count(), 2)

    def test_unknown_room_is_404(self) -> None:
        payload = self._payload("Kim", "09:00:00", "10:00:00")
        payload["room_id"] = 999
        response = self.client.post(self.reserve_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
        self.assertIn("999", response.data["error"])

    def test_missing_fields_are_rejected(self) -> None:
        response = self.client.post(self.reserve_url, {"room_id": self.room.id}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        for field in ("user_name", "date", "start_time", "end_time"):
            self.assertIn(field, response.data)

    def test_malformed_fields_are_rejected(self) -> None:
        cases = [
            {"date": "2030/01/01"},
            {"date": "2030-02-30"},
            {"start_time": "9:00"},
            {"start_time": "24:00:00"},
            {"end_time": "10:60:00"},
            {"user_name": "K"},
            {"user_name": "x" * 51},
            {"university_number": "1" * 21},
            {"room_id": 0},
            {"room_id": "abc"},
        ]
        for override in cases:
            with self.subTest(override=override):
                payload = self._payload("Kim", "09:00:00", "10:00:00")
                payload.update(override)
                response = self.client.post(self.reserve_url, payload, format="json")
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertFalse(Reservation.objects.exists())

    def test_end_before_start_is_rejected(self) -> None:
        response = self.client.post(self.reserve_url, self._payload("Kim", "11:00:00", "10:00:00"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("end_time", response.data)

    def test_past_date_is_rejected(self) -> None:
        response = self.client.post(
            self.reserve_url,
            self._payload("Kim", "09:00:00", "10:00:00", date="2000-01-01"),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("date", response.data)

    def test_blank_university_number_is_stored_as_null(self) -> None:
        response = self.client.post(
            self.reserve_url,
            self._payload("  Kim  ", "09:00:00", "10:00:00", university_number=""),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        reservation = Reservation.objects.get()
        self.assertEqual(reservation.user_name, "Kim")
        self.assertIsNone(reservation.university_number)
        self.assertIn("not provided", response.data["message"])

    def test_store_outage_is_503(self) -> None:
        with mock.patch.object(BookingEngine, "submit", side_effect=Unavailable()):
            response = self.client.post(
                self.reserve_url, self._payload("Kim", "09:00:00", "10:00:00"), format="json"
            )

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.data["error"], Unavailable.default_message)

    def test_internal_error_hides_details(self) -> None:
        with mock.patch.object(BookingEngine, "submit", side_effect=Internal("relation does not exist")):
            response = self.client.post(
                self.reserve_url, self._payload("Kim", "09:00:00", "10:00:00"), format="json"
            )

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertNotIn("details", response.data)

    @override_settings(DEBUG=True)
    def test_internal_error_details_in_debug(self) -> None:
        with mock.patch.object(BookingEngine, "submit", side_effect=Internal("relation does not exist")):
            response = self.client.post(
                self.reserve_url, self._payload("Kim", "09:00:00", "10:00:00"), format="json"
            )

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data["details"], "relation does not exist")

    def test_cancel_latest(self) -> None:
        empty = self.client.delete(self.latest_url)
        self.assertEqual(empty.status_code, status.HTTP_404_NOT_FOUND)
        self.assertIn("message", empty.data)

        created = self.client.post(self.reserve_url, self._payload("Kim", "09:00:00", "10:00:00"), format="json")
        reservation_id = created.data["reservation_id"]

        response = self.client.delete(self.latest_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["reservation_id"], reservation_id)
        self.assertIn(str(reservation_id), response.data["message"])
        self.assertFalse(Reservation.objects.exists())

    def test_check_availability(self) -> None:
        query = {"room_id": self.room.id, "date": "2030-01-01", "start_time": "10:00:00", "end_time": "11:00:00"}

        before = self.client.get(self.availability_url, query)
        self.assertEqual(before.status_code, status.HTTP_200_OK, before.data)
        self.assertTrue(before.data["available"])

        self.client.post(self.reserve_url, self._payload("Kim", "10:00:00", "11:00:00"), format="json")

        after = self.client.get(self.availability_url, query)
        self.assertFalse(after.data["available"])

    def test_check_availability_validates_parameters(self) -> None:
        response = self.client.get(self.availability_url, {"room_id": self.room.id})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        reversed_window = self.client.get(
            self.availability_url,
            {"room_id": self.room.id, "date": "2030-01-01", "start_time": "11:00:00", "end_time": "10:00:00"},
        )
        self.assertEqual(reversed_window.status_code, status.HTTP_400_BAD_REQUEST)

    def test_reservation_listing_is_newest_first(self) -> None:
        self.client.post(self.reserve_url, self._payload("Kim", "09:00:00", "10:00:00"), format="json")
        self.client.post(self.reserve_url, self._payload("Lee", "10:00:00", "11:00:00"), format="json")

        response = self.client.get(reverse("reservation-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row["user_name"] for row in response.data], ["Lee", "Kim"])
        first = response.data[0]
        self.assertEqual(first["building_name"], "Engineering")
        self.assertEqual(first["room_number"], "301")
        self.assertEqual(first["date"], "2030-01-01")
        self.assertEqual(first["start_time"], "10:00:00")
        self.assertIn("reservation_id", first)

    def test_reservation_listing_keeps_rooms_with_equipment_path(self) -> None:
        self.client.post(self.reserve_url, self._payload("Kim", "09:00:00", "10:00:00"), format="json")

        response = self.client.get("/api/rooms-with-equipment")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, self.client.get(reverse("reservation-list")).data)
        self.assertEqual(response.data[0]["user_name"], "Kim")
