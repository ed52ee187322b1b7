"""Tests for the room listing API."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.rooms.models import Room


class RoomListAPITests(APITestCase):
    def setUp(self) -> None:
        Room.objects.create(building_name="Engineering", room_number="302", seat_count=20)
        Room.objects.create(building_name="Engineering", room_number="101", seat_count=60)
        Room.objects.create(building_name="Science", room_number="201", seat_count=30)
        self.url = reverse("room-list")

    def test_lists_rooms_of_building_by_number(self) -> None:
        response = self.client.get(self.url, {"building": "Engineering"})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([room["room_number"] for room in response.data], ["101", "302"])
        self.assertEqual(set(response.data[0]), {"id", "room_number", "seat_count"})
        self.assertEqual(response.data[0]["seat_count"], 60)

    def test_building_name_is_trimmed(self) -> None:
        response = self.client.get(self.url, {"building": "  Science "})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(len(response.data), 1)

    def test_unknown_building_is_empty(self) -> None:
        response = self.client.get(self.url, {"building": "Library"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [])

    def test_building_is_required(self) -> None:
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("building", response.data)

    def test_building_name_length_is_limited(self) -> None:
        response = self.client.get(self.url, {"building": "x" * 51})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
