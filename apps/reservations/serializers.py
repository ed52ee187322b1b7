"""Serializers for the reservations domain.

These validate the raw request fields (formats and ranges) before the
booking engine is called. The engine re-checks its own invariants.
"""

from __future__ import annotations

from django.utils import timezone  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import Reservation
from .services import (
    UNIVERSITY_NUMBER_MAX_LENGTH,
    USER_NAME_MAX_LENGTH,
    USER_NAME_MIN_LENGTH,
    ReservationRequest,
)

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"


class SlotQuerySerializer(serializers.Serializer):
    """Room, date and time window of a candidate slot."""

    room_id = serializers.IntegerField(min_value=1)
    date = serializers.DateField(input_formats=[DATE_FORMAT])
    start_time = serializers.TimeField(input_formats=[TIME_FORMAT])
    end_time = serializers.TimeField(input_formats=[TIME_FORMAT])

    def validate_date(self, value):  # type: ignore
        if value < timezone.localdate():
            raise serializers.ValidationError("Reservations cannot be made for past dates.")
        return value

    def validate(self, attrs):  # type: ignore
        if attrs["start_time"] >= attrs["end_time"]:
            raise serializers.ValidationError(
                {"end_time": ["End time must be later than start time."]}
            )
        return attrs


class ReservationCreateSerializer(SlotQuerySerializer):
    """Reservation request body."""

    user_name = serializers.CharField(
        min_length=USER_NAME_MIN_LENGTH,
        max_length=USER_NAME_MAX_LENGTH,
    )
    university_number = serializers.CharField(
        max_length=UNIVERSITY_NUMBER_MAX_LENGTH,
        required=False,
        allow_blank=True,
        allow_null=True,
    )

    def to_request(self) -> ReservationRequest:
        data = self.validated_data
        return ReservationRequest(
            room_id=data["room_id"],
            user_name=data["user_name"],
            date=data["date"],
            start_time=data["start_time"],
            end_time=data["end_time"],
            university_number=data.get("university_number") or None,
        )


class ReservationListSerializer(serializers.ModelSerializer):
    """Reservation joined with its room, as shown in the overview listing."""

    reservation_id = serializers.ReadOnlyField(source="id")
    building_name = serializers.ReadOnlyField(source="room.building_name")
    room_number = serializers.ReadOnlyField(source="room.room_number")

    class Meta:
        model = Reservation
        fields = [
            "reservation_id",
            "user_name",
            "date",
            "start_time",
            "end_time",
            "building_name",
            "room_number",
        ]
        read_only_fields = fields
