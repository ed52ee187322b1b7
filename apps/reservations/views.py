"""API views for the reservations domain."""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from rest_framework import generics, permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from shared.domain.exceptions import (
    Conflict,
    Internal,
    InvalidInput,
    NotFound,
    ReservationError,
    Unavailable,
)

from .models import Reservation
from .serializers import (
    ReservationCreateSerializer,
    ReservationListSerializer,
    SlotQuerySerializer,
)
from .services import BookingEngine

logger = logging.getLogger(__name__)

ERROR_STATUS = (
    (InvalidInput, status.HTTP_400_BAD_REQUEST),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (Conflict, status.HTTP_409_CONFLICT),
    (Unavailable, status.HTTP_503_SERVICE_UNAVAILABLE),
    (Internal, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def error_response(exc: ReservationError) -> Response:
    """Render a booking engine error with its HTTP status."""
    status_code = next(
        (code for error_class, code in ERROR_STATUS if isinstance(exc, error_class)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        payload = {"error": Internal.default_message}
        if settings.DEBUG:
            payload["details"] = str(exc)
        return Response(payload, status=status_code)
    return Response({"error": str(exc)}, status=status_code)


class BookingEngineMixin:
    """Gives a view its booking engine."""

    engine_class = BookingEngine

    def get_engine(self) -> BookingEngine:
        return self.engine_class()


class HealthCheckView(APIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request):  # type: ignore
        return Response({"message": "Server is running."})


class ReservationListView(generics.ListAPIView):
    """Every reservation with its building and room number, newest first."""

    serializer_class = ReservationListSerializer
    permission_classes = [permissions.AllowAny]
    pagination_class = None

    def get_queryset(self):  # type: ignore
        return Reservation.objects.select_related("room").order_by("-id")


class ReserveView(BookingEngineMixin, APIView):
    permission_classes = [permissions.AllowAny]

    def post(self, request):  # type: ignore
        serializer = ReservationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            result = self.get_engine().submit(serializer.to_request())
        except ReservationError as exc:
            logger.warning(f"Reservation request rejected ({exc.code}): {exc}")
            return error_response(exc)
        return Response(
            {"message": result.message, "reservation_id": result.reservation_id},
            status=status.HTTP_201_CREATED,
        )


class CancelLatestReservationView(BookingEngineMixin, APIView):
    permission_classes = [permissions.AllowAny]

    def delete(self, request):  # type: ignore
        try:
            reservation_id = self.get_engine().cancel_latest()
        except NotFound as exc:
            return Response({"message": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except ReservationError as exc:
            logger.error(f"Cancelling the latest reservation failed ({exc.code}): {exc}")
            return error_response(exc)
        return Response(
            {
                "message": f"Latest reservation (id: {reservation_id}) has been deleted.",
                "reservation_id": reservation_id,
            }
        )


class AvailabilityView(BookingEngineMixin, APIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request):  # type: ignore
        serializer = SlotQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            available = self.get_engine().is_available(
                data["room_id"],
                data["date"],
                data["start_time"],
                data["end_time"],
            )
        except ReservationError as exc:
            return error_response(exc)
        return Response({"available": available})
