"""Room API views."""

from __future__ import annotations

import logging

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import generics, permissions  # type: ignore

from .filters import RoomFilterSet
from .models import Room
from .serializers import RoomSerializer

logger = logging.getLogger(__name__)


class RoomListView(generics.ListAPIView):
    """Rooms of the building given in ``?building=``, ordered by room number."""

    serializer_class = RoomSerializer
    permission_classes = [permissions.AllowAny]
    filter_backends = [DjangoFilterBackend]
    filterset_class = RoomFilterSet
    pagination_class = None

    def get_queryset(self):  # type: ignore
        return Room.objects.order_by("room_number")

    def list(self, request, *args, **kwargs):  # type: ignore
        response = super().list(request, *args, **kwargs)
        logger.info(
            f"Listed {len(response.data)} rooms for building {request.query_params.get('building')!r}"
        )
        return response
