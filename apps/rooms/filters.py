"""FilterSet definitions for room listing."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Room


class RoomFilterSet(django_filters.FilterSet):
    """Rooms of a single building. The building is mandatory."""

    building = django_filters.CharFilter(
        field_name="building_name",
        lookup_expr="exact",
        required=True,
        max_length=50,
    )

    class Meta:
        model = Room
        fields = ["building"]
