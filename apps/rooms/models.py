"""Room models."""

from __future__ import annotations

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Room(models.Model):
    """A bookable room inside a building."""

    building_name = models.CharField(max_length=50, db_index=True)
    room_number = models.CharField(max_length=20)
    seat_count = models.PositiveIntegerField(
        default=0,
        validators=[MinValueValidator(0)],
    )

    class Meta:
        verbose_name = _("Room")
        verbose_name_plural = _("Rooms")
        ordering = ["building_name", "room_number"]
        constraints = [
            models.UniqueConstraint(
                fields=["building_name", "room_number"],
                name="room_unique_number_per_building",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.building_name} {self.room_number}"
