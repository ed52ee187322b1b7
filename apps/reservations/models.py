"""Reservation models."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import Slot, TimeRange


class Reservation(models.Model):
    """A room reserved for [start_time, end_time) on a date.

    Reservations are immutable once created. They are removed only by
    cancelling the most recent one.
    """

    room = models.ForeignKey(
        "rooms.Room",
        on_delete=models.PROTECT,
        related_name="reservations",
    )
    user_name = models.CharField(max_length=50)
    university_number = models.CharField(max_length=20, null=True, blank=True)
    date = models.DateField()
    start_time = models.TimeField()
    end_time = models.TimeField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Reservation")
        verbose_name_plural = _("Reservations")
        ordering = ["-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_time__gt=models.F("start_time")),
                name="reservation_valid_times",
            ),
            models.UniqueConstraint(
                fields=["room", "date", "start_time"],
                name="reservation_unique_slot_start",
            ),
        ]
        indexes = [
            models.Index(fields=["room", "date"], name="reservation_room_date_idx"),
        ]

    def __str__(self) -> str:
        return f"Reservation #{self.pk} {self.slot}"

    @property
    def time_range(self) -> TimeRange:
        return TimeRange(self.start_time, self.end_time)

    @property
    def slot(self) -> Slot:
        return Slot(room_id=self.room_id, date=self.date, times=self.time_range)
