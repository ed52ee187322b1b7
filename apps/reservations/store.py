"""Relational store used by the booking engine.

The engine never touches the ORM directly; it goes through
``ReservationStore`` so that transactions, row locks and the translation of
database errors live in one place.
"""

from __future__ import annotations

import logging
from datetime import date, time
from typing import List, Optional

from django.db import DEFAULT_DB_ALIAS, transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from apps.rooms.models import Room
from shared.application.uow import DjangoUnitOfWork, translate_database_errors

from .models import Reservation

logger = logging.getLogger(__name__)


class ReservationStore:
    """Parameterized reads, writes and deletes over rooms and reservations."""

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    def atomic(self, operation: str) -> DjangoUnitOfWork:
        """Transaction scope; database errors leave it as ReservationError."""
        return DjangoUnitOfWork(operation, using=self.using)

    def reading(self, operation: str):
        """Error translation for reads performed outside a transaction."""
        return translate_database_errors(operation)

    def _lock_if_possible(self, queryset):
        """Apply select_for_update when inside transaction.atomic()."""

        if not transaction.get_connection(self.using).in_atomic_block:
            return queryset

        try:
            return queryset.select_for_update()
        except NotSupportedError:
            return queryset

    def lock_room(self, room_id: int) -> Optional[Room]:
        """Fetch the room and hold its row lock until the transaction ends."""
        queryset = Room.objects.using(self.using).filter(pk=room_id)
        return self._lock_if_possible(queryset).first()

    def reservations_on(self, room_id: int, day: date) -> List[Reservation]:
        return list(
            Reservation.objects.using(self.using)
            .filter(room_id=room_id, date=day)
            .order_by("start_time")
        )

    def insert(
        self,
        *,
        room_id: int,
        user_name: str,
        day: date,
        start_time: time,
        end_time: time,
        university_number: Optional[str] = None,
    ) -> int:
        reservation = Reservation.objects.using(self.using).create(
            room_id=room_id,
            user_name=user_name,
            university_number=university_number,
            date=day,
            start_time=start_time,
            end_time=end_time,
        )
        return reservation.pk

    def latest(self) -> Optional[Reservation]:
        """The reservation with the highest id, locked when in a transaction.

        Under READ COMMITTED a locked read that waited on a row deleted by a
        concurrent transaction comes back empty, so the lookup repeats until
        it locks a row or no reservation is left.
        """
        queryset = Reservation.objects.using(self.using).order_by("-id")
        while True:
            reservation = self._lock_if_possible(queryset).first()
            if reservation is not None or not queryset.exists():
                return reservation
            logger.debug("Latest reservation vanished while waiting for its lock, retrying")

    def delete(self, reservation_id: int) -> int:
        deleted, _ = Reservation.objects.using(self.using).filter(pk=reservation_id).delete()
        return deleted
