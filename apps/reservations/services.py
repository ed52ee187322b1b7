"""Booking engine: availability checks, reservations and cancellation."""

from __future__ import annotations

import datetime
import logging
from dataclasses import asdict, dataclass
from typing import Callable, List, Optional

from django.utils import timezone  # type: ignore

from shared.domain.exceptions import Conflict, InvalidInput, NotFound
from shared.domain.value_objects import Slot, TimeRange

from .models import Reservation
from .store import ReservationStore

logger = logging.getLogger(__name__)

USER_NAME_MIN_LENGTH = 2
USER_NAME_MAX_LENGTH = 50
UNIVERSITY_NUMBER_MAX_LENGTH = 20


@dataclass(frozen=True)
class ReservationRequest:
    """Typed reservation request built from validated input."""

    room_id: int
    user_name: str
    date: datetime.date
    start_time: datetime.time
    end_time: datetime.time
    university_number: Optional[str] = None


@dataclass(frozen=True)
class ReservationResult:
    reservation_id: int
    user_name: str
    university_number: Optional[str] = None

    @property
    def message(self) -> str:
        number = self.university_number or "not provided"
        return f"Reservation for {self.user_name} (student no.: {number}) is complete."


def _validate_room_id(room_id) -> int:
    if isinstance(room_id, bool) or not isinstance(room_id, int) or room_id <= 0:
        raise InvalidInput("Invalid room ID.")
    return room_id


def _validate_time_range(start_time, end_time) -> TimeRange:
    if not isinstance(start_time, datetime.time) or not isinstance(end_time, datetime.time):
        raise InvalidInput("Start and end times must be valid times (HH:MM:SS).")
    try:
        return TimeRange(start_time.replace(microsecond=0), end_time.replace(microsecond=0))
    except ValueError as exc:
        raise InvalidInput("End time must be later than start time.") from exc


def _validate_user_name(user_name) -> str:
    if not isinstance(user_name, str) or not user_name.strip():
        raise InvalidInput("Name is required.")
    name = user_name.strip()
    if not USER_NAME_MIN_LENGTH <= len(name) <= USER_NAME_MAX_LENGTH:
        raise InvalidInput(
            f"Name must be between {USER_NAME_MIN_LENGTH} and {USER_NAME_MAX_LENGTH} characters."
        )
    return name


def _validate_university_number(number) -> Optional[str]:
    if number is None:
        return None
    if not isinstance(number, str):
        raise InvalidInput("University number must be a string.")
    number = number.strip()
    if len(number) > UNIVERSITY_NUMBER_MAX_LENGTH:
        raise InvalidInput(
            f"University number must be at most {UNIVERSITY_NUMBER_MAX_LENGTH} characters."
        )
    return number or None


def _ensure_calendar_date(value) -> datetime.date:
    # datetime is a subclass of date; a time component is not allowed here
    if isinstance(value, datetime.datetime) or not isinstance(value, datetime.date):
        raise InvalidInput("Date must be a calendar date (YYYY-MM-DD).")
    return value


class BookingEngine:
    """Reservation use cases on top of a ReservationStore.

    The engine keeps no state between calls. Every decision re-reads the
    store, and the reserve operation performs its existence check, overlap
    check and insert inside a single transaction that holds the room's row
    lock, so concurrent reservations of the same room are serialized.
    """

    def __init__(
        self,
        store: Optional[ReservationStore] = None,
        today: Optional[Callable[[], datetime.date]] = None,
    ):
        self.store = store or ReservationStore()
        self._today = today or timezone.localdate

    @staticmethod
    def conflicting(candidate: Slot, existing: List[Reservation]) -> List[Reservation]:
        """Stored reservations whose slot overlaps the candidate."""
        return [reservation for reservation in existing if reservation.slot.conflicts_with(candidate)]

    def is_available(self, room_id: int, date: datetime.date, start_time: datetime.time,
                     end_time: datetime.time) -> bool:
        """Advisory check: True if no stored reservation overlaps the slot.

        The answer may be stale by the time the caller acts on it; only
        ``reserve`` guarantees the slot.
        """
        candidate = Slot(
            room_id=_validate_room_id(room_id),
            date=_ensure_calendar_date(date),
            times=_validate_time_range(start_time, end_time),
        )
        with self.store.reading("is_available"):
            existing = self.store.reservations_on(candidate.room_id, candidate.date)
        return not self.conflicting(candidate, existing)

    def reserve(
        self,
        room_id: int,
        user_name: str,
        date: datetime.date,
        start_time: datetime.time,
        end_time: datetime.time,
        university_number: Optional[str] = None,
    ) -> ReservationResult:
        """Book the slot or raise.

        Raises:
            InvalidInput: a precondition does not hold
            NotFound: the room does not exist
            Conflict: the slot overlaps an existing reservation
            Unavailable: the store could not be reached
            Internal: unexpected store failure
        """
        room_id = _validate_room_id(room_id)

        with self.store.atomic("reserve"):
            if self.store.lock_room(room_id) is None:
                raise NotFound(f"Room ID {room_id} does not exist.")

            day = _ensure_calendar_date(date)
            if day < self._today():
                raise InvalidInput("Reservations cannot be made for past dates.")
            candidate = Slot(room_id=room_id, date=day, times=_validate_time_range(start_time, end_time))
            name = _validate_user_name(user_name)
            number = _validate_university_number(university_number)

            overlapping = self.conflicting(candidate, self.store.reservations_on(room_id, day))
            if overlapping:
                logger.warning(
                    f"Rejected reservation of {candidate}: overlaps reservation {overlapping[0].pk}"
                )
                raise Conflict("The room is already reserved for that time.")

            reservation_id = self.store.insert(
                room_id=room_id,
                user_name=name,
                university_number=number,
                day=day,
                start_time=candidate.times.start,
                end_time=candidate.times.end,
            )

        logger.info(f"Reservation {reservation_id} created for {candidate}")
        return ReservationResult(
            reservation_id=reservation_id,
            user_name=name,
            university_number=number,
        )

    def submit(self, request: ReservationRequest) -> ReservationResult:
        """Reserve from a typed request."""
        return self.reserve(**asdict(request))

    def cancel_latest(self) -> int:
        """Delete the reservation with the highest id and return that id.

        The scope is the whole store, not a room or a requester.
        """
        with self.store.atomic("cancel_latest"):
            latest = self.store.latest()
            if latest is None:
                raise NotFound("No recent reservation.")
            self.store.delete(latest.pk)

        logger.info(f"Latest reservation {latest.pk} cancelled ({latest.slot})")
        return latest.pk
