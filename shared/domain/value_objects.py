"""
Common Value Objects

- TimeRange: Half-open interval of time of day [start, end)
- Slot: A room, a date and a time range (candidate or booked interval)
"""

from dataclasses import dataclass
from datetime import date, time

from shared.domain.base import ValueObject


@dataclass(frozen=True)
class TimeRange(ValueObject):
    """
    Time range value object

    Represents a range from start (inclusive) to end (exclusive) within a
    single day. Used for reservation windows and availability checks.
    """
    start: time
    end: time

    def __post_init__(self):
        if not isinstance(self.start, time) or not isinstance(self.end, time):
            raise TypeError("TimeRange bounds must be datetime.time values")
        if self.start >= self.end:
            raise ValueError(f"Start time ({self.start}) must be before end time ({self.end})")

    def overlaps_with(self, other: 'TimeRange') -> bool:
        """
        Check if this range overlaps with another

        Two ranges overlap if they share at least one instant.
        Note: end is exclusive, so adjacent ranges don't overlap.

        Examples:
            - TimeRange(09:00, 10:00) overlaps with TimeRange(09:30, 10:30) -> True
            - TimeRange(09:00, 10:00) overlaps with TimeRange(10:00, 11:00) -> False (adjacent)
        """
        if not isinstance(other, TimeRange):
            raise TypeError("Can only check overlap with another TimeRange")

        # Overlap formula: start1 < end2 AND start2 < end1
        return self.start < other.end and other.start < self.end

    def __str__(self):
        return f"{self.start.strftime('%H:%M:%S')} - {self.end.strftime('%H:%M:%S')}"

    def __repr__(self):
        return f"TimeRange({self.start}, {self.end})"


@dataclass(frozen=True)
class Slot(ValueObject):
    """
    Slot value object

    A (room, date, time range) tuple. Two slots conflict only when they
    share the room and the date and their time ranges overlap.
    """
    room_id: int
    date: date
    times: TimeRange

    def conflicts_with(self, other: 'Slot') -> bool:
        if not isinstance(other, Slot):
            raise TypeError("Can only check conflict with another Slot")
        return (
            self.room_id == other.room_id
            and self.date == other.date
            and self.times.overlaps_with(other.times)
        )

    def __str__(self):
        return f"room {self.room_id} on {self.date.isoformat()} {self.times}"
