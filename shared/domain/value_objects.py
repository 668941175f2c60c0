"""
Common Value Objects

Value objects used across multiple domains:
- TimeRange: Represents a half-open window of instants [start, end)
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo

from shared.domain.base import ValueObject
from shared.domain.errors import InvalidRange


@dataclass(frozen=True)
class TimeRange(ValueObject):
    """
    Time range value object

    Represents a window from start (inclusive) to end (exclusive).
    Used for booking windows, buffered windows and day filters.
    """
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.end <= self.start:
            raise InvalidRange(self.start, self.end)

    @classmethod
    def for_day(cls, day: date, tz: tzinfo = timezone.utc) -> 'TimeRange':
        """Window covering a calendar day: [startOfDay, startOfDay + 24h)"""
        start = datetime.combine(day, time.min, tzinfo=tz)
        return cls(start, start + timedelta(hours=24))

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def duration_minutes(self) -> float:
        """Length in minutes, fractional and never rounded"""
        return self.duration.total_seconds() / 60

    def overlaps_with(self, other: 'TimeRange') -> bool:
        """
        Check if this range overlaps with another

        Note: end is exclusive, so adjacent ranges don't overlap.

        Examples:
            - [10:00, 11:00) overlaps with [10:30, 12:00) -> True
            - [10:00, 11:00) overlaps with [11:00, 12:00) -> False (adjacent)
        """
        if not isinstance(other, TimeRange):
            raise TypeError("Can only check overlap with another TimeRange")

        # Overlap formula: start1 < end2 AND start2 < end1
        return self.start < other.end and other.start < self.end

    def expanded(self, delta: timedelta) -> 'TimeRange':
        """Return a copy widened by delta on both ends"""
        return TimeRange(self.start - delta, self.end + delta)

    def contains(self, instant: datetime) -> bool:
        """
        Check if an instant is within this range

        Note: start is inclusive, end is exclusive
        """
        return self.start <= instant < self.end

    def __str__(self):
        return f"{self.start.isoformat()} - {self.end.isoformat()}"

    def __repr__(self):
        return f"TimeRange({self.start.isoformat()}, {self.end.isoformat()})"
