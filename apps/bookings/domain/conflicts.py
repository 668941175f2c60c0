"""
Conflict Detection

This is the CRITICAL rule for preventing double bookings on a resource.
Every candidate window MUST pass through ConflictDetector before commit,
both when the service checks and when a store re-checks at insert time.

Rule:
- Each existing booking is expanded by the buffer policy
- The candidate is NOT expanded (buffer is one-sided)
- Candidate conflicts iff it intersects a buffered existing window
  under half-open semantics, so touching the buffer edge is allowed
- Only bookings of the same resource are compared
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Iterator, List, Union

from shared.domain.value_objects import TimeRange

from .buffer import BufferPolicy
from .entities import Booking

Existing = Union[Booking, TimeRange]


_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_display_time(instant: datetime) -> str:
    """Short 12-hour display, e.g. 'Jul 22, 2:00 PM', independent of the locale"""
    hour = instant.hour % 12 or 12
    meridiem = "AM" if instant.hour < 12 else "PM"
    return f"{_MONTHS[instant.month - 1]} {instant.day}, {hour}:{instant.minute:02d} {meridiem}"


@dataclass(frozen=True)
class Conflict:
    """
    Diagnostic for a detected collision

    Carries the colliding entry and both its displayed (unbuffered) and
    buffered windows so callers can build a message.
    """
    candidate: TimeRange
    existing: TimeRange
    buffered: TimeRange
    buffer_minutes: float
    booking: Booking | None = None

    @property
    def booking_id(self) -> str | None:
        return self.booking.id if self.booking else None

    def describe(self) -> str:
        if self.booking is not None:
            subject = self.booking.resource_name or self.booking.resource_id
        else:
            subject = "Resource"
        return (
            f"Time conflict: {subject} is booked from "
            f"{format_display_time(self.existing.start)} to "
            f"{format_display_time(self.existing.end)} "
            f"(including {self.buffer_minutes:g}-minute buffer)"
        )


class ConflictDetector:
    """
    Decides whether a candidate window collides with existing bookings

    Usage:
        detector = ConflictDetector(BufferPolicy())
        existing = store.find_by_resource(resource_id)
        conflict = detector.find_conflict(candidate, existing, resource_id=resource_id)
        if conflict:
            return Result.failure(ConflictError(conflict))

    Pure: it neither logs nor raises; "no conflict" is a normal outcome.
    """

    def __init__(self, policy: BufferPolicy | None = None):
        self.policy = policy or BufferPolicy()

    def has_conflict(
        self,
        candidate: TimeRange,
        existing: Iterable[Existing],
        resource_id: str | None = None,
    ) -> bool:
        return self.find_conflict(candidate, existing, resource_id=resource_id) is not None

    def find_conflict(
        self,
        candidate: TimeRange,
        existing: Iterable[Existing],
        resource_id: str | None = None,
    ) -> Conflict | None:
        """Return the first conflicting entry, in iteration order"""
        return next(self._iter_conflicts(candidate, existing, resource_id), None)

    def find_conflicts(
        self,
        candidate: TimeRange,
        existing: Iterable[Existing],
        resource_id: str | None = None,
    ) -> List[Conflict]:
        """Return every conflicting entry"""
        return list(self._iter_conflicts(candidate, existing, resource_id))

    def _iter_conflicts(
        self,
        candidate: TimeRange,
        existing: Iterable[Existing],
        resource_id: str | None,
    ) -> Iterator[Conflict]:
        for entry in existing:
            if isinstance(entry, Booking):
                if resource_id is not None and entry.resource_id != resource_id:
                    continue
                booking, window = entry, entry.range
            else:
                booking, window = None, entry

            buffered = self.policy.apply(window)
            if candidate.overlaps_with(buffered):
                yield Conflict(
                    candidate=candidate,
                    existing=window,
                    buffered=buffered,
                    buffer_minutes=self.policy.minutes,
                    booking=booking,
                )
