"""
In-memory collaborators

Process-local implementations of the booking ports for tests, scripts
and embedding the core without a database. Each instance owns its own
state; nothing is shared between instances.
"""

from __future__ import annotations

import threading
from datetime import date
from typing import Dict, Iterable, List

from shared.domain.result import Result
from shared.domain.value_objects import TimeRange

from .domain.buffer import BufferPolicy
from .domain.conflicts import ConflictDetector
from .domain.entities import Booking, Resource
from .domain.errors import NotFoundError, StoreError
from .domain.ports import BookingStore, ResourceLookup


class InMemoryResourceLookup(ResourceLookup):
    def __init__(self, resources: Iterable[Resource] = ()) -> None:
        self._resources: Dict[str, Resource] = {r.id: r for r in resources}

    def exists(self, resource_id: str) -> bool:
        return resource_id in self._resources

    def get(self, resource_id: str) -> Resource | None:
        return self._resources.get(resource_id)


def _starts_within(booking: Booking, window: TimeRange) -> bool:
    start = booking.range.start
    if start.tzinfo is None:
        # Naive snapshots are read on the same (UTC) timeline
        return window.start.replace(tzinfo=None) <= start < window.end.replace(tzinfo=None)
    return window.contains(start)


class InMemoryBookingStore(BookingStore):
    """
    Booking store kept in a dict

    A lock serializes every operation, and insert repeats the buffered
    conflict check under that lock, so two concurrent creations on one
    resource cannot both commit.
    """

    def __init__(
        self,
        bookings: Iterable[Booking] = (),
        policy: BufferPolicy | None = None,
    ) -> None:
        self.detector = ConflictDetector(policy or BufferPolicy())
        self._bookings: Dict[str, Booking] = {b.id: b for b in bookings}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._bookings)

    def _ordered(self, bookings: Iterable[Booking]) -> List[Booking]:
        return sorted(bookings, key=lambda b: (b.range.start, b.created_at))

    def find_by_resource(self, resource_id: str) -> List[Booking]:
        with self._lock:
            return self._ordered(b for b in self._bookings.values() if b.resource_id == resource_id)

    def find_by_date_and_resource(
        self,
        day: date | None = None,
        resource_id: str | None = None,
    ) -> List[Booking]:
        window = TimeRange.for_day(day) if day else None
        with self._lock:
            matches = [
                b
                for b in self._bookings.values()
                if (not resource_id or b.resource_id == resource_id)
                and (window is None or _starts_within(b, window))
            ]
        return self._ordered(matches)

    def insert(self, booking: Booking) -> Result[Booking, StoreError]:
        with self._lock:
            if booking.id in self._bookings:
                return Result.failure(StoreError(f"Duplicate booking id: {booking.id}"))

            same_resource = [b for b in self._bookings.values() if b.resource_id == booking.resource_id]
            conflict = self.detector.find_conflict(booking.range, same_resource)
            if conflict is not None:
                return Result.failure(
                    StoreError(
                        "Booking overlaps a committed booking",
                        conflict=True,
                        conflicting_booking=conflict.booking,
                    )
                )

            self._bookings[booking.id] = booking
        return Result.success(booking)

    def delete(self, booking_id: str) -> Result[None, NotFoundError]:
        with self._lock:
            if self._bookings.pop(booking_id, None) is None:
                return Result.failure(NotFoundError(booking_id))
        return Result.success()
