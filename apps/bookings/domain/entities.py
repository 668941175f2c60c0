"""
Booking Domain Entities

Snapshots the booking core operates on:
- Resource: Catalog entry that can be reserved (room, equipment)
- Booking: A committed reservation of a resource for a time window
- BookingRequest: Transient creation input, range not yet parsed
- BookingFilter: Listing criteria
- BookingStatus: Position of a booking relative to "now"
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from shared.domain.value_objects import TimeRange


class BookingStatus(Enum):
    """Display status of a booking relative to the current instant"""
    UPCOMING = 'upcoming'
    ONGOING = 'ongoing'
    PAST = 'past'


@dataclass(frozen=True)
class Resource:
    """
    Shared resource that can be booked

    Static reference data owned by the resource catalog; the booking
    core only reads it.
    """
    id: str
    name: str
    type: str


@dataclass(frozen=True)
class Booking:
    """
    Committed booking snapshot

    The persistence collaborator owns the canonical record. Ranges are
    stored unbuffered; callers apply the buffer policy when comparing.
    """
    id: str
    resource_id: str
    range: TimeRange
    requested_by: str
    created_at: datetime
    resource_name: str = ''

    @property
    def start(self) -> datetime:
        return self.range.start

    @property
    def end(self) -> datetime:
        return self.range.end

    def status_at(self, now: datetime) -> BookingStatus:
        """
        Upcoming before start, ongoing up to and including end, past after.
        """
        if now < self.range.start:
            return BookingStatus.UPCOMING
        if now <= self.range.end:
            return BookingStatus.ONGOING
        return BookingStatus.PAST

    def __str__(self):
        return f"Booking {self.id} of {self.resource_id} ({self.range})"


@dataclass(frozen=True)
class BookingRequest:
    """
    Request to create a booking

    start/end are kept raw here: building the TimeRange is the first
    validation rule.
    """
    resource_id: str
    start: datetime
    end: datetime
    requested_by: str


@dataclass(frozen=True)
class BookingFilter:
    """Listing criteria; both fields optional"""
    resource_id: str | None = None
    date: date | None = None
