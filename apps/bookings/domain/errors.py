"""
Booking Error Taxonomy

Errors the booking core hands back inside Result values:
- Validation stage (400): InvalidRange, TooShort, MissingRequester, UnknownResource
- ConflictError (409): candidate collides with a buffered existing booking
- NotFoundError (404): cancellation of an unknown booking
- StoreError (500): persistence failure, not retried by the core
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shared.domain.errors import DomainError, InvalidRange

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .conflicts import Conflict
    from .entities import Booking

__all__ = [
    "BookingError",
    "VALIDATION_ERRORS",
    "InvalidRange",
    "TooShort",
    "MissingRequester",
    "UnknownResource",
    "ConflictError",
    "NotFoundError",
    "StoreError",
]

BookingError = DomainError


class TooShort(DomainError):
    code = "too_short"
    default_message = "Booking duration must be at least 15 minutes"

    def __init__(self, duration_minutes: float, minimum_minutes: float, message: str | None = None):
        self.duration_minutes = duration_minutes
        self.minimum_minutes = minimum_minutes
        if message is None and minimum_minutes != 15:
            message = f"Booking duration must be at least {minimum_minutes:g} minutes"
        super().__init__(message)


class MissingRequester(DomainError):
    code = "missing_requester"
    default_message = "Requested by field is required"


class UnknownResource(DomainError):
    code = "unknown_resource"
    default_message = "Unknown resource"

    def __init__(self, resource_id: str, message: str | None = None):
        self.resource_id = resource_id
        super().__init__(message or f"Unknown resource: {resource_id}")


class ConflictError(DomainError):
    """Candidate window collides with an existing booking on the same resource."""

    code = "conflict"
    http_status = 409
    default_message = "Time slot conflicts with existing booking (buffer rule applied)."

    def __init__(self, conflict: "Conflict | None" = None, message: str | None = None):
        self.conflict = conflict
        if message is None and conflict is not None:
            message = conflict.describe()
        super().__init__(message)

    @property
    def conflicting_booking(self) -> "Booking | None":
        return self.conflict.booking if self.conflict else None

    def to_dict(self) -> dict:
        data = super().to_dict()
        booking = self.conflicting_booking
        if booking is not None:
            data["conflictingBooking"] = {
                "id": booking.id,
                "resourceId": booking.resource_id,
                "startTime": booking.range.start.isoformat(),
                "endTime": booking.range.end.isoformat(),
            }
        return data


class NotFoundError(DomainError):
    code = "not_found"
    http_status = 404
    default_message = "Booking not found"

    def __init__(self, booking_id: str | None = None, message: str | None = None):
        self.booking_id = booking_id
        super().__init__(message)


class StoreError(DomainError):
    """
    Persistence failure

    `conflict` is set when the store rejected the insert because a
    concurrent writer committed an overlapping booking first; the service
    remaps such failures to ConflictError.
    """

    code = "store_error"
    http_status = 500
    default_message = "Booking store failure"

    def __init__(
        self,
        message: str | None = None,
        *,
        conflict: bool = False,
        conflicting_booking: "Booking | None" = None,
    ):
        self.conflict = conflict
        self.conflicting_booking = conflicting_booking
        super().__init__(message)


# User-input errors detected before conflict checking, in rule order
VALIDATION_ERRORS = (InvalidRange, TooShort, MissingRequester, UnknownResource)
