"""Booking core: conflict detection and validation rules."""

from .buffer import DEFAULT_BUFFER, BufferPolicy
from .conflicts import Conflict, ConflictDetector
from .entities import Booking, BookingFilter, BookingRequest, BookingStatus, Resource
from .errors import (
    VALIDATION_ERRORS,
    BookingError,
    ConflictError,
    InvalidRange,
    MissingRequester,
    NotFoundError,
    StoreError,
    TooShort,
    UnknownResource,
)
from .ports import BookingStore, ResourceLookup
from .validation import DEFAULT_MIN_DURATION_MINUTES, BookingValidator

__all__ = [
    "DEFAULT_BUFFER",
    "DEFAULT_MIN_DURATION_MINUTES",
    "VALIDATION_ERRORS",
    "Booking",
    "BookingError",
    "BookingFilter",
    "BookingRequest",
    "BookingStatus",
    "BookingStore",
    "BookingValidator",
    "BufferPolicy",
    "Conflict",
    "ConflictDetector",
    "ConflictError",
    "InvalidRange",
    "MissingRequester",
    "NotFoundError",
    "Resource",
    "ResourceLookup",
    "StoreError",
    "TooShort",
    "UnknownResource",
]
