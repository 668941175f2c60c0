"""
Booking Service

Use cases exposed to the HTTP/CLI collaborators:
- create_booking: validate, check conflicts, commit
- list_bookings: filtered listing ordered by start time
- cancel_booking: delete an existing booking

Every operation returns a Result; domain outcomes are never raised.
"""

from datetime import datetime, timezone
from typing import Callable, List
from uuid import uuid4

from shared.domain.errors import DomainError
from shared.domain.result import Result

from apps.bookings.domain.buffer import BufferPolicy
from apps.bookings.domain.conflicts import ConflictDetector
from apps.bookings.domain.entities import Booking, BookingFilter, BookingRequest
from apps.bookings.domain.errors import ConflictError, NotFoundError, StoreError
from apps.bookings.domain.ports import BookingStore, ResourceLookup
from apps.bookings.domain.validation import DEFAULT_MIN_DURATION_MINUTES, BookingValidator


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BookingService:
    """
    Orchestrates a single booking-creation attempt

    Received -> Validated -> ConflictChecked -> Committed,
    or Rejected(reason) at any stage.

    Existing bookings are fetched from the store on every call, never
    cached. The store's insert is the last line of defence against
    concurrent writers; its conflict-shaped failures come back as
    ConflictError like any other collision.

    Usage:
        service = BookingService(store, resources)
        result = service.create_booking(BookingRequest(...))
        if not result.ok:
            ...  # result.error is a BookingError
    """

    def __init__(
        self,
        store: BookingStore,
        resources: ResourceLookup,
        policy: BufferPolicy | None = None,
        min_duration_minutes: float = DEFAULT_MIN_DURATION_MINUTES,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = lambda: str(uuid4()),
    ):
        self.store = store
        self.resources = resources
        self.policy = policy or BufferPolicy()
        self.validator = BookingValidator(resources, min_duration_minutes)
        self.detector = ConflictDetector(self.policy)
        self._clock = clock
        self._new_id = id_factory

    def create_booking(self, request: BookingRequest) -> Result[Booking, DomainError]:
        # Received -> Validated
        try:
            validation = self.validator.validate(request)
        except StoreError as exc:
            return Result.failure(exc)
        if not validation.ok:
            return Result.failure(validation.error)
        candidate = validation.value

        # Validated -> ConflictChecked
        try:
            existing = self.store.find_by_resource(request.resource_id)
        except StoreError as exc:
            return Result.failure(exc)

        conflict = self.detector.find_conflict(
            candidate, existing, resource_id=request.resource_id
        )
        if conflict is not None:
            return Result.failure(ConflictError(conflict))

        # ConflictChecked -> Committed
        try:
            resource = self.resources.get(request.resource_id)
        except StoreError as exc:
            return Result.failure(exc)
        booking = Booking(
            id=self._new_id(),
            resource_id=request.resource_id,
            range=candidate,
            requested_by=request.requested_by.strip(),
            created_at=self._clock(),
            resource_name=resource.name if resource else '',
        )

        inserted = self.store.insert(booking)
        if not inserted.ok:
            return Result.failure(self._remap_store_error(booking, inserted.error))
        return Result.success(inserted.value)

    def list_bookings(
        self,
        criteria: BookingFilter | None = None,
    ) -> Result[List[Booking], StoreError]:
        criteria = criteria or BookingFilter()
        try:
            bookings = self.store.find_by_date_and_resource(
                day=criteria.date,
                resource_id=criteria.resource_id,
            )
        except StoreError as exc:
            return Result.failure(exc)
        # Stable: ties keep the store's order
        return Result.success(sorted(bookings, key=lambda b: b.range.start))

    def cancel_booking(self, booking_id: str) -> Result[None, NotFoundError]:
        if not booking_id:
            return Result.failure(NotFoundError(booking_id))
        try:
            return self.store.delete(booking_id)
        except StoreError as exc:
            return Result.failure(exc)

    def _remap_store_error(self, booking: Booking, error: DomainError) -> DomainError:
        """Store-level race rejections surface as ConflictError"""
        if not isinstance(error, StoreError) or not error.conflict:
            return error

        conflict = None
        if error.conflicting_booking is not None:
            conflict = self.detector.find_conflict(booking.range, [error.conflicting_booking])
        return ConflictError(conflict)
