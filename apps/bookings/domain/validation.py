"""
Booking Validation

Structural rules applied to a request before conflict checking.
Rules run in order and stop at the first failure:

1. end after start          -> InvalidRange
2. duration >= minimum      -> TooShort
3. requester not blank      -> MissingRequester
4. resource in the catalog  -> UnknownResource
"""

from shared.domain.errors import DomainError, InvalidRange
from shared.domain.result import Result
from shared.domain.value_objects import TimeRange

from .entities import BookingRequest
from .errors import MissingRequester, TooShort, UnknownResource
from .ports import ResourceLookup

DEFAULT_MIN_DURATION_MINUTES = 15


class BookingValidator:
    """
    Validates booking requests

    On success the result carries the parsed TimeRange so the caller does
    not rebuild it.
    """

    def __init__(
        self,
        resources: ResourceLookup,
        min_duration_minutes: float = DEFAULT_MIN_DURATION_MINUTES,
    ):
        self.resources = resources
        self.min_duration_minutes = min_duration_minutes

    def validate(self, request: BookingRequest) -> Result[TimeRange, DomainError]:
        try:
            time_range = TimeRange(request.start, request.end)
        except InvalidRange as exc:
            return Result.failure(exc)

        # Compared numerically, fractional minutes included
        if time_range.duration_minutes < self.min_duration_minutes:
            return Result.failure(
                TooShort(time_range.duration_minutes, self.min_duration_minutes)
            )

        if not (request.requested_by or '').strip():
            return Result.failure(MissingRequester())

        if not self.resources.exists(request.resource_id):
            return Result.failure(UnknownResource(request.resource_id))

        return Result.success(time_range)
