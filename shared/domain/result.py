"""
Result Value Object

Tagged success/error outcome returned by domain and application
operations instead of raising.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from shared.domain.errors import DomainError

T = TypeVar('T')
E = TypeVar('E', bound=DomainError)


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """
    Outcome of an operation

    Exactly one of `value` / `error` is meaningful: a result is successful
    when it carries no error (the value may legitimately be None, e.g. for
    deletions).

    Usage:
        result = service.create_booking(request)
        if result.ok:
            booking = result.value
        else:
            return Response(result.error.to_dict(), status=result.error.http_status)
    """
    value: T | None = None
    error: E | None = None

    @classmethod
    def success(cls, value: T | None = None) -> 'Result[T, E]':
        return cls(value=value)

    @classmethod
    def failure(cls, error: E) -> 'Result[T, E]':
        if error is None:
            raise ValueError("Failure result requires an error")
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the carried error on failure"""
        if self.error is not None:
            raise self.error
        return self.value

    def __bool__(self):
        return self.ok
