"""
Collaborator Ports

Interfaces the booking core consumes. Concrete implementations live
outside the domain package (Django ORM, in-memory).
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Sequence

from shared.domain.result import Result

from .entities import Booking, Resource
from .errors import NotFoundError, StoreError


class ResourceLookup(ABC):
    """
    Read-only access to the resource catalog

    Implementations raise StoreError when the catalog cannot be read.
    """

    @abstractmethod
    def exists(self, resource_id: str) -> bool:
        pass

    @abstractmethod
    def get(self, resource_id: str) -> Resource | None:
        """Return the resource, or None when it is not in the catalog"""
        pass


class BookingStore(ABC):
    """
    Persistence collaborator owning canonical booking records

    Implementations must make insert safe against the check-then-act race
    between concurrent creations on one resource: either by enforcing an
    exclusion constraint at commit time or by serializing
    fetch + check + insert per resource. A losing writer gets
    StoreError(conflict=True).
    """

    @abstractmethod
    def find_by_resource(self, resource_id: str) -> Sequence[Booking]:
        """Bookings of one resource, unbuffered ranges"""
        pass

    @abstractmethod
    def find_by_date_and_resource(
        self,
        day: date | None = None,
        resource_id: str | None = None,
    ) -> Sequence[Booking]:
        """
        Bookings matching the optional filters, ordered by start ascending

        `day` selects bookings whose start falls in [startOfDay, startOfDay + 24h).
        """
        pass

    @abstractmethod
    def insert(self, booking: Booking) -> Result[Booking, StoreError]:
        pass

    @abstractmethod
    def delete(self, booking_id: str) -> Result[None, NotFoundError]:
        pass
