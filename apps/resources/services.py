"""Resource lookup backed by the Django ORM."""

from __future__ import annotations

import structlog  # type: ignore
from django.db import DatabaseError  # type: ignore

from apps.bookings.domain.entities import Resource as ResourceEntity
from apps.bookings.domain.errors import StoreError
from apps.bookings.domain.ports import ResourceLookup

from .models import Resource

logger = structlog.get_logger(__name__)


class DjangoResourceLookup(ResourceLookup):
    """Read-only view of the resource catalog table.

    Database failures are raised as StoreError, like the booking store's reads.
    """

    def __init__(self, using: str | None = None) -> None:
        self.using = using

    def _queryset(self):  # type: ignore
        qs = Resource.objects.all()
        if self.using:
            qs = qs.using(self.using)
        return qs

    def exists(self, resource_id: str) -> bool:
        if not resource_id:
            return False
        try:
            return self._queryset().filter(pk=resource_id).exists()
        except DatabaseError as exc:
            logger.error("resource_lookup.failed", resource_id=resource_id, error=str(exc))
            raise StoreError(str(exc)) from exc

    def get(self, resource_id: str) -> ResourceEntity | None:
        if not resource_id:
            return None
        try:
            resource = self._queryset().filter(pk=resource_id).first()
        except DatabaseError as exc:
            logger.error("resource_lookup.failed", resource_id=resource_id, error=str(exc))
            raise StoreError(str(exc)) from exc
        return resource.to_domain() if resource else None
