"""ORM-backed booking store."""

from __future__ import annotations

from datetime import date
from typing import List
from uuid import UUID

import structlog  # type: ignore
from django.db import DatabaseError, OperationalError, transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from shared.application.uow import DjangoUnitOfWork
from shared.domain.result import Result
from shared.domain.value_objects import TimeRange

from apps.resources.models import Resource

from .domain.buffer import BufferPolicy
from .domain.conflicts import ConflictDetector
from .domain.entities import Booking as BookingEntity
from .domain.errors import NotFoundError, StoreError
from .domain.ports import BookingStore
from .models import Booking

logger = structlog.get_logger(__name__)


def _is_lock_contention(exc: OperationalError) -> bool:
    # SQLite reports a busy timeout as "database is locked" or "database table is locked"
    return "is locked" in str(exc)


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection(queryset.db).in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


class DjangoBookingStore(BookingStore):
    """
    Booking store over the ``bookings.Booking`` table

    Inserts run in a per-resource critical section: the resource row is
    locked with SELECT ... FOR UPDATE, the buffered conflict check is
    repeated against committed rows, and only then the row is written.
    SQLite has no row locks; there the settings open every transaction
    with BEGIN IMMEDIATE so writers queue on the database lock instead.
    A writer that loses the race gets StoreError(conflict=True), also
    when it gave up waiting for the lock and the winner's row collides.
    """

    def __init__(self, policy: BufferPolicy | None = None, using: str | None = None) -> None:
        self.policy = policy or BufferPolicy()
        self.detector = ConflictDetector(self.policy)
        self.using = using

    def _queryset(self):  # type: ignore
        qs = Booking.objects.select_related("resource")
        if self.using:
            qs = qs.using(self.using)
        return qs

    def find_by_resource(self, resource_id: str) -> List[BookingEntity]:
        try:
            rows = self._queryset().filter(resource_id=resource_id).order_by("start_time")
            return [row.to_domain() for row in rows]
        except DatabaseError as exc:
            logger.error("booking_store.read_failed", resource_id=resource_id, error=str(exc))
            raise StoreError(str(exc)) from exc

    def find_by_date_and_resource(
        self,
        day: date | None = None,
        resource_id: str | None = None,
    ) -> List[BookingEntity]:
        qs = self._queryset()
        if resource_id:
            qs = qs.filter(resource_id=resource_id)
        if day:
            window = TimeRange.for_day(day)
            qs = qs.filter(start_time__gte=window.start, start_time__lt=window.end)
        try:
            return [row.to_domain() for row in qs.order_by("start_time", "created_at")]
        except DatabaseError as exc:
            logger.error("booking_store.read_failed", resource_id=resource_id, day=str(day), error=str(exc))
            raise StoreError(str(exc)) from exc

    def insert(self, booking: BookingEntity) -> Result[BookingEntity, StoreError]:
        try:
            row = self._insert_in_critical_section(booking)
        except StoreError as exc:
            return Result.failure(exc)
        except OperationalError as exc:
            if not _is_lock_contention(exc):
                logger.error("booking_store.insert_failed", resource_id=booking.resource_id, error=str(exc))
                return Result.failure(StoreError(str(exc)))
            return Result.failure(self._contention_error(booking, exc))
        except (DatabaseError, ValueError) as exc:
            logger.error("booking_store.insert_failed", resource_id=booking.resource_id, error=str(exc))
            return Result.failure(StoreError(str(exc)))

        return Result.success(row.to_domain())

    def _insert_in_critical_section(self, booking: BookingEntity) -> Booking:
        with DjangoUnitOfWork(using=self.using) as uow:
            resources = Resource.objects.filter(pk=booking.resource_id)
            if self.using:
                resources = resources.using(self.using)
            resource = _lock_queryset_if_possible(resources).first()
            if resource is None:
                raise StoreError(f"Unknown resource: {booking.resource_id}")

            existing = [
                row.to_domain()
                for row in self._queryset().filter(resource_id=booking.resource_id)
            ]
            conflict = self.detector.find_conflict(booking.range, existing)
            if conflict is not None:
                logger.warning(
                    "booking_store.insert_conflict",
                    resource_id=booking.resource_id,
                    conflicting_booking_id=conflict.booking_id,
                )
                raise StoreError(
                    "Booking overlaps a committed booking",
                    conflict=True,
                    conflicting_booking=conflict.booking,
                )

            row = Booking(
                id=UUID(booking.id),
                resource=resource,
                start_time=booking.range.start,
                end_time=booking.range.end,
                requested_by=booking.requested_by,
                created_at=booking.created_at,
            )
            row.save(using=self.using, force_insert=True)
            uow.after_commit(
                lambda: logger.info(
                    "booking_store.committed",
                    booking_id=booking.id,
                    resource_id=booking.resource_id,
                )
            )
        return row

    def _contention_error(self, booking: BookingEntity, exc: OperationalError) -> StoreError:
        """
        Classify a write that timed out waiting for another writer

        The other writer has finished by now, so its row is visible: if it
        collides with the candidate this writer lost the race.
        """
        try:
            existing = self.find_by_resource(booking.resource_id)
        except StoreError as read_error:
            return read_error

        conflict = self.detector.find_conflict(booking.range, existing)
        logger.warning(
            "booking_store.lock_contention",
            resource_id=booking.resource_id,
            conflict=conflict is not None,
            error=str(exc),
        )
        if conflict is None:
            return StoreError(str(exc))
        return StoreError(
            "Booking overlaps a committed booking",
            conflict=True,
            conflicting_booking=conflict.booking,
        )

    def delete(self, booking_id: str) -> Result[None, NotFoundError]:
        try:
            pk = UUID(str(booking_id))
        except ValueError:
            return Result.failure(NotFoundError(booking_id))

        try:
            deleted, _ = Booking.objects.using(self.using or "default").filter(pk=pk).delete()
        except DatabaseError as exc:
            logger.error("booking_store.delete_failed", booking_id=booking_id, error=str(exc))
            return Result.failure(StoreError(str(exc)))

        if not deleted:
            return Result.failure(NotFoundError(booking_id))
        return Result.success()
