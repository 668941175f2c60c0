"""Booking persistence models."""

from __future__ import annotations

import uuid

from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import TimeRange

from .domain.entities import Booking as BookingEntity


class Booking(models.Model):
    """Reservation of a shared resource for a time window."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    resource = models.ForeignKey(
        "resources.Resource",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    start_time = models.DateTimeField()
    end_time = models.DateTimeField()
    requested_by = models.CharField(max_length=255)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["start_time"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_time__gt=models.F("start_time")),
                name="booking_end_after_start",
            ),
        ]
        indexes = [
            models.Index(fields=["resource", "start_time"], name="booking_resource_start_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking {self.id} of {self.resource_id}"

    def to_domain(self) -> BookingEntity:
        return BookingEntity(
            id=str(self.id),
            resource_id=self.resource_id,
            range=TimeRange(self.start_time, self.end_time),
            requested_by=self.requested_by,
            created_at=self.created_at,
            resource_name=self.resource.name,
        )
