"""Builds the booking service from Django settings."""

from __future__ import annotations

from django.conf import settings  # type: ignore

from apps.resources.services import DjangoResourceLookup

from .application.service import BookingService
from .domain.buffer import BufferPolicy
from .domain.validation import DEFAULT_MIN_DURATION_MINUTES
from .stores import DjangoBookingStore


def buffer_policy_from_settings() -> BufferPolicy:
    return BufferPolicy.from_minutes(getattr(settings, "BOOKING_BUFFER_MINUTES", 10))


def build_booking_service() -> BookingService:
    """Service wired to the ORM store; one policy instance for check and commit."""

    policy = buffer_policy_from_settings()
    return BookingService(
        store=DjangoBookingStore(policy),
        resources=DjangoResourceLookup(),
        policy=policy,
        min_duration_minutes=getattr(
            settings, "BOOKING_MIN_DURATION_MINUTES", DEFAULT_MIN_DURATION_MINUTES
        ),
    )
