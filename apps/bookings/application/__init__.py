"""Booking use cases."""

from .service import BookingService

__all__ = ["BookingService"]
