"""Sample resource catalog shipped with the service."""

from __future__ import annotations

from apps.bookings.domain.entities import Resource

SAMPLE_RESOURCES: tuple[Resource, ...] = (
    Resource(id="conf-room-a", name="Conference Room A", type="Meeting Room"),
    Resource(id="conf-room-b", name="Conference Room B", type="Meeting Room"),
    Resource(id="projector-1", name="Projector #1", type="Equipment"),
    Resource(id="laptop-cart", name="Laptop Cart", type="Equipment"),
    Resource(id="video-studio", name="Video Studio", type="Studio"),
)
