"""Serializers for the booking API.

Payloads use the camelCase keys of the public JSON contract
(resourceId, startTime, endTime, requestedBy) with ISO-8601 instants.
"""

from __future__ import annotations

from django.utils import timezone  # type: ignore
from rest_framework import serializers  # type: ignore

from .domain.entities import BookingFilter, BookingRequest


class BookingCreateSerializer(serializers.Serializer):
    """Parses a creation payload into a BookingRequest.

    Only the shape is checked here. Range order, minimum duration and a
    blank requester are booking rules and are reported by the service.
    """

    resourceId = serializers.CharField(max_length=64)
    startTime = serializers.DateTimeField()
    endTime = serializers.DateTimeField()
    requestedBy = serializers.CharField(
        max_length=255,
        required=False,
        default="",
        allow_blank=True,
        trim_whitespace=False,
    )

    def to_request(self) -> BookingRequest:
        data = self.validated_data
        return BookingRequest(
            resource_id=data["resourceId"],
            start=data["startTime"],
            end=data["endTime"],
            requested_by=data["requestedBy"],
        )


class BookingListQuerySerializer(serializers.Serializer):
    """Query parameters of the booking listing."""

    resourceId = serializers.CharField(required=False, allow_blank=True)
    date = serializers.DateField(required=False)

    def to_filter(self) -> BookingFilter:
        data = self.validated_data
        return BookingFilter(
            resource_id=data.get("resourceId") or None,
            date=data.get("date"),
        )


class BookingSerializer(serializers.Serializer):
    """Read representation of a domain Booking snapshot."""

    id = serializers.CharField(read_only=True)
    resourceId = serializers.CharField(source="resource_id", read_only=True)
    resourceName = serializers.CharField(source="resource_name", read_only=True)
    startTime = serializers.DateTimeField(source="start", read_only=True)
    endTime = serializers.DateTimeField(source="end", read_only=True)
    requestedBy = serializers.CharField(source="requested_by", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    status = serializers.SerializerMethodField()

    def get_status(self, booking) -> str:  # type: ignore
        now = self.context.get("now") or timezone.now()
        return booking.status_at(now).value
