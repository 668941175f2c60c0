"""API views for the booking domain."""

from __future__ import annotations

import structlog  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.domain.errors import DomainError

from .serializers import BookingCreateSerializer, BookingListQuerySerializer, BookingSerializer
from .wiring import build_booking_service

logger = structlog.get_logger(__name__)


def error_response(error: DomainError) -> Response:
    """Render a booking error with its mapped HTTP status."""

    return Response(error.to_dict(), status=error.http_status)


class BookingViewSet(viewsets.ViewSet):
    """Create, list and cancel bookings through the booking service."""

    permission_classes = [permissions.AllowAny]
    serializer_class = BookingSerializer

    def get_service(self):  # type: ignore
        # Built per request; the service holds no state between calls
        return build_booking_service()

    def list(self, request):  # type: ignore
        query = BookingListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        result = self.get_service().list_bookings(query.to_filter())
        if not result.ok:
            logger.error("booking.list_failed", error=result.error.message)
            return error_response(result.error)

        return Response(BookingSerializer(result.value, many=True).data)

    def create(self, request):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking_request = serializer.to_request()

        result = self.get_service().create_booking(booking_request)
        if not result.ok:
            log = logger.error if result.error.http_status >= 500 else logger.info
            log(
                "booking.rejected",
                resource_id=booking_request.resource_id,
                code=result.error.code,
                reason=result.error.message,
            )
            return error_response(result.error)

        booking = result.value
        logger.info(
            "booking.created",
            booking_id=booking.id,
            resource_id=booking.resource_id,
            start=booking.start.isoformat(),
            end=booking.end.isoformat(),
        )
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None):  # type: ignore
        result = self.get_service().cancel_booking(pk)
        if not result.ok:
            logger.info("booking.cancel_rejected", booking_id=pk, code=result.error.code)
            return error_response(result.error)

        logger.info("booking.cancelled", booking_id=pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
