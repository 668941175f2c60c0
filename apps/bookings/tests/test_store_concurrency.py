"""Concurrent creations racing through the ORM store on a real database."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from django.db import connections

from apps.bookings.domain.errors import ConflictError
from apps.bookings.models import Booking
from apps.bookings.wiring import build_booking_service
from apps.resources.models import Resource

from .factories import at, make_request

WRITERS = 4


@pytest.mark.django_db(transaction=True, serialized_rollback=True)
def test_concurrent_creations_commit_exactly_one_row():
    Resource.objects.get_or_create(
        id="conf-room-a", defaults={"name": "Conference Room A", "type": "Meeting Room"}
    )
    request = make_request(at(9), at(10))
    start_together = threading.Barrier(WRITERS)

    def create(_):
        try:
            start_together.wait(timeout=10)
            return build_booking_service().create_booking(request)
        finally:
            # Each worker thread opened its own connection
            connections.close_all()

    with ThreadPoolExecutor(max_workers=WRITERS) as pool:
        results = list(pool.map(create, range(WRITERS)))

    winners = [r.value for r in results if r.ok]
    losers = [r.error for r in results if not r.ok]
    assert len(winners) == 1
    assert len(losers) == WRITERS - 1
    assert all(isinstance(error, ConflictError) for error in losers), losers
    assert all(error.conflicting_booking.id == winners[0].id for error in losers)
    assert [str(pk) for pk in Booking.objects.values_list("id", flat=True)] == [winners[0].id]
