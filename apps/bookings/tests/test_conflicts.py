"""Tests for buffered conflict detection."""

from __future__ import annotations

import locale
from datetime import datetime, timedelta, timezone

import pytest

from apps.bookings.domain.buffer import DEFAULT_BUFFER, BufferPolicy
from apps.bookings.domain.conflicts import ConflictDetector, format_display_time
from shared.domain.value_objects import TimeRange

from .factories import at, make_booking

EXISTING = make_booking()  # conf-room-a, [14:00, 15:30)


@pytest.fixture
def detector() -> ConflictDetector:
    return ConflictDetector(BufferPolicy())


def test_buffer_policy_expands_both_ends():
    policy = BufferPolicy()

    assert DEFAULT_BUFFER == timedelta(minutes=10)
    assert policy.apply(EXISTING.range) == TimeRange(at(13, 50), at(15, 40))


def test_buffer_policy_rejects_negative_buffer():
    with pytest.raises(ValueError):
        BufferPolicy(timedelta(minutes=-1))


@pytest.mark.parametrize(
    "start, end, expected",
    [
        # after the booking
        (at(15, 35), at(16), True),    # 5 minute gap
        (at(15, 39), at(16), True),    # 9 minute gap
        (at(15, 40), at(16), False),   # exactly 10 minutes, touches buffer edge
        (at(15, 45), at(16), False),
        # before the booking
        (at(13), at(13, 50), False),   # exactly 10 minutes before start
        (at(13), at(13, 51), True),    # 9 minute gap
        # overlapping / enclosing
        (at(14, 30), at(15), True),
        (at(13), at(17), True),
        (at(15, 29), at(15, 45), True),
    ],
)
def test_candidate_against_buffered_booking(detector, start, end, expected):
    assert detector.has_conflict(TimeRange(start, end), [EXISTING]) is expected


def test_boundary_is_exclusive_at_millisecond_precision(detector):
    buffer_end = at(15, 40)

    just_inside = TimeRange(buffer_end - timedelta(milliseconds=1), at(16))
    touching = TimeRange(buffer_end, at(16))

    assert detector.has_conflict(just_inside, [EXISTING])
    assert not detector.has_conflict(touching, [EXISTING])


def test_buffer_is_not_applied_to_candidate(detector):
    # Buffering both sides would demand a 20 minute gap; 10 must be enough.
    candidate = TimeRange(at(15, 40), at(16, 10))

    assert not detector.has_conflict(candidate, [EXISTING])


def test_bookings_on_other_resources_never_conflict(detector):
    projector = make_booking(booking_id="2", resource_id="projector-1", resource_name="Projector #1")

    assert not detector.has_conflict(EXISTING.range, [projector], resource_id="conf-room-a")
    assert detector.has_conflict(EXISTING.range, [projector], resource_id="projector-1")


def test_plain_ranges_are_supported(detector):
    existing = [TimeRange(at(9), at(10)), TimeRange(at(14), at(15, 30))]

    assert detector.has_conflict(TimeRange(at(15, 35), at(16)), existing)
    assert not detector.has_conflict(TimeRange(at(11), at(12)), existing)


def test_no_existing_bookings_means_no_conflict(detector):
    assert not detector.has_conflict(TimeRange(at(9), at(10)), [])
    assert detector.find_conflict(TimeRange(at(9), at(10)), []) is None


def test_find_conflict_returns_first_collision_with_diagnostics(detector):
    later = make_booking(booking_id="7", start=at(16, 30), end=at(17))
    candidate = TimeRange(at(15, 35), at(16, 25))

    conflict = detector.find_conflict(candidate, [EXISTING, later])

    assert conflict is not None
    assert conflict.booking_id == "1"
    assert conflict.booking is EXISTING
    assert conflict.candidate == candidate
    assert conflict.existing == EXISTING.range
    assert conflict.buffered == TimeRange(at(13, 50), at(15, 40))
    assert [c.booking_id for c in detector.find_conflicts(candidate, [EXISTING, later])] == ["1", "7"]


def test_conflict_message_uses_resource_name_and_display_window(detector):
    conflict = detector.find_conflict(TimeRange(at(15, 35), at(16)), [EXISTING])

    assert conflict.describe() == (
        "Time conflict: Conference Room A is booked from Jul 22, 2:00 PM "
        "to Jul 22, 3:30 PM (including 10-minute buffer)"
    )


def test_custom_buffer_is_reported_in_message():
    detector = ConflictDetector(BufferPolicy.from_minutes(30))

    conflict = detector.find_conflict(TimeRange(at(15, 50), at(16, 30)), [EXISTING])

    assert conflict is not None
    assert "(including 30-minute buffer)" in conflict.describe()


@pytest.mark.parametrize(
    "instant, expected",
    [
        (at(0, 5), "Jul 22, 12:05 AM"),
        (at(9, 30), "Jul 22, 9:30 AM"),
        (at(12), "Jul 22, 12:00 PM"),
        (at(23, 59), "Jul 22, 11:59 PM"),
    ],
)
def test_format_display_time(instant, expected):
    assert format_display_time(instant) == expected


@pytest.fixture
def foreign_time_locale():
    saved = locale.setlocale(locale.LC_TIME)
    for name in ("de_DE.UTF-8", "fr_FR.UTF-8", "ru_RU.UTF-8", "de_DE", "fr_FR"):
        try:
            locale.setlocale(locale.LC_TIME, name)
            break
        except locale.Error:
            continue
    else:
        pytest.skip("no non-English locale installed")
    yield
    locale.setlocale(locale.LC_TIME, saved)


def test_format_display_time_ignores_process_locale(foreign_time_locale):
    assert format_display_time(at(14)) == "Jul 22, 2:00 PM"
    assert format_display_time(at(9, 5, day=3)) == "Jul 3, 9:05 AM"


class UnformattableInstant(datetime):
    def strftime(self, fmt):
        raise AssertionError("display must not go through strftime")

    def __format__(self, spec):
        raise AssertionError("display must not go through strftime")


def test_format_display_time_does_not_use_strftime():
    instant = UnformattableInstant(2024, 7, 22, 14, 5, tzinfo=timezone.utc)

    assert format_display_time(instant) == "Jul 22, 2:05 PM"
