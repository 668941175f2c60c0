"""Tests for the TimeRange value object and the Result wrapper."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date, datetime, timedelta, timezone

import pytest

from shared.domain.errors import InvalidRange
from shared.domain.result import Result
from shared.domain.value_objects import TimeRange

UTC = timezone.utc


def at(hour: int, minute: int = 0, second: int = 0) -> datetime:
    return datetime(2024, 7, 22, hour, minute, second, tzinfo=UTC)


@pytest.mark.parametrize(
    "start, end",
    [
        (at(10), at(10)),
        (at(11), at(10)),
        (at(10, 0, 1), at(10)),
    ],
)
def test_end_not_after_start_is_invalid(start, end):
    with pytest.raises(InvalidRange) as exc_info:
        TimeRange(start, end)

    assert exc_info.value.start == start
    assert exc_info.value.end == end
    assert exc_info.value.code == "invalid_range"
    assert exc_info.value.message == "End time must be after start time"


def test_range_is_immutable():
    window = TimeRange(at(10), at(11))

    with pytest.raises(FrozenInstanceError):
        window.end = at(12)  # type: ignore[misc]


def test_duration_minutes_keeps_fractions():
    window = TimeRange(at(10), at(10, 14, 59))

    assert window.duration_minutes == pytest.approx(14 + 59 / 60)
    assert window.duration_minutes < 15


def test_half_open_overlap():
    morning = TimeRange(at(9), at(10))

    assert morning.overlaps_with(TimeRange(at(9, 30), at(11)))
    assert TimeRange(at(9, 30), at(11)).overlaps_with(morning)
    assert not morning.overlaps_with(TimeRange(at(10), at(11)))
    assert not TimeRange(at(10), at(11)).overlaps_with(morning)


def test_overlap_requires_time_range():
    with pytest.raises(TypeError):
        TimeRange(at(9), at(10)).overlaps_with((at(9), at(10)))  # type: ignore[arg-type]


def test_expanded_widens_both_ends():
    window = TimeRange(at(14), at(15, 30)).expanded(timedelta(minutes=10))

    assert window == TimeRange(at(13, 50), at(15, 40))


def test_contains_is_start_inclusive_end_exclusive():
    window = TimeRange(at(9), at(10))

    assert window.contains(at(9))
    assert window.contains(at(9, 59, 59))
    assert not window.contains(at(10))


def test_for_day_spans_exactly_24_hours_in_utc():
    window = TimeRange.for_day(date(2024, 7, 22))

    assert window.start == datetime(2024, 7, 22, tzinfo=UTC)
    assert window.end == datetime(2024, 7, 23, tzinfo=UTC)
    assert window.duration == timedelta(hours=24)


def test_result_success_and_failure():
    done = Result.success(42)
    deleted = Result.success()
    failed = Result.failure(InvalidRange())

    assert done.ok and done.value == 42 and done.unwrap() == 42
    assert deleted.ok and deleted.value is None
    assert not failed.ok
    with pytest.raises(InvalidRange):
        failed.unwrap()


def test_failure_requires_error():
    with pytest.raises(ValueError):
        Result.failure(None)  # type: ignore[arg-type]
