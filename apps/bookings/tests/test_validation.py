"""Tests for structural booking validation."""

from __future__ import annotations

from datetime import timedelta

import pytest

from apps.bookings.domain.errors import (
    VALIDATION_ERRORS,
    InvalidRange,
    MissingRequester,
    TooShort,
    UnknownResource,
)
from apps.bookings.domain.validation import BookingValidator
from shared.domain.value_objects import TimeRange

from .factories import at, make_request, sample_lookup


@pytest.fixture
def validator() -> BookingValidator:
    return BookingValidator(sample_lookup())


def test_valid_request_yields_parsed_range(validator):
    result = validator.validate(make_request(at(9), at(10)))

    assert result.ok
    assert result.value == TimeRange(at(9), at(10))


def test_end_before_start_is_invalid_range(validator):
    result = validator.validate(make_request(at(10), at(9)))

    assert isinstance(result.error, InvalidRange)
    assert result.error.http_status == 400


def test_exactly_fifteen_minutes_passes(validator):
    assert validator.validate(make_request(at(9), at(9, 15))).ok


def test_fourteen_minutes_fifty_nine_seconds_is_too_short(validator):
    result = validator.validate(make_request(at(9), at(9, 14, second=59)))

    assert isinstance(result.error, TooShort)
    assert result.error.message == "Booking duration must be at least 15 minutes"
    assert result.error.duration_minutes == pytest.approx(14 + 59 / 60)


@pytest.mark.parametrize("requested_by", ["", "   ", "\t\n", None])
def test_blank_requester_is_rejected(validator, requested_by):
    result = validator.validate(make_request(at(9), at(10), requested_by=requested_by))

    assert isinstance(result.error, MissingRequester)
    assert result.error.message == "Requested by field is required"


def test_unknown_resource_is_rejected(validator):
    result = validator.validate(make_request(at(9), at(10), resource_id="boardroom-z"))

    assert isinstance(result.error, UnknownResource)
    assert result.error.resource_id == "boardroom-z"


@pytest.mark.parametrize(
    "request_kwargs, expected",
    [
        # every rule broken: range comes first
        (dict(start=at(10), end=at(9), resource_id="nope", requested_by=" "), InvalidRange),
        # too short beats requester and resource
        (dict(start=at(9), end=at(9, 5), resource_id="nope", requested_by=" "), TooShort),
        # requester beats resource
        (dict(start=at(9), end=at(10), resource_id="nope", requested_by=" "), MissingRequester),
    ],
)
def test_rules_short_circuit_in_order(validator, request_kwargs, expected):
    result = validator.validate(make_request(**request_kwargs))

    assert type(result.error) is expected
    assert isinstance(result.error, VALIDATION_ERRORS)


def test_minimum_duration_is_configurable():
    validator = BookingValidator(sample_lookup(), min_duration_minutes=30)

    result = validator.validate(make_request(at(9), at(9) + timedelta(minutes=29)))

    assert isinstance(result.error, TooShort)
    assert result.error.message == "Booking duration must be at least 30 minutes"
    assert validator.validate(make_request(at(9), at(9, 30))).ok
