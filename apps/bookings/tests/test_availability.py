"""Unit tests for the availability engine."""

from __future__ import annotations

from datetime import date

import pytest

from apps.bookings.domain.availability import (
    END_DATE_CONFLICT,
    START_DATE_CONFLICT,
    ConflictReason,
    check_availability,
)
from shared.domain.records import BookingRecord
from shared.domain.value_objects import DateRange


def booking(booking_id: int, start: date, end: date, spot_id: int = 1) -> BookingRecord:
    return BookingRecord(id=booking_id, spot_id=spot_id, user_id=7, start_date=start, end_date=end)


EXISTING = [booking(1, date(2024, 6, 1), date(2024, 6, 5))]


def test_free_range_is_accepted() -> None:
    decision = check_availability(DateRange(date(2024, 6, 10), date(2024, 6, 12)), EXISTING)

    assert decision.accepted
    assert decision.errors == {}


@pytest.mark.parametrize(
    "start, end",
    [
        (date(2024, 6, 5), date(2024, 6, 7)),
        (date(2024, 5, 28), date(2024, 6, 1)),
    ],
)
def test_touching_endpoints_do_not_conflict(start: date, end: date) -> None:
    assert check_availability(DateRange(start, end), EXISTING).accepted


@pytest.mark.parametrize(
    "start, end, reason",
    [
        (date(2024, 6, 3), date(2024, 6, 8), ConflictReason.START_DATE),
        (date(2024, 5, 28), date(2024, 6, 2), ConflictReason.END_DATE),
        (date(2024, 6, 2), date(2024, 6, 4), ConflictReason.BOTH),
        (date(2024, 5, 30), date(2024, 6, 10), ConflictReason.BOTH),
        (date(2024, 6, 1), date(2024, 6, 5), ConflictReason.BOTH),
    ],
)
def test_overlap_reason(start: date, end: date, reason: ConflictReason) -> None:
    decision = check_availability(DateRange(start, end), EXISTING)

    assert not decision.accepted
    assert decision.reason is reason
    assert decision.conflicting_booking_id == 1


def test_errors_follow_reason() -> None:
    decision = check_availability(DateRange(date(2024, 5, 30), date(2024, 6, 10)), EXISTING)

    assert decision.errors == {"startDate": START_DATE_CONFLICT, "endDate": END_DATE_CONFLICT}


def test_conflicts_on_both_sides_are_combined() -> None:
    existing = [
        booking(1, date(2024, 6, 1), date(2024, 6, 5)),
        booking(2, date(2024, 6, 8), date(2024, 6, 12)),
    ]

    decision = check_availability(DateRange(date(2024, 6, 4), date(2024, 6, 9)), existing)

    assert decision.reason is ConflictReason.BOTH
    assert decision.conflicting_booking_id == 1


def test_excluded_booking_is_ignored() -> None:
    candidate = DateRange(date(2024, 6, 2), date(2024, 6, 6))

    assert not check_availability(candidate, EXISTING).accepted
    assert check_availability(candidate, EXISTING, exclude_booking_id=1).accepted


def test_no_existing_bookings() -> None:
    assert check_availability(DateRange(date(2024, 6, 1), date(2024, 6, 2)), []).accepted


def test_date_range_rejects_inverted_or_empty_ranges() -> None:
    with pytest.raises(ValueError):
        DateRange(date(2024, 6, 5), date(2024, 6, 5))
    with pytest.raises(ValueError):
        DateRange(date(2024, 6, 5), date(2024, 6, 1))


def test_date_range_counts_nights() -> None:
    assert len(DateRange(date(2024, 6, 1), date(2024, 6, 5))) == 4
