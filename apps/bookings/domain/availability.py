"""
Availability Engine

Decides whether a date range can be booked on a spot given the spot's
existing bookings. Ranges are half-open: a booking ending on the day
another starts does not conflict with it.

The engine is pure. Callers load the bookings, ask for a decision and
write only after an accepted decision, all inside one unit of work.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional

from shared.domain.records import BookingRecord
from shared.domain.value_objects import DateRange

START_DATE_CONFLICT = "Start date conflicts with an existing booking"
END_DATE_CONFLICT = "End date conflicts with an existing booking"


class ConflictReason(Enum):
    """Which boundary of the requested range collides with a booking"""
    START_DATE = 'start_date'
    END_DATE = 'end_date'
    BOTH = 'both'


@dataclass(frozen=True)
class AvailabilityDecision:
    accepted: bool
    reason: Optional[ConflictReason] = None
    conflicting_booking_id: Optional[int] = None

    @property
    def errors(self) -> Dict[str, str]:
        """Field-level messages keyed by request field name"""
        errors = {}
        if self.reason in (ConflictReason.START_DATE, ConflictReason.BOTH):
            errors['startDate'] = START_DATE_CONFLICT
        if self.reason in (ConflictReason.END_DATE, ConflictReason.BOTH):
            errors['endDate'] = END_DATE_CONFLICT
        return errors


ACCEPTED = AvailabilityDecision(accepted=True)


def check_availability(
    candidate: DateRange,
    existing: Iterable[BookingRecord],
    *,
    exclude_booking_id: Optional[int] = None,
) -> AvailabilityDecision:
    """
    Check ``candidate`` against ``existing`` bookings of the same spot.

    ``exclude_booking_id`` leaves the booking being rescheduled out of the
    scan. A candidate that swallows an existing booking whole has neither
    endpoint inside it and is reported as a conflict on both dates.
    """
    start_conflict = False
    end_conflict = False
    first_conflict = None

    for booking in existing:
        if exclude_booking_id is not None and booking.id == exclude_booking_id:
            continue
        booked = booking.dates
        if not candidate.overlaps_with(booked):
            continue

        if first_conflict is None:
            first_conflict = booking.id
        starts_inside = booked.contains(candidate.start_date)
        ends_inside = booked.ends_within(candidate.end_date)
        if not starts_inside and not ends_inside:
            starts_inside = ends_inside = True
        start_conflict = start_conflict or starts_inside
        end_conflict = end_conflict or ends_inside

    if first_conflict is None:
        return ACCEPTED

    if start_conflict and end_conflict:
        reason = ConflictReason.BOTH
    elif start_conflict:
        reason = ConflictReason.START_DATE
    else:
        reason = ConflictReason.END_DATE
    return AvailabilityDecision(accepted=False, reason=reason, conflicting_booking_id=first_conflict)
