"""Domain services for booking workflows."""

from __future__ import annotations

from dataclasses import asdict
from typing import List, Mapping, Optional, Tuple
import logging

from apps.spots.domain.aggregation import summarize_spots
from apps.spots.services import get_spot_or_404
from shared.api.validation import validate_payload
from shared.application.store import EntityStore
from shared.domain.authorization import can_modify, ensure_can_modify
from shared.domain.exceptions import BookingConflict, NotFound
from shared.domain.records import BookingDetail, BookingRecord
from shared.domain.value_objects import DateRange

from .domain.availability import check_availability
from .serializers import BookingPayloadSerializer

logger = logging.getLogger(__name__)

BOOKING = "Booking"


def _requested_dates(data: Mapping) -> DateRange:
    payload = validate_payload(BookingPayloadSerializer, data)
    return DateRange(payload["startDate"], payload["endDate"])


def _reserve(
    store: EntityStore,
    spot_id: int,
    dates: DateRange,
    *,
    exclude_booking_id: Optional[int] = None,
) -> None:
    """Raise BookingConflict unless ``dates`` are free; caller holds the spot lock."""
    decision = check_availability(
        dates,
        store.bookings_for_spot(spot_id),
        exclude_booking_id=exclude_booking_id,
    )
    if not decision.accepted:
        logger.info(
            "Rejected dates %s for spot %s: %s with booking %s",
            dates, spot_id, decision.reason.value, decision.conflicting_booking_id,
        )
        raise BookingConflict(decision.errors)


def _get_booking_or_404(store: EntityStore, spot_id: int, booking_id: int) -> BookingRecord:
    booking = store.get_booking(booking_id)
    if booking is None or booking.spot_id != spot_id:
        raise NotFound(BOOKING)
    return booking


def list_spot_bookings(
    store: EntityStore, spot_id: int, requester_id: Optional[int]
) -> Tuple[List[BookingDetail], bool]:
    """
    Bookings of a spot and whether the requester owns it.

    Only the owner gets the guests attached; everyone else should be shown
    the booked dates alone.
    """
    spot = get_spot_or_404(store, spot_id)
    bookings = store.bookings_for_spot(spot.id)
    if not can_modify(spot, requester_id):
        return [BookingDetail(**asdict(booking)) for booking in bookings], False

    guests = store.get_users({booking.user_id for booking in bookings})
    details = [
        BookingDetail(**asdict(booking), user=guests.get(booking.user_id))
        for booking in bookings
    ]
    return details, True


def list_user_bookings(store: EntityStore, user_id: int) -> List[BookingDetail]:
    """Bookings made by ``user_id``, each with a summary of the booked spot."""
    bookings = store.bookings_by_user(user_id)
    spots = store.get_spots({booking.spot_id for booking in bookings})
    summaries = {summary.id: summary for summary in summarize_spots(store, list(spots.values()))}
    return [
        BookingDetail(**asdict(booking), spot=summaries.get(booking.spot_id))
        for booking in bookings
    ]


def create_booking(store: EntityStore, spot_id: int, user_id: int, data: Mapping) -> BookingRecord:
    """
    Book ``spot_id`` for ``user_id``.

    The spot row stays locked from the conflict scan until the insert
    commits, so two overlapping requests for the same spot cannot both
    succeed.
    """
    with store.atomic():
        spot = get_spot_or_404(store, spot_id, lock=True)
        dates = _requested_dates(data)
        _reserve(store, spot.id, dates)
        booking = store.create_booking(spot.id, user_id, dates)

    logger.info("Booking %s created for spot %s by user %s (%s)", booking.id, spot.id, user_id, dates)
    return booking


def update_booking(
    store: EntityStore,
    spot_id: int,
    booking_id: int,
    requester_id: Optional[int],
    data: Mapping,
) -> BookingRecord:
    """Move a booking to new dates; it never conflicts with its own old dates."""
    booking = _get_booking_or_404(store, spot_id, booking_id)
    ensure_can_modify(booking, requester_id, resource_name=BOOKING)
    dates = _requested_dates(data)

    with store.atomic():
        get_spot_or_404(store, booking.spot_id, lock=True)
        # The booking may have been cancelled while waiting for the lock.
        booking = _get_booking_or_404(store, spot_id, booking_id)
        _reserve(store, booking.spot_id, dates, exclude_booking_id=booking.id)
        updated = store.update_booking(booking.id, dates)

    logger.info("Booking %s moved to %s", booking.id, dates)
    return updated


def delete_booking(store: EntityStore, spot_id: int, booking_id: int, requester_id: Optional[int]) -> None:
    booking = _get_booking_or_404(store, spot_id, booking_id)
    ensure_can_modify(booking, requester_id, resource_name=BOOKING)
    with store.atomic():
        get_spot_or_404(store, booking.spot_id, lock=True)
        store.delete_booking(booking.id)
    logger.info("Booking %s deleted by user %s", booking.id, requester_id)
