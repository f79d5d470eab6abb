"""
Django ORM adapter for the entity store port.

Model instances are converted to plain records before they leave this
module. Writes go through ``QuerySet.update``/``create``/``delete`` so no
model instance is kept around between calls.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional
import logging

from django.conf import settings  # type: ignore
from django.db import transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.module_loading import import_string  # type: ignore

from apps.bookings.models import Booking
from apps.reviews.models import Review
from apps.spots.filters import ListingQuery, apply_listing_query
from apps.spots.models import Spot, SpotImage
from apps.users.models import User
from shared.application.store import EntityStore
from shared.application.uow import DjangoUnitOfWork
from shared.domain.records import (
    BookingRecord,
    ReviewRecord,
    SpotImageRecord,
    SpotRecord,
    UserRecord,
)
from shared.domain.value_objects import DateRange

logger = logging.getLogger(__name__)

SPOT_FIELDS = (
    "address",
    "city",
    "state",
    "country",
    "lat",
    "lng",
    "name",
    "description",
    "price",
)


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def _user_record(user: User) -> UserRecord:
    return UserRecord(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        username=user.username,
    )


def _spot_record(spot: Spot) -> SpotRecord:
    return SpotRecord(
        id=spot.id,
        owner_id=spot.owner_id,
        address=spot.address,
        city=spot.city,
        state=spot.state,
        country=spot.country,
        lat=spot.lat,
        lng=spot.lng,
        name=spot.name,
        description=spot.description,
        price=spot.price,
        created_at=spot.created_at,
        updated_at=spot.updated_at,
    )


def _image_record(image: SpotImage) -> SpotImageRecord:
    return SpotImageRecord(id=image.id, spot_id=image.spot_id, url=image.url, preview=image.preview)


def _review_record(review: Review) -> ReviewRecord:
    return ReviewRecord(
        id=review.id,
        spot_id=review.spot_id,
        user_id=review.user_id,
        review=review.review,
        stars=review.stars,
        created_at=review.created_at,
        updated_at=review.updated_at,
    )


def _booking_record(booking: Booking) -> BookingRecord:
    return BookingRecord(
        id=booking.id,
        spot_id=booking.spot_id,
        user_id=booking.user_id,
        start_date=booking.start_date,
        end_date=booking.end_date,
        created_at=booking.created_at,
        updated_at=booking.updated_at,
    )


class DjangoEntityStore(EntityStore):
    """Entity store backed by the default Django database."""

    def atomic(self) -> DjangoUnitOfWork:
        return DjangoUnitOfWork()

    # --- users ----------------------------------------------------------
    def get_users(self, user_ids: Iterable[int]) -> Dict[int, UserRecord]:
        return {user.id: _user_record(user) for user in User.objects.filter(id__in=list(user_ids))}

    # --- spots ----------------------------------------------------------
    def get_spot(self, spot_id: int, *, lock: bool = False) -> Optional[SpotRecord]:
        queryset = Spot.objects.filter(pk=spot_id)
        if lock:
            queryset = _lock_queryset_if_possible(queryset)
        spot = queryset.first()
        return _spot_record(spot) if spot else None

    def get_spots(self, spot_ids: Iterable[int]) -> Dict[int, SpotRecord]:
        return {spot.id: _spot_record(spot) for spot in Spot.objects.filter(id__in=list(spot_ids))}

    def filter_spots(self, query: ListingQuery) -> List[SpotRecord]:
        queryset = apply_listing_query(query, Spot.objects.order_by("id"))
        return [_spot_record(spot) for spot in queryset]

    def spots_owned_by(self, owner_id: int) -> List[SpotRecord]:
        return [_spot_record(spot) for spot in Spot.objects.filter(owner_id=owner_id).order_by("id")]

    def create_spot(self, owner_id: int, fields: Mapping) -> SpotRecord:
        spot = Spot.objects.create(owner_id=owner_id, **_spot_values(fields))
        spot.refresh_from_db()
        return _spot_record(spot)

    def update_spot(self, spot_id: int, patch: Mapping) -> SpotRecord:
        Spot.objects.filter(pk=spot_id).update(updated_at=timezone.now(), **_spot_values(patch))
        return _spot_record(Spot.objects.get(pk=spot_id))

    def delete_spot_cascade(self, spot_id: int) -> None:
        with self.atomic():
            bookings, _ = Booking.objects.filter(spot_id=spot_id).delete()
            reviews, _ = Review.objects.filter(spot_id=spot_id).delete()
            images, _ = SpotImage.objects.filter(spot_id=spot_id).delete()
            Spot.objects.filter(pk=spot_id).delete()
        logger.debug(
            "Deleted spot %s with %s bookings, %s reviews and %s images",
            spot_id, bookings, reviews, images,
        )

    # --- spot images ----------------------------------------------------
    def images_for_spots(self, spot_ids: Iterable[int], *, preview_only: bool = False) -> List[SpotImageRecord]:
        queryset = SpotImage.objects.filter(spot_id__in=list(spot_ids))
        if preview_only:
            queryset = queryset.filter(preview=True)
        return [_image_record(image) for image in queryset.order_by("id")]

    def create_spot_image(self, spot_id: int, url: str, preview: bool) -> SpotImageRecord:
        return _image_record(SpotImage.objects.create(spot_id=spot_id, url=url, preview=preview))

    # --- reviews --------------------------------------------------------
    def reviews_for_spots(self, spot_ids: Iterable[int]) -> List[ReviewRecord]:
        queryset = Review.objects.filter(spot_id__in=list(spot_ids)).order_by("id")
        return [_review_record(review) for review in queryset]

    def reviews_by_user(self, user_id: int) -> List[ReviewRecord]:
        return [_review_record(review) for review in Review.objects.filter(user_id=user_id).order_by("id")]

    def get_review(self, review_id: int) -> Optional[ReviewRecord]:
        review = Review.objects.filter(pk=review_id).first()
        return _review_record(review) if review else None

    def find_review(self, spot_id: int, user_id: int) -> Optional[ReviewRecord]:
        review = Review.objects.filter(spot_id=spot_id, user_id=user_id).first()
        return _review_record(review) if review else None

    def create_review(self, spot_id: int, user_id: int, review: str, stars: int) -> ReviewRecord:
        return _review_record(Review.objects.create(spot_id=spot_id, user_id=user_id, review=review, stars=stars))

    def update_review(self, review_id: int, patch: Mapping) -> ReviewRecord:
        values = {name: patch[name] for name in ("review", "stars") if name in patch}
        Review.objects.filter(pk=review_id).update(updated_at=timezone.now(), **values)
        return _review_record(Review.objects.get(pk=review_id))

    def delete_review(self, review_id: int) -> None:
        Review.objects.filter(pk=review_id).delete()

    # --- bookings -------------------------------------------------------
    def bookings_for_spot(self, spot_id: int) -> List[BookingRecord]:
        queryset = Booking.objects.filter(spot_id=spot_id).order_by("start_date", "id")
        return [_booking_record(booking) for booking in queryset]

    def bookings_by_user(self, user_id: int) -> List[BookingRecord]:
        queryset = Booking.objects.filter(user_id=user_id).order_by("start_date", "id")
        return [_booking_record(booking) for booking in queryset]

    def get_booking(self, booking_id: int) -> Optional[BookingRecord]:
        booking = Booking.objects.filter(pk=booking_id).first()
        return _booking_record(booking) if booking else None

    def create_booking(self, spot_id: int, user_id: int, dates: DateRange) -> BookingRecord:
        booking = Booking.objects.create(
            spot_id=spot_id,
            user_id=user_id,
            start_date=dates.start_date,
            end_date=dates.end_date,
        )
        return _booking_record(booking)

    def update_booking(self, booking_id: int, dates: DateRange) -> BookingRecord:
        Booking.objects.filter(pk=booking_id).update(
            start_date=dates.start_date,
            end_date=dates.end_date,
            updated_at=timezone.now(),
        )
        return _booking_record(Booking.objects.get(pk=booking_id))

    def delete_booking(self, booking_id: int) -> None:
        Booking.objects.filter(pk=booking_id).delete()


def _spot_values(fields: Mapping) -> dict:
    return {name: fields[name] for name in SPOT_FIELDS if name in fields}


def get_store() -> EntityStore:
    """Entity store configured by ``settings.ENTITY_STORE``."""
    return import_string(settings.ENTITY_STORE)()
