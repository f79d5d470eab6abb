"""Use cases for spot reviews.

A user reviews a spot at most once. Only the author may edit or delete a
review.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import List, Mapping, Optional
import logging

from apps.spots.domain.aggregation import summarize_spots
from apps.spots.services import get_spot_or_404
from shared.api.validation import validate_payload
from shared.application.store import EntityStore
from shared.domain.authorization import ensure_can_modify
from shared.domain.exceptions import Forbidden, NotFound
from shared.domain.records import ReviewDetail, ReviewRecord

from .serializers import ReviewPayloadSerializer

logger = logging.getLogger(__name__)

REVIEW = 'Review'
DUPLICATE_REVIEW = 'User already has a review for this spot'


def _get_review_or_404(store: EntityStore, spot_id: int, review_id: int) -> ReviewRecord:
    review = store.get_review(review_id)
    if review is None or review.spot_id != spot_id:
        raise NotFound(REVIEW)
    return review


def list_spot_reviews(store: EntityStore, spot_id: int) -> List[ReviewDetail]:
    spot = get_spot_or_404(store, spot_id)
    reviews = store.reviews_for_spots([spot.id])
    authors = store.get_users({review.user_id for review in reviews})
    return [ReviewDetail(**asdict(review), user=authors.get(review.user_id)) for review in reviews]


def list_user_reviews(store: EntityStore, user_id: int) -> List[ReviewDetail]:
    reviews = store.reviews_by_user(user_id)
    spots = store.get_spots({review.spot_id for review in reviews})
    summaries = {summary.id: summary for summary in summarize_spots(store, list(spots.values()))}
    author = store.get_user(user_id)
    return [
        ReviewDetail(**asdict(review), user=author, spot=summaries.get(review.spot_id))
        for review in reviews
    ]


def create_review(store: EntityStore, spot_id: int, user_id: int, data: Mapping) -> ReviewRecord:
    with store.atomic():
        spot = get_spot_or_404(store, spot_id, lock=True)
        payload = validate_payload(ReviewPayloadSerializer, data)
        if store.find_review(spot.id, user_id) is not None:
            raise Forbidden(DUPLICATE_REVIEW)
        review = store.create_review(spot.id, user_id, payload['review'], payload['stars'])

    logger.info("Review %s left by user %s for spot %s", review.id, user_id, spot.id)
    return review


def update_review(
    store: EntityStore,
    spot_id: int,
    review_id: int,
    requester_id: Optional[int],
    data: Mapping,
) -> ReviewRecord:
    review = _get_review_or_404(store, spot_id, review_id)
    ensure_can_modify(review, requester_id, resource_name=REVIEW)
    payload = validate_payload(ReviewPayloadSerializer, data)
    return store.update_review(review.id, payload)


def delete_review(store: EntityStore, spot_id: int, review_id: int, requester_id: Optional[int]) -> None:
    review = _get_review_or_404(store, spot_id, review_id)
    ensure_can_modify(review, requester_id, resource_name=REVIEW)
    store.delete_review(review.id)
    logger.info("Review %s deleted by user %s", review.id, requester_id)
