"""Use cases for spots and spot images.

Every function receives the entity store explicitly. Existence is always
confirmed before ownership, and request bodies are validated before any
write.
"""

from __future__ import annotations

from typing import List, Mapping, Optional
import logging

from shared.api.validation import validate_payload
from shared.application.store import EntityStore
from shared.domain.authorization import ensure_can_modify
from shared.domain.exceptions import NotFound
from shared.domain.records import SpotDetail, SpotImageRecord, SpotRecord, SpotSummary

from .domain.aggregation import average_rating, spot_fields, summarize_spots
from .filters import ListingQuery
from .serializers import SpotImagePayloadSerializer, SpotPayloadSerializer

logger = logging.getLogger(__name__)

SPOT = "Spot"


def get_spot_or_404(store: EntityStore, spot_id: int, *, lock: bool = False) -> SpotRecord:
    spot = store.get_spot(spot_id, lock=lock)
    if spot is None:
        raise NotFound(SPOT)
    return spot


def list_spots(store: EntityStore, query: ListingQuery) -> List[SpotSummary]:
    """One page of spots with their average rating and preview image."""
    return summarize_spots(store, store.filter_spots(query))


def list_owned_spots(store: EntityStore, owner_id: int) -> List[SpotSummary]:
    return summarize_spots(store, store.spots_owned_by(owner_id))


def get_spot_detail(store: EntityStore, spot_id: int) -> SpotDetail:
    spot = get_spot_or_404(store, spot_id)
    stars = [review.stars for review in store.reviews_for_spots([spot.id])]
    return SpotDetail(
        **spot_fields(spot),
        num_reviews=len(stars),
        avg_star_rating=average_rating(stars),
        images=tuple(store.images_for_spots([spot.id])),
        owner=store.get_user(spot.owner_id),
    )


def create_spot(store: EntityStore, owner_id: int, data: Mapping) -> SpotRecord:
    fields = validate_payload(SpotPayloadSerializer, data)
    spot = store.create_spot(owner_id, fields)
    logger.info("Spot %s created by user %s", spot.id, owner_id)
    return spot


def update_spot(store: EntityStore, spot_id: int, requester_id: Optional[int], data: Mapping) -> SpotRecord:
    """Replace every editable field of a spot owned by ``requester_id``."""
    spot = get_spot_or_404(store, spot_id)
    ensure_can_modify(spot, requester_id, resource_name=SPOT)
    fields = validate_payload(SpotPayloadSerializer, data)
    return store.update_spot(spot.id, fields)


def delete_spot(store: EntityStore, spot_id: int, requester_id: Optional[int]) -> None:
    """
    Delete a spot with its bookings, reviews and images.

    A spot owned by someone else is reported as missing.
    """
    spot = get_spot_or_404(store, spot_id)
    ensure_can_modify(spot, requester_id, resource_name=SPOT, conceal=True)
    store.delete_spot_cascade(spot.id)
    logger.info("Spot %s deleted by user %s", spot.id, requester_id)


def add_spot_image(store: EntityStore, spot_id: int, requester_id: Optional[int], data: Mapping) -> SpotImageRecord:
    spot = get_spot_or_404(store, spot_id)
    ensure_can_modify(spot, requester_id, resource_name=SPOT)
    payload = validate_payload(SpotImagePayloadSerializer, data)
    return store.create_spot_image(spot.id, payload["url"], payload["preview"])
