"""
Aggregation Engine

Derived read-side fields of a spot:
- average rating: mean of the stars of its reviews, None without reviews
- preview image: url of its lowest-id image flagged as preview, else None

Single-spot and batch callers share the same code path so both always
agree for the same data. A batch costs one store fetch per relation no
matter how many spots it covers.
"""

from collections import defaultdict
from dataclasses import asdict
from typing import Dict, Iterable, List, Optional, Sequence

from shared.application.store import EntityStore
from shared.domain.records import SpotImageRecord, SpotRecord, SpotSummary


def average_rating(stars: Iterable[int]) -> Optional[float]:
    """Arithmetic mean of ``stars``; None when there are none."""
    values = list(stars)
    if not values:
        return None
    return sum(values) / len(values)


def preview_image(images: Iterable[SpotImageRecord]) -> Optional[str]:
    """
    Url of the preview image among ``images``.

    Several images may carry the preview flag; the one with the lowest id
    wins so the answer is stable.
    """
    previews = [image for image in images if image.preview]
    if not previews:
        return None
    return min(previews, key=lambda image: image.id).url


def ratings_by_spot(store: EntityStore, spot_ids: Iterable[int]) -> Dict[int, Optional[float]]:
    spot_ids = list(spot_ids)
    stars: Dict[int, List[int]] = defaultdict(list)
    for review in store.reviews_for_spots(spot_ids):
        stars[review.spot_id].append(review.stars)
    return {spot_id: average_rating(stars.get(spot_id, ())) for spot_id in spot_ids}


def preview_images_by_spot(store: EntityStore, spot_ids: Iterable[int]) -> Dict[int, Optional[str]]:
    spot_ids = list(spot_ids)
    images: Dict[int, List[SpotImageRecord]] = defaultdict(list)
    for image in store.images_for_spots(spot_ids, preview_only=True):
        images[image.spot_id].append(image)
    return {spot_id: preview_image(images.get(spot_id, ())) for spot_id in spot_ids}


def summarize_spots(store: EntityStore, spots: Sequence[SpotRecord]) -> List[SpotSummary]:
    """Attach average rating and preview image to each spot, in order."""
    spot_ids = [spot.id for spot in spots]
    ratings = ratings_by_spot(store, spot_ids)
    previews = preview_images_by_spot(store, spot_ids)
    return [
        SpotSummary(
            **spot_fields(spot),
            avg_rating=ratings[spot.id],
            preview_image=previews[spot.id],
        )
        for spot in spots
    ]


def spot_fields(spot: SpotRecord) -> dict:
    return {name: value for name, value in asdict(spot).items() if name in SpotRecord.__dataclass_fields__}
