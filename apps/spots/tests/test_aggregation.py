"""Unit tests for the rating and preview image aggregation."""

from __future__ import annotations

from decimal import Decimal

from apps.spots.domain.aggregation import (
    average_rating,
    preview_image,
    preview_images_by_spot,
    ratings_by_spot,
    summarize_spots,
)
from shared.domain.records import ReviewRecord, SpotImageRecord, SpotRecord


class RecordingStore:
    """Serves reviews and images from memory and counts fetches."""

    def __init__(self, reviews=(), images=()):
        self.reviews = list(reviews)
        self.images = list(images)
        self.fetches = 0

    def reviews_for_spots(self, spot_ids):
        self.fetches += 1
        spot_ids = set(spot_ids)
        return [review for review in self.reviews if review.spot_id in spot_ids]

    def images_for_spots(self, spot_ids, *, preview_only=False):
        self.fetches += 1
        spot_ids = set(spot_ids)
        return [
            image for image in self.images
            if image.spot_id in spot_ids and (image.preview or not preview_only)
        ]


def review(review_id: int, spot_id: int, stars: int) -> ReviewRecord:
    return ReviewRecord(id=review_id, spot_id=spot_id, user_id=review_id, review="text", stars=stars)


def image(image_id: int, spot_id: int, preview: bool) -> SpotImageRecord:
    return SpotImageRecord(id=image_id, spot_id=spot_id, url=f"https://img.example/{image_id}.png", preview=preview)


def spot(spot_id: int) -> SpotRecord:
    return SpotRecord(
        id=spot_id,
        owner_id=1,
        address="1 Main St",
        city="Springfield",
        state="Oregon",
        country="USA",
        lat=Decimal("44.046236"),
        lng=Decimal("-123.022029"),
        name=f"Spot {spot_id}",
        description="Cozy",
        price=Decimal("80.00"),
    )


def test_average_rating() -> None:
    assert average_rating([]) is None
    assert average_rating([4]) == 4.0
    assert average_rating([5, 4, 4]) == 13 / 3


def test_preview_image_prefers_lowest_id() -> None:
    images = [image(9, 1, True), image(3, 1, False), image(5, 1, True)]

    assert preview_image(images) == "https://img.example/5.png"
    assert preview_image([image(3, 1, False)]) is None
    assert preview_image([]) is None


def test_batch_and_single_spot_agree() -> None:
    store = RecordingStore(
        reviews=[review(1, 1, 5), review(2, 1, 2), review(3, 2, 4)],
        images=[image(10, 1, True), image(11, 2, False), image(12, 1, True)],
    )

    ratings = ratings_by_spot(store, [1, 2, 3])
    previews = preview_images_by_spot(store, [1, 2, 3])

    assert ratings == {1: 3.5, 2: 4.0, 3: None}
    assert previews == {1: "https://img.example/10.png", 2: None, 3: None}
    for spot_id in (1, 2, 3):
        assert average_rating(r.stars for r in store.reviews_for_spots([spot_id])) == ratings[spot_id]
        assert preview_image(store.images_for_spots([spot_id])) == previews[spot_id]


def test_summaries_cost_one_fetch_per_relation() -> None:
    store = RecordingStore(
        reviews=[review(1, 1, 5), review(2, 2, 3)],
        images=[image(10, 2, True)],
    )

    summaries = summarize_spots(store, [spot(2), spot(1), spot(3)])

    assert store.fetches == 2
    assert [summary.id for summary in summaries] == [2, 1, 3]
    assert [summary.avg_rating for summary in summaries] == [3.0, 5.0, None]
    assert [summary.preview_image for summary in summaries] == ["https://img.example/10.png", None, None]
    assert summaries[0].name == "Spot 2"
