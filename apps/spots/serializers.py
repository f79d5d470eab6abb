"""Serializers for the spot domain.

Payload serializers validate request bodies; the remaining serializers
render spot records in the camelCase shape of the public API.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
import math

from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserRecordSerializer
from shared.domain.value_objects import LATITUDE_BOUNDS, LONGITUDE_BOUNDS

MAX_NAME_LENGTH = 50
MAX_PRICE = Decimal("99999999.99")

COORDINATE_PLACES = Decimal("0.000001")
RATING_PLACES = Decimal("0.1")
PRICE_PLACES = Decimal("0.01")


def _messages(message: str, *keys: str) -> dict[str, str]:
    return {key: message for key in ("required", "null", "invalid", "blank", *keys)}


def _required_text(message: str, **kwargs) -> serializers.CharField:
    return serializers.CharField(error_messages=_messages(message, "max_length"), **kwargs)


def _to_decimal(value: float, places: Decimal, message: str) -> Decimal:
    if not math.isfinite(value):
        raise serializers.ValidationError(message)
    return Decimal(str(value)).quantize(places)


class SpotPayloadSerializer(serializers.Serializer):
    """Full set of editable spot fields, validated all at once."""

    address = _required_text("Street address is required", max_length=255)
    city = _required_text("City is required", max_length=100)
    state = _required_text("State is required", max_length=100)
    country = _required_text("Country is required", max_length=100)
    lat = serializers.FloatField(
        min_value=float(LATITUDE_BOUNDS[0]),
        max_value=float(LATITUDE_BOUNDS[1]),
        error_messages=_messages("Latitude must be within -90 and 90", "min_value", "max_value", "max_string_length"),
    )
    lng = serializers.FloatField(
        min_value=float(LONGITUDE_BOUNDS[0]),
        max_value=float(LONGITUDE_BOUNDS[1]),
        error_messages=_messages("Longitude must be within -180 and 180", "min_value", "max_value", "max_string_length"),
    )
    name = _required_text("Name must be less than 50 characters", max_length=MAX_NAME_LENGTH)
    description = _required_text("Description is required")
    price = serializers.FloatField(
        max_value=float(MAX_PRICE),
        error_messages=_messages("Price per day must be a positive number", "max_value", "max_string_length"),
    )

    def validate_lat(self, value: float) -> Decimal:
        return _to_decimal(value, COORDINATE_PLACES, "Latitude must be within -90 and 90")

    def validate_lng(self, value: float) -> Decimal:
        return _to_decimal(value, COORDINATE_PLACES, "Longitude must be within -180 and 180")

    def validate_price(self, value: float) -> Decimal:
        price = _to_decimal(value, PRICE_PLACES, "Price per day must be a positive number")
        if price <= 0:
            raise serializers.ValidationError("Price per day must be a positive number")
        return price


class SpotImagePayloadSerializer(serializers.Serializer):
    url = serializers.CharField(max_length=2048, error_messages=_messages("Url is required", "max_length"))
    preview = serializers.BooleanField(
        default=False,
        error_messages={"invalid": "Preview must be true or false"},
    )


class SpotImageSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    url = serializers.CharField()
    preview = serializers.BooleanField()


class SpotSerializer(serializers.Serializer):
    """A spot as returned after create and update."""

    id = serializers.IntegerField()
    ownerId = serializers.IntegerField(source="owner_id")  # noqa: N815
    address = serializers.CharField()
    city = serializers.CharField()
    state = serializers.CharField()
    country = serializers.CharField()
    lat = serializers.FloatField()
    lng = serializers.FloatField()
    name = serializers.CharField()
    description = serializers.CharField()
    price = serializers.FloatField()
    createdAt = serializers.DateTimeField(source="created_at")  # noqa: N815
    updatedAt = serializers.DateTimeField(source="updated_at")  # noqa: N815


class SpotSummarySerializer(SpotSerializer):
    """List entry with the unrounded average rating and preview image url."""

    avgRating = serializers.FloatField(source="avg_rating", allow_null=True)  # noqa: N815
    previewImage = serializers.CharField(source="preview_image", allow_null=True)  # noqa: N815


class SpotDetailSerializer(SpotSerializer):
    """Detail view: review count, one-decimal rating, images and owner."""

    numReviews = serializers.IntegerField(source="num_reviews")  # noqa: N815
    avgStarRating = serializers.SerializerMethodField()  # noqa: N815
    SpotImages = SpotImageSerializer(source="images", many=True)  # noqa: N815
    Owner = UserRecordSerializer(source="owner", allow_null=True)  # noqa: N815

    def get_avgStarRating(self, obj) -> str | None:  # noqa: N802
        if obj.avg_star_rating is None:
            return None
        rating = Decimal(str(obj.avg_star_rating)).quantize(RATING_PLACES, rounding=ROUND_HALF_UP)
        return str(rating)


class SpotBriefSerializer(serializers.Serializer):
    """Spot block nested in bookings and reviews of the current user."""

    id = serializers.IntegerField()
    ownerId = serializers.IntegerField(source="owner_id")  # noqa: N815
    address = serializers.CharField()
    city = serializers.CharField()
    state = serializers.CharField()
    country = serializers.CharField()
    lat = serializers.FloatField()
    lng = serializers.FloatField()
    name = serializers.CharField()
    price = serializers.FloatField()
    previewImage = serializers.CharField(source="preview_image", allow_null=True)  # noqa: N815
