"""Serializers for reviews.

Provide both read and write serializers for review records. Validates
that star values fall within the expected range. The reviewing user is
inferred from the request in the view.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.spots.serializers import SpotBriefSerializer
from apps.users.serializers import UserRecordSerializer

from .models import MAX_STARS, MIN_STARS

REVIEW_REQUIRED = 'Review text is required'
STARS_INVALID = 'Stars must be an integer from 1 to 5'


class ReviewPayloadSerializer(serializers.Serializer):
    """Serializer for creating or editing a review."""

    review = serializers.CharField(
        error_messages={key: REVIEW_REQUIRED for key in ('required', 'null', 'blank', 'invalid')},
    )
    stars = serializers.IntegerField(
        min_value=MIN_STARS,
        max_value=MAX_STARS,
        error_messages={
            key: STARS_INVALID
            for key in ('required', 'null', 'invalid', 'min_value', 'max_value', 'max_string_length')
        },
    )


class ReviewSerializer(serializers.Serializer):
    """Serializer for reading reviews."""

    id = serializers.IntegerField()
    userId = serializers.IntegerField(source='user_id')  # noqa: N815
    spotId = serializers.IntegerField(source='spot_id')  # noqa: N815
    review = serializers.CharField()
    stars = serializers.IntegerField()
    createdAt = serializers.DateTimeField(source='created_at')  # noqa: N815
    updatedAt = serializers.DateTimeField(source='updated_at')  # noqa: N815


class SpotReviewSerializer(ReviewSerializer):
    """Review listed under a spot, with its author."""

    User = UserRecordSerializer(source='user', allow_null=True)  # noqa: N815


class UserReviewSerializer(SpotReviewSerializer):
    """Review of the current user, with the reviewed spot."""

    Spot = SpotBriefSerializer(source='spot', allow_null=True)  # noqa: N815
