"""Listing query for the public spot list.

Turns the optional ``page``, ``size`` and coordinate/price range query
parameters into a validated ``ListingQuery``. Every invalid parameter is
reported under its own name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping

import django_filters  # type: ignore
from rest_framework import serializers  # type: ignore

from shared.api.validation import first_messages
from shared.domain.exceptions import BadRequest
from shared.domain.value_objects import LATITUDE_BOUNDS, LONGITUDE_BOUNDS

from .models import Spot

DEFAULT_PAGE = 1
DEFAULT_SIZE = 20
MAX_SIZE = 20


def _range_filter(field_name: str, lookup_expr: str, message: str, *, min_value=None, max_value=None):
    return django_filters.NumberFilter(
        field_name=field_name,
        lookup_expr=lookup_expr,
        min_value=min_value,
        max_value=max_value,
        error_messages={"invalid": message, "min_value": message, "max_value": message},
    )


class SpotFilterSet(django_filters.FilterSet):
    """Coordinate and price bounds; bounds on the same column form a closed interval."""

    minLat = _range_filter(  # noqa: N815
        "lat", "gte", "Minimum latitude is invalid", min_value=LATITUDE_BOUNDS[0], max_value=LATITUDE_BOUNDS[1]
    )
    maxLat = _range_filter(  # noqa: N815
        "lat", "lte", "Maximum latitude is invalid", min_value=LATITUDE_BOUNDS[0], max_value=LATITUDE_BOUNDS[1]
    )
    minLng = _range_filter(  # noqa: N815
        "lng", "gte", "Minimum longitude is invalid", min_value=LONGITUDE_BOUNDS[0], max_value=LONGITUDE_BOUNDS[1]
    )
    maxLng = _range_filter(  # noqa: N815
        "lng", "lte", "Maximum longitude is invalid", min_value=LONGITUDE_BOUNDS[0], max_value=LONGITUDE_BOUNDS[1]
    )
    minPrice = _range_filter(  # noqa: N815
        "price", "gte", "Minimum price must be greater than or equal to 0", min_value=Decimal(0)
    )
    maxPrice = _range_filter(  # noqa: N815
        "price", "lte", "Maximum price must be greater than or equal to 0", min_value=Decimal(0)
    )

    class Meta:
        model = Spot
        fields: list[str] = []


class ListingPageSerializer(serializers.Serializer):
    page = serializers.IntegerField(
        min_value=1,
        default=DEFAULT_PAGE,
        error_messages={
            "invalid": "Page must be greater than or equal to 1",
            "min_value": "Page must be greater than or equal to 1",
            "max_string_length": "Page must be greater than or equal to 1",
        },
    )
    size = serializers.IntegerField(
        min_value=1,
        max_value=MAX_SIZE,
        default=DEFAULT_SIZE,
        error_messages={
            "invalid": "Size must be between 1 and 20",
            "min_value": "Size must be between 1 and 20",
            "max_value": "Size must be between 1 and 20",
            "max_string_length": "Size must be between 1 and 20",
        },
    )


@dataclass(frozen=True)
class ListingQuery:
    """Validated page window plus the range bounds that were supplied."""

    page: int = DEFAULT_PAGE
    size: int = DEFAULT_SIZE
    bounds: Mapping[str, Decimal] = field(default_factory=dict)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "ListingQuery":
        """
        Validate raw query parameters.

        Blank values count as absent. Raises ``BadRequest`` naming every
        offending parameter.
        """
        data = {key: value for key, value in params.items() if value not in ("", None)}
        errors: dict[str, str] = {}

        paging = ListingPageSerializer(data=data)
        if not paging.is_valid():
            errors.update(first_messages(paging.errors))

        filterset = SpotFilterSet(data=data, queryset=Spot.objects.none())
        if not filterset.is_valid():
            errors.update(first_messages(filterset.errors))

        if errors:
            raise BadRequest(errors)

        bounds = {
            name: value
            for name, value in filterset.form.cleaned_data.items()
            if value is not None
        }
        return cls(
            page=paging.validated_data["page"],
            size=paging.validated_data["size"],
            bounds=bounds,
        )


def apply_listing_query(query: ListingQuery, queryset):
    """Filter and slice ``queryset`` according to ``query``."""
    filtered = SpotFilterSet(data=dict(query.bounds), queryset=queryset).qs
    return filtered[query.offset:query.offset + query.size]
