"""Spot domain models for SpotBook.

A spot is a listing with an address, coordinates and a nightly price.
Images hang off the spot; one of them is normally flagged as the preview
shown in list views.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import LATITUDE_BOUNDS, LONGITUDE_BOUNDS


class Spot(models.Model):
    """Listing that guests can book by the night."""

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="spots",
    )
    address = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100)
    country = models.CharField(max_length=100)
    lat = models.DecimalField(
        max_digits=9,
        decimal_places=6,
        validators=[MinValueValidator(LATITUDE_BOUNDS[0]), MaxValueValidator(LATITUDE_BOUNDS[1])],
    )
    lng = models.DecimalField(
        max_digits=9,
        decimal_places=6,
        validators=[MinValueValidator(LONGITUDE_BOUNDS[0]), MaxValueValidator(LONGITUDE_BOUNDS[1])],
    )
    name = models.CharField(max_length=50)
    description = models.TextField()
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
        help_text=_("Price per night."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("spot")
        verbose_name_plural = _("spots")
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="spot_price_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(lat__gte=-90, lat__lte=90, lng__gte=-180, lng__lte=180),
                name="spot_coordinates_in_bounds",
            ),
        ]
        indexes = [
            models.Index(fields=["owner"], name="spot_owner_idx"),
            models.Index(fields=["lat", "lng"], name="spot_lat_lng_idx"),
            models.Index(fields=["price"], name="spot_price_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class SpotImage(models.Model):
    """Image attached to a spot."""

    spot = models.ForeignKey(Spot, on_delete=models.CASCADE, related_name="images")
    url = models.CharField(max_length=2048)
    preview = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("spot image")
        verbose_name_plural = _("spot images")
        ordering = ["id"]
        indexes = [
            models.Index(fields=["spot", "preview"], name="spotimage_spot_preview_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.spot_id}: {self.url}"
