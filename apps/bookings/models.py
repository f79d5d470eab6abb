"""Booking domain models for SpotBook."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Booking(models.Model):
    """Reservation of a spot for the nights from ``start_date`` up to ``end_date``."""

    spot = models.ForeignKey(
        "spots.Spot",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    start_date = models.DateField()
    end_date = models.DateField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("booking")
        verbose_name_plural = _("bookings")
        ordering = ["start_date", "id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gt=models.F("start_date")),
                name="booking_valid_dates",
            ),
        ]
        indexes = [
            models.Index(fields=["spot", "start_date", "end_date"], name="booking_spot_dates_idx"),
            models.Index(fields=["user"], name="booking_user_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} for spot {self.spot_id} ({self.start_date} - {self.end_date})"
