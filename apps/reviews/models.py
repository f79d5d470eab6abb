"""Models for the review domain.

Defines the ``Review`` entity: a star rating with a short text left by a
user for a spot. One user can leave at most one review per spot. Ratings
are averaged on read; nothing derived is stored.
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

MIN_STARS = 1
MAX_STARS = 5


class Review(models.Model):
    """Represents a review left by a user for a spot."""

    spot = models.ForeignKey(
        'spots.Spot', on_delete=models.CASCADE, related_name='reviews'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='reviews'
    )
    review = models.TextField()
    stars = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(MIN_STARS), MaxValueValidator(MAX_STARS)],
        help_text=_('Rating from 1 to 5'),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(fields=['user', 'spot'], name='review_unique_user_spot'),
            models.CheckConstraint(
                condition=models.Q(stars__gte=MIN_STARS, stars__lte=MAX_STARS),
                name='review_stars_in_range',
            ),
        ]
        indexes = [
            models.Index(fields=['spot'], name='review_spot_idx'),
            models.Index(fields=['user'], name='review_user_idx'),
        ]

    def __str__(self) -> str:
        return f"Review by {self.user_id} for spot {self.spot_id} (Stars: {self.stars})"
