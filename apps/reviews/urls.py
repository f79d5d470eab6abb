"""URL routing for reviews."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import CurrentUserReviewsView, SpotReviewDetailView, SpotReviewsView

urlpatterns = [
    path('reviews/current', CurrentUserReviewsView.as_view(), name='review-current'),
    path('spots/<str:spot_id>/reviews', SpotReviewsView.as_view(), name='spot-reviews'),
    path(
        'spots/<str:spot_id>/reviews/<str:review_id>',
        SpotReviewDetailView.as_view(),
        name='spot-review-detail',
    ),
]
