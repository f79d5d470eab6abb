"""URL routing for bookings."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import CurrentUserBookingsView, SpotBookingDetailView, SpotBookingsView

urlpatterns = [
    path("bookings/current", CurrentUserBookingsView.as_view(), name="booking-current"),
    path("spots/<str:spot_id>/bookings", SpotBookingsView.as_view(), name="spot-bookings"),
    path(
        "spots/<str:spot_id>/bookings/<str:booking_id>",
        SpotBookingDetailView.as_view(),
        name="spot-booking-detail",
    ),
]
