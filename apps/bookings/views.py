"""API views for the booking domain."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.api.views import StoreAPIView, parse_id, requester_id

from . import services
from .serializers import (
    BookingPayloadSerializer,
    BookingSerializer,
    GuestBookingSerializer,
    HostBookingSerializer,
    PublicBookingSerializer,
)

SPOT_ID = "spotId"
BOOKING_ID = "bookingId"


class SpotBookingsView(StoreAPIView):
    """Bookings of one spot; anyone signed in may book it."""

    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(responses=HostBookingSerializer(many=True))
    def get(self, request, spot_id):  # type: ignore
        bookings, is_owner = services.list_spot_bookings(
            self.get_store(), parse_id(spot_id, SPOT_ID), requester_id(request)
        )
        serializer_class = HostBookingSerializer if is_owner else PublicBookingSerializer
        return Response({"Bookings": serializer_class(bookings, many=True).data})

    @extend_schema(request=BookingPayloadSerializer, responses={201: BookingSerializer})
    def post(self, request, spot_id):  # type: ignore
        booking = services.create_booking(
            self.get_store(), parse_id(spot_id, SPOT_ID), request.user.id, request.data
        )
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class SpotBookingDetailView(StoreAPIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(request=BookingPayloadSerializer, responses=BookingSerializer)
    def put(self, request, spot_id, booking_id):  # type: ignore
        booking = services.update_booking(
            self.get_store(),
            parse_id(spot_id, SPOT_ID),
            parse_id(booking_id, BOOKING_ID),
            requester_id(request),
            request.data,
        )
        return Response(BookingSerializer(booking).data)

    def delete(self, request, spot_id, booking_id):  # type: ignore
        services.delete_booking(
            self.get_store(),
            parse_id(spot_id, SPOT_ID),
            parse_id(booking_id, BOOKING_ID),
            requester_id(request),
        )
        return Response({"message": "Successfully deleted"})


class CurrentUserBookingsView(StoreAPIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(responses=GuestBookingSerializer(many=True))
    def get(self, request):  # type: ignore
        bookings = services.list_user_bookings(self.get_store(), request.user.id)
        return Response({"Bookings": GuestBookingSerializer(bookings, many=True).data})
