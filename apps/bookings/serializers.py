"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.spots.serializers import SpotBriefSerializer
from apps.users.serializers import UserRecordSerializer

END_BEFORE_START = "endDate cannot be on or before startDate"


def _date_field(name: str) -> serializers.DateField:
    return serializers.DateField(
        error_messages={
            "required": f"{name} is required",
            "null": f"{name} is required",
            "invalid": f"{name} must be a date in YYYY-MM-DD format",
            "datetime": f"{name} must be a date in YYYY-MM-DD format",
        },
    )


class BookingPayloadSerializer(serializers.Serializer):
    """Requested stay; the end date must come after the start date."""

    startDate = _date_field("startDate")  # noqa: N815
    endDate = _date_field("endDate")  # noqa: N815

    def validate(self, attrs):  # type: ignore
        if attrs["endDate"] <= attrs["startDate"]:
            raise serializers.ValidationError({"endDate": END_BEFORE_START})
        return attrs


class BookingSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    spotId = serializers.IntegerField(source="spot_id")  # noqa: N815
    userId = serializers.IntegerField(source="user_id")  # noqa: N815
    startDate = serializers.DateField(source="start_date")  # noqa: N815
    endDate = serializers.DateField(source="end_date")  # noqa: N815
    createdAt = serializers.DateTimeField(source="created_at")  # noqa: N815
    updatedAt = serializers.DateTimeField(source="updated_at")  # noqa: N815


class GuestBookingSerializer(BookingSerializer):
    """Booking of the current user together with the booked spot."""

    Spot = SpotBriefSerializer(source="spot", allow_null=True)  # noqa: N815


class HostBookingSerializer(BookingSerializer):
    """Booking seen by the spot owner, with the guest's identity."""

    User = UserRecordSerializer(source="user", allow_null=True)  # noqa: N815

    def to_representation(self, instance):  # type: ignore
        data = super().to_representation(instance)
        return {"User": data.pop("User"), **data}


class PublicBookingSerializer(serializers.Serializer):
    """Booking seen by anyone but the spot owner: only the blocked dates."""

    spotId = serializers.IntegerField(source="spot_id")  # noqa: N815
    startDate = serializers.DateField(source="start_date")  # noqa: N815
    endDate = serializers.DateField(source="end_date")  # noqa: N815
