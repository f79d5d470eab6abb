"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Public profile of a user returned by the auth endpoints."""

    firstName = serializers.CharField(source="first_name", read_only=True)  # noqa: N815
    lastName = serializers.CharField(source="last_name", read_only=True)  # noqa: N815

    class Meta:
        model = User
        fields = ["id", "email", "username", "firstName", "lastName"]
        read_only_fields = fields


class UserRecordSerializer(serializers.Serializer):
    """Renders a ``UserRecord`` as the ``Owner``/``User`` block of other resources."""

    id = serializers.IntegerField()
    firstName = serializers.CharField(source="first_name")  # noqa: N815
    lastName = serializers.CharField(source="last_name")  # noqa: N815
