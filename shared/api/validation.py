"""Helpers turning DRF serializer errors into domain errors."""

from __future__ import annotations

from typing import Mapping, Type

from rest_framework import serializers  # type: ignore

from shared.domain.exceptions import ValidationFailed


def first_messages(errors: Mapping) -> dict[str, str]:
    """Keep the first message reported for each field."""
    messages: dict[str, str] = {}
    for name, reported in errors.items():
        if isinstance(reported, Mapping):
            reported = list(reported.values())[0]
        if isinstance(reported, (list, tuple)):
            reported = reported[0] if reported else ""
        messages[name] = str(reported)
    return messages


def validate_payload(serializer_class: Type[serializers.Serializer], data, **kwargs):
    """
    Validate ``data`` with ``serializer_class``.

    Returns the validated data or raises ``ValidationFailed`` with every
    invalid field at once.
    """
    serializer = serializer_class(data=data, **kwargs)
    if not serializer.is_valid():
        raise ValidationFailed(first_messages(serializer.errors))
    return serializer.validated_data
