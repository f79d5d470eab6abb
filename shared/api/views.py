"""Shared API plumbing: JSON error pages and the store-aware view base."""

from __future__ import annotations

from django.http import JsonResponse  # type: ignore
from rest_framework import permissions  # type: ignore
from rest_framework.views import APIView  # type: ignore

from shared.application.store import EntityStore
from shared.domain.exceptions import BadRequest, ServerError
from shared.infrastructure.django_store import get_store


def parse_id(value, name: str) -> int:
    """Path ids must be positive integers."""
    try:
        parsed = int(str(value))
    except (TypeError, ValueError):
        parsed = 0
    if parsed < 1:
        raise BadRequest(message=f"Invalid {name}. It must be a valid integer.")
    return parsed


def requester_id(request):
    user = request.user
    return user.id if user and user.is_authenticated else None


class StoreAPIView(APIView):
    """APIView that hands an entity store to the services it calls."""

    permission_classes = [permissions.IsAuthenticatedOrReadOnly]
    store: EntityStore | None = None

    def get_store(self) -> EntityStore:
        if self.store is None:
            self.store = get_store()
        return self.store


def not_found(request, exception=None):
    return JsonResponse({"message": "Resource couldn't be found"}, status=404)


def server_error(request):
    error = ServerError()
    return JsonResponse(error.to_dict(), status=error.status_code)
