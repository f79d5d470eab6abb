"""Project-wide DRF exception handler.

Renders every error as ``{"message": ..., "errors": {...}}``. Domain
errors carry their own status; DRF errors keep theirs; anything else is
logged and reported as a 500.
"""

from __future__ import annotations

import logging

from django.core.exceptions import PermissionDenied  # type: ignore
from django.http import Http404  # type: ignore
from rest_framework import exceptions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import set_rollback  # type: ignore

from shared.domain.exceptions import MarketplaceError, ServerError

from .validation import first_messages

logger = logging.getLogger(__name__)

AUTHENTICATION_REQUIRED = "Authentication required"


def _api_exception_body(exc: exceptions.APIException) -> dict:
    if isinstance(exc, exceptions.NotAuthenticated):
        return {"message": AUTHENTICATION_REQUIRED}
    if isinstance(exc, exceptions.ValidationError):
        detail = exc.detail if isinstance(exc.detail, dict) else {"non_field_errors": exc.detail}
        return {"message": "Validation Error", "errors": first_messages(detail)}
    detail = exc.detail
    if isinstance(detail, dict):
        detail = detail.get("detail", next(iter(detail.values()), ""))
    if isinstance(detail, list):
        detail = detail[0] if detail else ""
    return {"message": str(detail)}


def marketplace_exception_handler(exc, context):
    """Translate an exception raised inside an API view into a response."""

    if isinstance(exc, MarketplaceError):
        set_rollback()
        return Response(exc.to_dict(), status=exc.status_code)

    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    if isinstance(exc, exceptions.APIException):
        headers = {}
        if getattr(exc, "auth_header", None):
            headers["WWW-Authenticate"] = exc.auth_header
        if getattr(exc, "wait", None):
            headers["Retry-After"] = "%d" % exc.wait
        status_code = exc.status_code
        if isinstance(exc, exceptions.NotAuthenticated):
            status_code = status.HTTP_401_UNAUTHORIZED
        set_rollback()
        return Response(_api_exception_body(exc), status=status_code, headers=headers)

    view = context.get("view")
    logger.exception("Unhandled error in %s", view.__class__.__name__ if view else "API view")
    set_rollback()
    error = ServerError(str(exc))
    return Response(error.to_dict(), status=error.status_code)
