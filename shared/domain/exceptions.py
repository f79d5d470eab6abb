"""
Domain Errors

Every failure a service can report. Each error knows the HTTP status and
the ``message`` it is rendered with; field-level problems travel in
``errors`` keyed by the request field name.
"""

from typing import Dict, Optional


class MarketplaceError(Exception):
    """Base class for all errors raised by the marketplace services."""

    status_code = 500
    default_message = 'Server Error'

    def __init__(self, message: Optional[str] = None, errors: Optional[Dict[str, str]] = None):
        self.message = message or self.default_message
        self.errors = dict(errors or {})
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {'message': self.message}
        if self.errors:
            body['errors'] = self.errors
        return body


class ValidationFailed(MarketplaceError):
    """Request body failed validation."""

    status_code = 400
    default_message = 'Validation Error'

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        super().__init__(message, errors)


class BadRequest(MarketplaceError):
    """Query parameters or path parameters failed validation."""

    status_code = 400
    default_message = 'Bad Request'

    def __init__(self, errors: Optional[Dict[str, str]] = None, message: Optional[str] = None):
        super().__init__(message, errors)


class NotFound(MarketplaceError):
    status_code = 404

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"{resource} couldn't be found")


class Forbidden(MarketplaceError):
    status_code = 403
    default_message = 'Forbidden'


class BookingConflict(MarketplaceError):
    """Requested dates overlap an existing booking of the same spot."""

    status_code = 403
    default_message = 'Sorry, this spot is already booked for the specified dates'

    def __init__(self, errors: Dict[str, str]):
        super().__init__(errors=errors)


class ServerError(MarketplaceError):
    """Unexpected failure; ``error`` carries its text as diagnostic detail."""

    def __init__(self, error: Optional[str] = None):
        self.error = error
        super().__init__()

    def to_dict(self) -> dict:
        body = super().to_dict()
        if self.error:
            body['error'] = self.error
        return body
