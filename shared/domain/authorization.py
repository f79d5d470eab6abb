"""
Authorization Gate

Ownership is the only rule: a spot can be changed by its owner, a booking
or a review by the user who made it. Callers must confirm the resource
exists before asking the gate.
"""

from shared.domain.base import Record
from shared.domain.exceptions import Forbidden, NotFound


def owner_of(resource: Record) -> int:
    """Id of the user who owns ``resource``."""
    return getattr(resource, resource.owner_field)


def can_modify(resource: Record, requester_id) -> bool:
    if requester_id is None:
        return False
    return owner_of(resource) == requester_id


def ensure_can_modify(resource: Record, requester_id, *, resource_name: str = '', conceal: bool = False) -> None:
    """
    Raise unless ``requester_id`` owns ``resource``.

    With ``conceal`` the denial is reported as NotFound so that the
    response does not reveal the resource exists.
    """
    if can_modify(resource, requester_id):
        return
    if conceal:
        raise NotFound(resource_name or resource.__class__.__name__)
    raise Forbidden()
