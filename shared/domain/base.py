"""
Base Domain Classes

This module provides the foundational building blocks shared by every app:
- ValueObject: Immutable objects compared by value
- Record: Immutable snapshot of a stored row handed out by the entity store
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects

    Value objects are immutable and have no identity.
    Two value objects are equal if all their attributes are equal.
    """
    pass


@dataclass(frozen=True)
class Record(ABC):
    """
    Base class for plain data records

    Records carry no behaviour and no dirty-tracking state. Changing a row
    always goes through the entity store, which returns a fresh record.
    """
    id: int
