"""
Unit of Work Pattern

Wraps one store transaction. Everything done inside the ``with`` block is
committed together or not at all.
"""

from abc import ABC, abstractmethod
import logging

from django.db import transaction

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Abstract Unit of Work pattern"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def commit(self):
        """Commit the transaction"""
        pass

    @abstractmethod
    def rollback(self):
        """Rollback the transaction"""
        pass


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    Django implementation of Unit of Work

    Usage:
        with DjangoUnitOfWork():
            spot = Spot.objects.select_for_update().get(pk=spot_id)
            ...
            # Transaction commits here
        # or rolls back if the block raised

    Nested units reuse the outer transaction through savepoints, exactly
    like nested ``transaction.atomic()`` blocks.
    """

    def __init__(self, using=None):
        self._transaction = transaction.atomic(using=using)

    def __enter__(self):
        """Start database transaction"""
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction"""
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            self._transaction.__exit__(exc_type, exc_val, exc_tb)

    def commit(self):
        logger.debug("Committing unit of work")

    def rollback(self):
        logger.debug("Rolling back unit of work")
