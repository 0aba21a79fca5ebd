"""
Unit of Work Pattern

Wraps a group of repository calls in a single database transaction so
that a multi-step write (a space with its calendar, address and images)
either commits as a whole or leaves the store untouched.
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
            space = spaces.find_by_id(space_id)
            for availability in space.availabilities:
                availabilities.delete(availability.id)
            spaces.delete(space)
        # Committed here; any exception above rolls everything back

    Exceptions are never swallowed: after the rollback they propagate to
    the caller unchanged.
    """

    def __init__(self, label: str = ""):
        self.label = label
        self._transaction = None

    def __enter__(self):
        """Start database transaction"""
        self._transaction = transaction.atomic()
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction"""
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback(exc_val)
        finally:
            if self._transaction:
                self._transaction.__exit__(exc_type, exc_val, exc_tb)
                self._transaction = None

    def commit(self):
        logger.debug(f"Committing unit of work {self.label or '<anonymous>'}")

    def rollback(self, error: BaseException | None = None):
        """Rollback is performed by atomic() when the block exits with an error"""
        logger.warning(
            f"Rolling back unit of work {self.label or '<anonymous>'}: "
            f"{error.__class__.__name__ if error else 'no error'} {error or ''}".rstrip()
        )
