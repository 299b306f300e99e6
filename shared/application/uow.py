"""
Unit of Work Pattern

Wraps one use case in a single database transaction: the block either
commits as a whole or, on any exception, rolls back as a whole.
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
        with DjangoUnitOfWork(name="update_property"):
            prop = repository.find_by_id(property_id)
            ...
            repository.save(prop)
            # Transaction commits here
        # Any exception raised inside the block rolls everything back
        # and propagates to the caller unchanged.
    """

    def __init__(self, name: str = "", using=None):
        self.name = name
        self._using = using
        self._transaction = None

    def __enter__(self):
        """Start database transaction"""
        self._transaction = transaction.atomic(using=self._using)
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
            if self._transaction:
                # atomic() commits on a clean exit and rolls back otherwise
                self._transaction.__exit__(exc_type, exc_val, exc_tb)
                self._transaction = None
        return False

    def commit(self):
        logger.debug("Committing unit of work %s", self.name or "<anonymous>")

    def rollback(self):
        logger.warning("Rolling back unit of work %s", self.name or "<anonymous>")

    def on_commit(self, func):
        """Run ``func`` once the outermost transaction has committed."""
        transaction.on_commit(func, using=self._using)
