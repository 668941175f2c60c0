"""
Unit of Work Pattern

Manages database transactions and ensures that after-commit callbacks
run only after a successful transaction commit.
"""

from abc import ABC, abstractmethod
from typing import Callable, List
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

    @abstractmethod
    def after_commit(self, callback: Callable[[], None]):
        """Register a callback to run once the transaction has committed"""
        pass


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    Django implementation of Unit of Work

    Wraps transaction.atomic() so that row locks taken inside the block
    (SELECT ... FOR UPDATE) are held until commit.

    Usage:
        with DjangoUnitOfWork() as uow:
            # Lock the consistency boundary
            resource = Resource.objects.select_for_update().get(pk=resource_id)

            # Re-check and write
            BookingModel.objects.create(...)

            uow.after_commit(lambda: logger.info("booking.committed"))
            # Transaction commits here
        # Callbacks run after commit
    """

    def __init__(self, using: str | None = None):
        self.using = using
        self._callbacks: List[Callable[[], None]] = []
        self._transaction = None

    def __enter__(self):
        """Start database transaction"""
        self._transaction = transaction.atomic(using=self.using)
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
                self._transaction.__exit__(exc_type, exc_val, exc_tb)

    def commit(self):
        """
        Commit changes and schedule callbacks

        Callbacks are scheduled with Django's transaction.on_commit()
        so they only run after the database commit succeeds.
        """
        logger.debug(f"Committing transaction with {len(self._callbacks)} callbacks")

        callbacks = self._callbacks.copy()
        self._callbacks.clear()

        for callback in callbacks:
            transaction.on_commit(callback, using=self.using)

    def rollback(self):
        """Rollback changes and discard callbacks"""
        logger.warning(f"Rolling back transaction, discarding {len(self._callbacks)} callbacks")
        self._callbacks.clear()

    def after_commit(self, callback: Callable[[], None]):
        self._callbacks.append(callback)
