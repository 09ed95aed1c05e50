"""
Abstract interface for record persistence backends.
"""

from abc import ABC, abstractmethod

from .models import Record


class IRecordStore(ABC):
    """Abstract interface for persisting records."""

    @abstractmethod
    def save(self, record: Record) -> bool:
        """
        Persist a record.

        Args:
            record: Record to store

        Returns:
            True if the record was stored
        """
        pass
