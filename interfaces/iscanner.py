"""
Abstract interface for scanners.
"""

from abc import ABC, abstractmethod

from .models import Document


class IScanner(ABC):
    """Abstract interface for scanning documents."""

    @abstractmethod
    def scan_document(self, document: Document) -> str:
        """
        Scan a document.

        Args:
            document: Document to scan

        Returns:
            Scanned text
        """
        pass
