"""
Abstract interface for printers.
"""

from abc import ABC, abstractmethod

from .models import Document


class IPrinter(ABC):
    """Abstract interface for printing documents."""

    @abstractmethod
    def print_document(self, document: Document) -> str:
        """
        Print a document.

        Args:
            document: Document to print

        Returns:
            Identifier of the print job
        """
        pass
