"""
Printing and scanning of documents.
"""

from typing import Optional

from config.settings import settings
from interfaces import Document
from providers.capabilities import PRINTING, SCANNING
from providers.registry import CapabilityRegistry


class DocumentService:
    """Routes documents to printers and scanners by name."""

    def __init__(self, registry: CapabilityRegistry,
                 default_printer: Optional[str] = None,
                 default_scanner: Optional[str] = None):
        self.registry = registry
        self.default_printer = default_printer or settings.DEFAULT_PRINTER
        self.default_scanner = default_scanner or settings.DEFAULT_SCANNER

    def print_document(self, document: Document, printer: Optional[str] = None) -> str:
        return self.registry.invoke(PRINTING, printer or self.default_printer, document)

    def scan_document(self, document: Document, scanner: Optional[str] = None) -> str:
        return self.registry.invoke(SCANNING, scanner or self.default_scanner, document)
