"""
Scanners.
"""

import logging

from interfaces import IScanner, Document

logger = logging.getLogger(__name__)


class FlatbedScanner(IScanner):
    """Returns the document text, one header line per page."""

    def scan_document(self, document: Document) -> str:
        logger.debug(f"Scanning '{document.title}'")
        header = "\n".join(f"--- {document.title} page {page} ---" for page in range(1, document.pages + 1))
        return f"{header}\n{document.content}" if document.content else header
