"""
Printers. Each one implements printing only; scanning is a separate capability.
"""

import itertools
import logging
import threading
from collections import deque
from typing import List

from interfaces import IPrinter, Document

logger = logging.getLogger(__name__)


class ConsolePrinter(IPrinter):
    """Writes documents to the application log."""

    def __init__(self):
        self._job_ids = itertools.count(1)

    def print_document(self, document: Document) -> str:
        job_id = f"console-{next(self._job_ids)}"
        logger.info(f"[{job_id}] {document.title} ({document.pages} page(s))\n{document.content}")
        return job_id


class SpoolPrinter(IPrinter):
    """Queues documents in memory until they are drained."""

    def __init__(self, max_jobs: int = 100):
        """
        Initialize spool printer.

        Args:
            max_jobs: Maximum number of queued jobs; the oldest are dropped
        """
        self._queue = deque(maxlen=max_jobs)
        self._job_ids = itertools.count(1)
        self._lock = threading.Lock()

    def print_document(self, document: Document) -> str:
        if document.pages < 1:
            raise ValueError(f"Document '{document.title}' has no pages")
        with self._lock:
            job_id = f"spool-{next(self._job_ids)}"
            self._queue.append((job_id, document))
        return job_id

    def pending_jobs(self) -> List[str]:
        with self._lock:
            return [job_id for job_id, _ in self._queue]

    def drain(self) -> List[Document]:
        """Remove and return every queued document in submission order."""
        with self._lock:
            documents = [document for _, document in self._queue]
            self._queue.clear()
        return documents
