"""
In-process record store backed by a TTL cache.
"""

import logging
import threading
from typing import Dict, Any, List, Optional
from cachetools import TTLCache

from config.settings import settings
from interfaces import IRecordStore, Record

logger = logging.getLogger(__name__)


class InMemoryRecordStore(IRecordStore):
    """Keeps records in a local TTL cache; entries expire after ``ttl`` seconds."""

    def __init__(self, maxsize: Optional[int] = None, ttl: Optional[int] = None):
        """
        Initialize in-memory store.

        Args:
            maxsize: Maximum number of cached records
            ttl: Seconds a record is kept
        """
        self._cache = TTLCache(
            maxsize=maxsize or settings.CACHE_MAXSIZE,
            ttl=ttl or settings.CACHE_TTL
        )
        self._lock = threading.Lock()

    def save(self, record: Record) -> bool:
        with self._lock:
            self._cache[record.record_id] = record.to_dict()
        logger.debug(f"Stored record {record.record_id} in memory")
        return True

    def load(self, record_id: str) -> Optional[Record]:
        with self._lock:
            data = self._cache.get(record_id)
        return Record.from_dict(data) if data else None

    def all_records(self) -> List[Dict[str, Any]]:
        with self._lock:
            return list(self._cache.values())
