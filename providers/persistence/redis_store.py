"""
Record store backed by Redis, with a local cache when Redis is unreachable.
"""

import json
import logging
from typing import Optional
import redis
from cachetools import TTLCache

from config.settings import settings
from interfaces import IRecordStore, Record

logger = logging.getLogger(__name__)


class RedisRecordStore(IRecordStore):
    """Stores records as JSON strings under ``record:<id>`` keys."""

    KEY_PREFIX = "record"

    def __init__(self, client: Optional[redis.Redis] = None, ttl: Optional[int] = None):
        """
        Initialize Redis store.

        Args:
            client: Pre-built Redis client, built from settings when omitted
            ttl: Expiry in seconds for stored records
        """
        self.ttl = ttl or settings.CACHE_TTL
        self.local_cache = TTLCache(maxsize=settings.CACHE_MAXSIZE, ttl=self.ttl)
        self.redis_client = client

        if self.redis_client is None:
            try:
                self.redis_client = redis.Redis(
                    host=settings.REDIS_HOST,
                    port=settings.REDIS_PORT,
                    db=settings.REDIS_DB,
                    password=settings.REDIS_PASSWORD,
                    decode_responses=True
                )
                self.redis_client.ping()
                logger.info(f"Redis connection established: {settings.REDIS_HOST}:{settings.REDIS_PORT}")
            except redis.ConnectionError as e:
                logger.warning(f"Redis connection failed: {e}, using local cache only")
                self.redis_client = None

    def _get_key(self, record_id: str) -> str:
        return f"{self.KEY_PREFIX}:{record_id}"

    def save(self, record: Record) -> bool:
        key = self._get_key(record.record_id)
        if self.redis_client:
            self.redis_client.setex(key, self.ttl, json.dumps(record.to_dict()))
        else:
            self.local_cache[key] = record.to_dict()
        return True

    def load(self, record_id: str) -> Optional[Record]:
        key = self._get_key(record_id)
        if self.redis_client:
            data = self.redis_client.get(key)
            return Record.from_dict(json.loads(data)) if data else None
        data = self.local_cache.get(key)
        return Record.from_dict(data) if data else None
