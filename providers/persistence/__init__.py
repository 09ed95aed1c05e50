"""
Record store providers.
"""

from .memory_store import InMemoryRecordStore
from .json_file_store import JsonFileRecordStore
from .redis_store import RedisRecordStore

__all__ = ['InMemoryRecordStore', 'JsonFileRecordStore', 'RedisRecordStore']
