"""
Record store that keeps every record in a single JSON file.
"""

import logging
import os
import threading
from typing import Dict, Any, Optional

from config.settings import settings
from interfaces import IRecordStore, Record
from utils.helpers import save_json_to_file, load_json_from_file

logger = logging.getLogger(__name__)


class JsonFileRecordStore(IRecordStore):
    """Stores records as a JSON object keyed by record id."""

    def __init__(self, file_path: Optional[str] = None):
        """
        Initialize JSON file store.

        Args:
            file_path: Path of the JSON file, defaults to RECORD_STORE_PATH
        """
        self.file_path = file_path or settings.RECORD_STORE_PATH
        self._lock = threading.Lock()

    def _read_all(self) -> Dict[str, Any]:
        if not os.path.exists(self.file_path):
            return {}
        data = load_json_from_file(self.file_path)
        if data is None:
            raise IOError(f"Could not read record store: {self.file_path}")
        return data

    def save(self, record: Record) -> bool:
        with self._lock:
            records = self._read_all()
            records[record.record_id] = record.to_dict()
            saved = save_json_to_file(records, self.file_path)
        if not saved:
            logger.error(f"Record {record.record_id} was not written to {self.file_path}")
        return saved

    def load(self, record_id: str) -> Optional[Record]:
        with self._lock:
            data = self._read_all().get(record_id)
        return Record.from_dict(data) if data else None
