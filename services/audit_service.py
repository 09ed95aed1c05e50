"""
Message logging and record keeping through configurable backends.
"""

import logging
from typing import Dict, Any, Optional

from config.settings import settings
from interfaces import Record
from providers.capabilities import LOGGING, PERSISTENCE
from providers.registry import CapabilityRegistry

logger = logging.getLogger(__name__)


class AuditService:
    """Writes messages to log sinks and records to record stores."""

    def __init__(self, registry: CapabilityRegistry,
                 default_sink: Optional[str] = None,
                 default_store: Optional[str] = None):
        """
        Initialize audit service.

        Args:
            registry: Registry with logging and persistence providers
            default_sink: Log sink used when none is given, defaults to DEFAULT_LOG_SINK
            default_store: Record store used when none is given, defaults to DEFAULT_RECORD_STORE
        """
        self.registry = registry
        self.default_sink = default_sink or settings.DEFAULT_LOG_SINK
        self.default_store = default_store or settings.DEFAULT_RECORD_STORE

    def log(self, message: str, sink: Optional[str] = None) -> None:
        self.registry.invoke(LOGGING, sink or self.default_sink, message)

    def record(self, kind: str, data: Dict[str, Any], store: Optional[str] = None) -> Record:
        """
        Persist a record.

        Args:
            kind: Record kind, e.g. "order"
            data: Record payload
            store: Record store discriminator

        Returns:
            The stored record

        Raises:
            IOError: If the store reports the record was not saved
        """
        record = Record(kind=kind, data=data)
        store = store or self.default_store
        if not self.registry.invoke(PERSISTENCE, store, record):
            raise IOError(f"Record store '{store}' did not save record {record.record_id}")
        logger.info(f"Saved {kind} record {record.record_id} to {store}")
        return record
