"""
Sinks that emit messages to the console, a file, or a record store.
"""

import logging
import os
import threading
from datetime import datetime
from typing import Optional

from config.settings import settings
from interfaces import ILogSink, IRecordStore, Record

logger = logging.getLogger(__name__)


class ConsoleLogSink(ILogSink):
    """Forwards messages to a standard library logger."""

    def __init__(self, logger_name: str = "messages", level: int = logging.INFO):
        self._logger = logging.getLogger(logger_name)
        self.level = level

    def write(self, message: str) -> None:
        self._logger.log(self.level, message)


class FileLogSink(ILogSink):
    """Appends timestamped messages to a text file."""

    def __init__(self, file_path: Optional[str] = None):
        """
        Initialize file sink.

        Args:
            file_path: Log file path, defaults to LOG_FILE_PATH
        """
        self.file_path = file_path or settings.LOG_FILE_PATH
        self._lock = threading.Lock()

    def write(self, message: str) -> None:
        if message is None:
            raise ValueError("Cannot write a null message")

        directory = os.path.dirname(self.file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        line = f"{datetime.now().strftime(settings.LOG_DATE_FORMAT)} {message}\n"
        with self._lock:
            with open(self.file_path, 'a', encoding='utf-8') as f:
                f.write(line)


class DatabaseLogSink(ILogSink):
    """Persists each message as a ``log`` record through an injected record store."""

    def __init__(self, store: IRecordStore):
        """
        Initialize database sink.

        Args:
            store: Record store that receives the messages
        """
        self.store = store

    def write(self, message: str) -> None:
        if message is None:
            raise ValueError("Cannot write a null message")
        if not self.store.save(Record(kind="log", data={"message": message})):
            raise IOError("Record store rejected log message")
