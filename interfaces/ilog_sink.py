"""
Abstract interface for message log sinks.
"""

from abc import ABC, abstractmethod


class ILogSink(ABC):
    """Abstract interface for emitting log messages."""

    @abstractmethod
    def write(self, message: str) -> None:
        """Emit a single message."""
        pass
