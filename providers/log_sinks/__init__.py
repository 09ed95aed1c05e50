"""
Log sink providers.
"""

from .sinks import ConsoleLogSink, FileLogSink, DatabaseLogSink

__all__ = ['ConsoleLogSink', 'FileLogSink', 'DatabaseLogSink']
