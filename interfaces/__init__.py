"""
Abstract interfaces for the capabilities served through the registry.
Provides contracts for dependency injection and provider wiring.
"""

from .models import Record, Document, Credentials
from .iarea_calculator import IAreaCalculator
from .irecord_store import IRecordStore
from .ilog_sink import ILogSink
from .iprinter import IPrinter
from .iscanner import IScanner
from .iauthenticator import IAuthenticator

__all__ = [
    'Record',
    'Document',
    'Credentials',
    'IAreaCalculator',
    'IRecordStore',
    'ILogSink',
    'IPrinter',
    'IScanner',
    'IAuthenticator'
]
