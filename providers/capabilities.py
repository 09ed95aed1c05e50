"""
Capabilities served by the registry.
"""

from interfaces import (
    IAreaCalculator, IRecordStore, ILogSink,
    IPrinter, IScanner, IAuthenticator
)
from .capability import Capability

AREA = Capability(
    name="area",
    interface=IAreaCalculator,
    operation="calculate_area",
    description="Compute area from shape parameters"
)

PERSISTENCE = Capability(
    name="persistence",
    interface=IRecordStore,
    operation="save",
    description="Persist a record"
)

LOGGING = Capability(
    name="logging",
    interface=ILogSink,
    operation="write",
    description="Emit a message"
)

PRINTING = Capability(
    name="printing",
    interface=IPrinter,
    operation="print_document",
    description="Print a document"
)

SCANNING = Capability(
    name="scanning",
    interface=IScanner,
    operation="scan_document",
    description="Scan a document"
)

AUTHENTICATION = Capability(
    name="authentication",
    interface=IAuthenticator,
    operation="authenticate",
    description="Verify credentials"
)

ALL_CAPABILITIES = (AREA, PERSISTENCE, LOGGING, PRINTING, SCANNING, AUTHENTICATION)
