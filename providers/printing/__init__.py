"""
Printer and scanner providers.
"""

from .printers import ConsolePrinter, SpoolPrinter
from .scanners import FlatbedScanner

__all__ = ['ConsolePrinter', 'SpoolPrinter', 'FlatbedScanner']
