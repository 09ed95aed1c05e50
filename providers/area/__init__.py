"""
Area calculator providers.
"""

from .shape_providers import (
    RectangleAreaProvider, CircleAreaProvider,
    TriangleAreaProvider, SquareAreaProvider
)

__all__ = [
    'RectangleAreaProvider',
    'CircleAreaProvider',
    'TriangleAreaProvider',
    'SquareAreaProvider'
]
