"""
Abstract interface for shape area calculators.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class IAreaCalculator(ABC):
    """Abstract interface for computing the area of one kind of shape."""

    @abstractmethod
    def calculate_area(self, params: Dict[str, Any]) -> float:
        """
        Compute the area described by shape parameters.

        Args:
            params: Shape parameters (e.g. width and height)

        Returns:
            Area as a float
        """
        pass
