"""
Total area calculation over heterogeneous shapes.
"""

import logging
from typing import Dict, Any, Iterable, List, Tuple

from providers.capabilities import AREA
from providers.registry import CapabilityRegistry

logger = logging.getLogger(__name__)

ShapeSpec = Tuple[str, Dict[str, Any]]


class AreaService:
    """Computes areas by delegating each shape to its registered calculator."""

    def __init__(self, registry: CapabilityRegistry):
        """
        Initialize area service.

        Args:
            registry: Registry with area providers wired in
        """
        self.registry = registry

    def shape_area(self, kind: str, params: Dict[str, Any]) -> float:
        return self.registry.invoke(AREA, kind, params)

    def shape_areas(self, shapes: Iterable[ShapeSpec]) -> List[Dict[str, Any]]:
        """
        Compute the area of every shape.

        Args:
            shapes: (kind, params) pairs, e.g. ("circle", {"radius": 7})

        Returns:
            One {"kind", "params", "area"} entry per shape, in input order
        """
        return [
            {"kind": kind, "params": params, "area": self.shape_area(kind, params)}
            for kind, params in shapes
        ]

    def total_area(self, shapes: Iterable[ShapeSpec]) -> float:
        """
        Sum the areas of all shapes.

        Args:
            shapes: (kind, params) pairs

        Returns:
            Total area
        """
        areas = self.shape_areas(shapes)
        total = sum(entry["area"] for entry in areas)
        logger.debug(f"Total area of {len(areas)} shape(s): {total:.3f}")
        return total
