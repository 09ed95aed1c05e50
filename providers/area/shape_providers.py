"""
Area calculators for common shapes.
Shape parameters are validated with pydantic before any arithmetic runs.
"""

import math
from typing import Dict, Any

from pydantic import BaseModel, Field

from interfaces import IAreaCalculator


class RectangleParams(BaseModel):
    width: float = Field(ge=0)
    height: float = Field(ge=0)


class CircleParams(BaseModel):
    radius: float = Field(ge=0)


class TriangleParams(BaseModel):
    base: float = Field(ge=0)
    height: float = Field(ge=0)


class SquareParams(BaseModel):
    side: float = Field(ge=0)


class RectangleAreaProvider(IAreaCalculator):
    """Area of a rectangle: width * height."""

    def calculate_area(self, params: Dict[str, Any]) -> float:
        shape = RectangleParams.model_validate(params)
        return shape.width * shape.height


class CircleAreaProvider(IAreaCalculator):
    """Area of a circle: pi * r^2."""

    def calculate_area(self, params: Dict[str, Any]) -> float:
        shape = CircleParams.model_validate(params)
        return math.pi * shape.radius * shape.radius


class TriangleAreaProvider(IAreaCalculator):
    """Area of a triangle from base and height."""

    def calculate_area(self, params: Dict[str, Any]) -> float:
        shape = TriangleParams.model_validate(params)
        return 0.5 * shape.base * shape.height


class SquareAreaProvider(IAreaCalculator):
    """Area of a square: side^2."""

    def calculate_area(self, params: Dict[str, Any]) -> float:
        shape = SquareParams.model_validate(params)
        return shape.side * shape.side
