"""Domain models for geomkit.

This module contains the primitive shapes. All of them:

- Use the tolerance kernel for equality
- Have a null value (``Shape.null()``) that invalid input collapses to
- Serialize to and from plain dictionaries

Key classes:
- Point: A 2D location
- Direction: A displacement with a cached length
- Line: An infinite line through two points
- Segment: A bounded line segment
- Rectangle: An axis-aligned rectangle
- Polygon: A convex polygon kept as the hull of its points
"""

from geomkit.domain.line import Line, LinearShape, Segment
from geomkit.domain.point import Direction, Point
from geomkit.domain.polygon import Polygon
from geomkit.domain.rect import Rectangle

__all__: list[str] = [
    "Direction",
    "Line",
    "LinearShape",
    "Point",
    "Polygon",
    "Rectangle",
    "Segment",
]
