"""Convex polygons built from point sets.

A Polygon never stores its points in insertion order. Every ``add_points`` call
recomputes the convex hull over all points accumulated so far, and the cached
bounding box is refreshed with it. A point set whose hull has fewer than three
vertices gives the null polygon (null bounding box).

Polygons are the only mutable shape. Concurrent ``add_points`` calls on the same
instance must be serialized by the caller.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from geomkit.domain.point import Point
from geomkit.domain.rect import Rectangle
from geomkit.exceptions import SerializationError

logger = logging.getLogger(__name__)

PointInput = Point | Iterable[Point]


def _flatten(items: Iterable[PointInput]) -> Iterator[Point]:
    for item in items:
        if isinstance(item, Point):
            yield item
        else:
            yield from item


class Polygon:
    """A convex polygon.

    Attributes:
        vertices: Hull vertices, counter-clockwise from the pivot (y axis up)
        points: Every non-null point added so far
        bounding_box: Tight axis-aligned box around the hull
    """

    def __init__(self, *points: PointInput) -> None:
        self._points: list[Point] = []
        self._hull: list[Point] = []
        self._bounding_box = Rectangle.null()
        if points:
            self.add_points(*points)

    @classmethod
    def null(cls) -> "Polygon":
        """Get the null polygon (no vertices, null bounding box)."""
        return cls()

    def is_null(self) -> bool:
        return self._bounding_box.is_null()

    def add_points(self, *points: PointInput) -> None:
        """Add points and rebuild the hull.

        Args:
            *points: Points, or iterables of points. Null points are ignored.
        """
        added = 0
        for point in _flatten(points):
            if point.is_null():
                continue
            self._points.append(point)
            added += 1
        logger.debug("Adding %d points to polygon (%d total)", added, len(self._points))
        self._rebuild()

    def _rebuild(self) -> None:
        from geomkit.core.hull import graham_scan

        result = graham_scan(self._points)
        self._hull = list(result.vertices)
        self._bounding_box = result.bounding_box

    @property
    def vertices(self) -> tuple[Point, ...]:
        return tuple(self._hull)

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    @property
    def bounding_box(self) -> Rectangle:
        return self._bounding_box

    def size(self) -> int:
        return len(self._hull)

    def width(self) -> float:
        return self._bounding_box.width()

    def height(self) -> float:
        return self._bounding_box.height()

    def edges(self) -> Iterator[tuple[Point, Point]]:
        """Iterate over hull edges as (start, end) pairs, closing the loop."""
        n = len(self._hull)
        for i in range(n):
            yield self._hull[i], self._hull[(i + 1) % n]

    def area(self) -> float:
        """Calculate the enclosed area using the shoelace formula.

        Returns:
            Unsigned area, 0.0 for the null polygon
        """
        if self.is_null():
            return 0.0
        twice_area = 0.0
        for start, end in self.edges():
            twice_area += start.x * end.y - end.x * start.y
        return abs(twice_area) / 2.0

    def perimeter(self) -> float:
        return sum(start.distance_to(end) for start, end in self.edges())

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the hull vertices
        """
        return {"vertices": [p.to_dict() for p in self._hull]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        Raises:
            SerializationError: If the vertex list is missing or malformed
        """
        try:
            raw_vertices = data["vertices"]
        except (KeyError, TypeError) as e:
            raise SerializationError("Polygon", "missing field 'vertices'") from e
        if not isinstance(raw_vertices, list):
            raise SerializationError("Polygon", "'vertices' must be a list")
        return cls([Point.from_dict(v) for v in raw_vertices])

    def __len__(self) -> int:
        return len(self._hull)

    def __getitem__(self, index: int) -> Point:
        return self._hull[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._hull)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        if self._bounding_box != other._bounding_box:
            return False
        if self.is_null():
            return True
        if len(self._hull) != len(other._hull):
            return False
        # hulls are built in a canonical order, so vertices line up
        return all(a == b for a, b in zip(self._hull, other._hull, strict=True))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        chain = "->".join(str(p) for p in self._hull)
        return f"Polygon: size = {len(self._hull)}\n  {chain}"

    def __repr__(self) -> str:
        return f"Polygon({self._hull!r})"
