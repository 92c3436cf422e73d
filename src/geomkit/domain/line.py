"""Linear shapes: infinite lines and bounded segments.

Both are defined by an anchor point and a direction. The endpoints are kept
in canonical order (smaller x first, smaller y first when vertical) so two
shapes built from the same points in either order are identical.

A degenerate construction (equal endpoints, or a null endpoint) produces the
null shape instead of raising.
"""

import logging
import math
from typing import Any

from geomkit.domain.point import Direction, Point
from geomkit.exceptions import SerializationError
from geomkit.utils.tolerance import equal, less_equal, less_than

logger = logging.getLogger(__name__)


def _ordered(p1: Point, p2: Point) -> tuple[Point, Point]:
    if equal(p1.x, p2.x):
        return (p1, p2) if less_than(p1.y, p2.y) else (p2, p1)
    return (p1, p2) if less_than(p1.x, p2.x) else (p2, p1)


class LinearShape:
    """Common implementation of Line and Segment.

    Attributes:
        pt1: First endpoint (the anchor)
        pt2: Second endpoint (anchor + direction)
        direction: Displacement from pt1 to pt2
    """

    __slots__ = ("_pt1", "_pt2", "_direction")

    bounded = False

    def __init__(self, pt1: Point | None = None, pt2: Point | None = None) -> None:
        if pt1 is None or pt2 is None or pt1.is_null() or pt2.is_null() or pt1 == pt2:
            if pt1 is not None and pt2 is not None:
                logger.debug("Degenerate %s collapsed to null: %s, %s",
                             type(self).__name__, pt1, pt2)
            self._set_null()
            return
        self._pt1, self._pt2 = _ordered(pt1, pt2)
        self._direction = self._pt2 - self._pt1

    def _set_null(self) -> None:
        self._pt1 = Point.null()
        self._pt2 = Point.null()
        self._direction = Direction.null()

    @classmethod
    def null(cls) -> Any:
        """Get the null shape (both endpoints null)."""
        return cls()

    @classmethod
    def from_anchor(cls, anchor: Point, direction: Direction) -> Any:
        """Build from an anchor point and the displacement to the second point."""
        return cls(anchor, anchor + direction)

    @classmethod
    def from_coords(cls, x1: float, y1: float, x2: float, y2: float) -> Any:
        return cls(Point(x1, y1), Point(x2, y2))

    def is_null(self) -> bool:
        return self._pt1.is_null()

    @property
    def pt1(self) -> Point:
        return self._pt1

    @property
    def pt2(self) -> Point:
        return self._pt2

    @property
    def anchor(self) -> Point:
        return self._pt1

    @property
    def direction(self) -> Direction:
        return self._direction

    def width(self) -> float:
        if self.is_null():
            return 0
        return abs(self._pt2.x - self._pt1.x)

    def height(self) -> float:
        if self.is_null():
            return 0
        return abs(self._pt2.y - self._pt1.y)

    def length(self) -> float:
        return self._direction.length

    def is_vertical(self) -> bool:
        return not self.is_null() and equal(self._pt1.x, self._pt2.x)

    def slope(self) -> float:
        """Slope dy/dx, infinite for vertical (and null) shapes."""
        if self.is_null() or self.is_vertical():
            return math.inf
        return (self._pt2.y - self._pt1.y) / (self._pt2.x - self._pt1.x)

    def intercept(self) -> float:
        """Y intercept of the supporting line, infinite when vertical."""
        slope = self.slope()
        if math.isinf(slope):
            return math.inf
        return self._pt1.y - slope * self._pt1.x

    def y_at(self, x: float) -> float:
        """Raw y of the supporting line at x (inf when vertical)."""
        slope = self.slope()
        if math.isinf(slope):
            return math.inf
        return slope * x + self.intercept()

    def spans(self, point: Point) -> bool:
        """Check if a point on the supporting line lies within the shape's extent."""
        if not self.bounded:
            return True
        lo_x, hi_x = sorted((self._pt1.x, self._pt2.x))
        lo_y, hi_y = sorted((self._pt1.y, self._pt2.y))
        return (
            less_equal(lo_x, point.x)
            and less_equal(point.x, hi_x)
            and less_equal(lo_y, point.y)
            and less_equal(point.y, hi_y)
        )

    def at_x(self, x: float, coord_type: type = float) -> Point:
        """Point of the shape at the given x.

        Args:
            x: X coordinate to evaluate
            coord_type: Type the resulting coordinates are round-cast to

        Returns:
            The point, or null for vertical shapes and x outside a segment
        """
        if self.is_null() or self.is_vertical():
            return Point.null()
        y = self.y_at(x)
        if not self.spans(Point(x, y)):
            return Point.null()
        return Point.cast(x, y, coord_type)

    def contains(self, point: Point) -> bool:
        """Check if a point lies on the shape within tolerance."""
        if self.is_null() or point.is_null():
            return False
        if self.is_vertical():
            on_line = equal(point.x, self._pt1.x)
        else:
            on_line = equal(self.y_at(point.x), point.y)
        return on_line and self.spans(point)

    def interpolate(self, distance: float, coord_type: type = float) -> Point:
        """Move along the shape from one of its endpoints.

        Negative distances move from pt1 towards pt2, positive distances from
        pt2 towards pt1. Distances at least as long as the shape clamp to the
        endpoint the move starts from: pt2 for positive distances, pt1 for
        negative ones.
        """
        if self.is_null():
            return Point.null()
        if equal(distance, 0):
            return self._pt1
        if abs(distance) >= self.length():
            return self._pt2 if distance > 0 else self._pt1
        unit = self._direction.normalize()
        if distance < 0:
            moved = self._pt1 + unit * abs(distance)
        else:
            moved = self._pt2 - unit * distance
        return Point.cast(moved.x, moved.y, coord_type)

    def extrapolate(self, distance: float, coord_type: type = float) -> Point:
        """Move beyond the shape's endpoints.

        Negative distances extend past pt1, positive distances past pt2.
        """
        if self.is_null():
            return Point.null()
        if equal(distance, 0):
            return self._pt1
        unit = self._direction.normalize()
        if distance < 0:
            moved = self._pt1 - unit * abs(distance)
        else:
            moved = self._pt2 + unit * distance
        return Point.cast(moved.x, moved.y, coord_type)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the two endpoints
        """
        return {"pt1": self._pt1.to_dict(), "pt2": self._pt2.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Any:
        """Deserialize from dictionary.

        Raises:
            SerializationError: If an endpoint is missing or malformed
        """
        try:
            raw1, raw2 = data["pt1"], data["pt2"]
        except (KeyError, TypeError) as e:
            raise SerializationError(cls.__name__, "missing endpoint") from e
        return cls(Point.from_dict(raw1), Point.from_dict(raw2))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self._pt1 == other._pt1 and self._pt2 == other._pt2) or (
            self._pt1 == other._pt2 and self._pt2 == other._pt1
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self._pt1}-->{self._pt2}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pt1!r}, {self._pt2!r})"


class Line(LinearShape):
    """An infinite line through two points."""

    __slots__ = ()

    bounded = False


class Segment(LinearShape):
    """A line segment bounded by its two endpoints."""

    __slots__ = ()

    bounded = True
