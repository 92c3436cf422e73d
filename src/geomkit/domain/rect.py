"""Axis-aligned rectangles.

The y axis grows downward, so ``top <= bottom``. An inverted rectangle or one
with an infinite coordinate is the null rectangle.
"""

from dataclasses import dataclass
from typing import Any

from geomkit.domain.line import Segment
from geomkit.domain.point import Point, decode_coord, encode_coord
from geomkit.utils.tolerance import NULL_COORD, Number, equal, greater_than, is_null_coord


@dataclass(frozen=True, slots=True, eq=False)
class Rectangle:
    """An axis-aligned rectangle.

    Attributes:
        left: Smallest x
        right: Largest x
        top: Smallest y
        bottom: Largest y
    """

    left: Number
    right: Number
    top: Number
    bottom: Number

    def __post_init__(self) -> None:
        coords = (self.left, self.right, self.top, self.bottom)
        if (
            any(is_null_coord(c) for c in coords)
            or greater_than(self.left, self.right)
            or greater_than(self.top, self.bottom)
        ):
            for name in ("left", "right", "top", "bottom"):
                object.__setattr__(self, name, NULL_COORD)

    @classmethod
    def null(cls) -> "Rectangle":
        """Get the null rectangle."""
        return cls(NULL_COORD, NULL_COORD, NULL_COORD, NULL_COORD)

    @classmethod
    def from_location(cls, location: Point, width: Number, height: Number) -> "Rectangle":
        """Build from the top-left corner and a size."""
        if location.is_null():
            return cls.null()
        return cls(location.x, location.x + width, location.y, location.y + height)

    def is_null(self) -> bool:
        return is_null_coord(self.left)

    def width(self) -> Number:
        if self.is_null():
            return 0
        return self.right - self.left

    def height(self) -> Number:
        if self.is_null():
            return 0
        return self.bottom - self.top

    def area(self) -> Number:
        return self.width() * self.height()

    def perimeter(self) -> Number:
        return 2 * self.width() + 2 * self.height()

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def top_right(self) -> Point:
        return Point(self.right, self.top)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    @property
    def bottom_left(self) -> Point:
        return Point(self.left, self.bottom)

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Corner points, clockwise from the top-left (y axis down)."""
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)

    def left_edge(self) -> Segment:
        return Segment(self.top_left, self.bottom_left)

    def right_edge(self) -> Segment:
        return Segment(self.top_right, self.bottom_right)

    def top_edge(self) -> Segment:
        return Segment(self.top_left, self.top_right)

    def bottom_edge(self) -> Segment:
        return Segment(self.bottom_left, self.bottom_right)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with left/right/top/bottom, None for a null rectangle
        """
        return {
            "left": encode_coord(self.left),
            "right": encode_coord(self.right),
            "top": encode_coord(self.top),
            "bottom": encode_coord(self.bottom),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Rectangle":
        """Deserialize from dictionary.

        Raises:
            SerializationError: If a field is missing or not numeric
        """
        return cls(*(
            decode_coord("Rectangle", data, key)
            for key in ("left", "right", "top", "bottom")
        ))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        if self.is_null() or other.is_null():
            return self.is_null() and other.is_null()
        return (
            equal(self.left, other.left)
            and equal(self.right, other.right)
            and equal(self.top, other.top)
            and equal(self.bottom, other.bottom)
        )

    def __str__(self) -> str:
        return f"{self.left} {self.right} {self.top} {self.bottom}"
