"""Point and direction types.

This module defines the two coordinate-pair types everything else is built on:
- Point: a location in the plane, null when any coordinate is infinite
- Direction: a displacement between two locations with a cached length

Both are immutable. Equality goes through the tolerance kernel, so neither type
is hashable.
"""

import math
from dataclasses import dataclass, field
from typing import Any

from geomkit.exceptions import SerializationError
from geomkit.utils.tolerance import (
    NULL_COORD,
    Number,
    equal,
    is_exact,
    is_null_coord,
    round_nearest_cast,
)


def decode_coord(shape: str, data: dict[str, Any], key: str) -> Number:
    try:
        value = data[key]
    except (KeyError, TypeError) as e:
        raise SerializationError(shape, f"missing field '{key}'") from e
    if value is None:
        return NULL_COORD
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise SerializationError(shape, f"field '{key}' is not a number: {value!r}")
    return value


def encode_coord(value: Number) -> Number | None:
    return None if is_null_coord(value) else value


@dataclass(frozen=True, slots=True, eq=False)
class Point:
    """A location in 2D space.

    A point with an infinite coordinate is the null point; construction
    normalizes it to ``(inf, inf)``. Coordinates may be ``int`` or ``float``;
    integer coordinates compare exactly.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: Number
    y: Number

    def __post_init__(self) -> None:
        if is_null_coord(self.x) or is_null_coord(self.y):
            object.__setattr__(self, "x", NULL_COORD)
            object.__setattr__(self, "y", NULL_COORD)

    @classmethod
    def null(cls) -> "Point":
        """Get the null point."""
        return cls(NULL_COORD, NULL_COORD)

    def is_null(self) -> bool:
        return is_null_coord(self.x)

    def is_integral(self) -> bool:
        """Check if both coordinates are integers."""
        return is_exact(self.x, self.y)

    @classmethod
    def cast(cls, x: float, y: float, coord_type: type = float) -> "Point":
        """Build a point from raw values, round-cast to the coordinate type."""
        return cls(round_nearest_cast(x, coord_type), round_nearest_cast(y, coord_type))

    def to_tuple(self) -> tuple[Number, Number]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point (inf if either is null)."""
        if self.is_null() or other.is_null():
            return math.inf
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields, None for a null point
        """
        return {"x": encode_coord(self.x), "y": encode_coord(self.y)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance

        Raises:
            SerializationError: If a field is missing or not numeric
        """
        return cls(decode_coord("Point", data, "x"), decode_coord("Point", data, "y"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        if self.is_null() or other.is_null():
            return self.is_null() and other.is_null()
        return equal(self.x, other.x) and equal(self.y, other.y)

    def __add__(self, other: object) -> "Point":
        if not isinstance(other, Direction):
            return NotImplemented
        if self.is_null() or other.is_null():
            return Point.null()
        return Point(self.x + other.dx, self.y + other.dy)

    def __sub__(self, other: object) -> Any:
        if isinstance(other, Direction):
            return self + (-other)
        if isinstance(other, Point):
            if self.is_null() or other.is_null():
                return Direction.null()
            return Direction(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}]"


@dataclass(frozen=True, slots=True, eq=False)
class Direction:
    """A displacement in 2D space with a cached length.

    Attributes:
        dx: Displacement along x
        dy: Displacement along y
        length: Euclidean length (inf for the null direction)
    """

    dx: Number
    dy: Number
    length: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if is_null_coord(self.dx) or is_null_coord(self.dy):
            object.__setattr__(self, "dx", NULL_COORD)
            object.__setattr__(self, "dy", NULL_COORD)
            object.__setattr__(self, "length", math.inf)
        else:
            object.__setattr__(self, "length", math.hypot(self.dx, self.dy))

    @classmethod
    def null(cls) -> "Direction":
        """Get the null direction."""
        return cls(NULL_COORD, NULL_COORD)

    def is_null(self) -> bool:
        return is_null_coord(self.dx)

    def is_zero(self) -> bool:
        """Check if the displacement is zero within tolerance."""
        return equal(self.dx, 0) and equal(self.dy, 0)

    def normalize(self) -> "Direction":
        """Unit direction with the same orientation.

        Returns:
            Direction of length 1, or the null direction when this one is
            null or zero-length
        """
        if self.is_null() or self.is_zero():
            return Direction.null()
        return Direction(self.dx / self.length, self.dy / self.length)

    def dot(self, other: "Direction") -> Number:
        return self.dx * other.dx + self.dy * other.dy

    def cross(self, other: "Direction") -> Number:
        """Z component of the 3D cross product of the two displacements."""
        return self.dx * other.dy - self.dy * other.dx

    def __mul__(self, scalar: object) -> "Direction":
        if isinstance(scalar, bool) or not isinstance(scalar, int | float):
            return NotImplemented
        if self.is_null():
            return self
        return Direction(self.dx * scalar, self.dy * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Direction":
        if self.is_null():
            return self
        return Direction(-self.dx, -self.dy)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        if self.is_null() or other.is_null():
            return self.is_null() and other.is_null()
        return equal(self.dx, other.dx) and equal(self.dy, other.dy)

    def to_dict(self) -> dict[str, Any]:
        return {"dx": encode_coord(self.dx), "dy": encode_coord(self.dy)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Direction":
        return cls(
            decode_coord("Direction", data, "dx"),
            decode_coord("Direction", data, "dy"),
        )

    def __str__(self) -> str:
        return f"<{self.dx}, {self.dy}>"
