"""Affine transforms for every primitive shape.

- translate: shift by (dx, dy); exact, coordinate types are kept
- rotate: turn about a point by an angle in degrees
- mirror: reflect across a line

Rotation and reflection compute new coordinates, which are round-cast to
``coord_type`` (``float`` unless the caller asks for ``int``). Rectangles do
not stay axis-aligned under either, so they come back as Polygons. Polygons
are rebuilt from their transformed vertices so the hull and bounding box
stay consistent. Null shapes map to null shapes.
"""

import math
from collections.abc import Callable

from geomkit.domain import LinearShape, Point, Polygon, Rectangle
from geomkit.exceptions import UnsupportedTransformError
from geomkit.utils.tolerance import Number

Shape = Point | LinearShape | Rectangle | Polygon


def _map_points(
    shape: Shape, operation: str, move: Callable[[Point], Point]
) -> Shape:
    """Apply a point mapping to every defining point of a non-rectangle shape."""
    if isinstance(shape, Point):
        return move(shape) if not shape.is_null() else shape
    if isinstance(shape, LinearShape):
        if shape.is_null():
            return type(shape).null()
        return type(shape)(move(shape.pt1), move(shape.pt2))
    if isinstance(shape, Polygon):
        if shape.is_null():
            return Polygon.null()
        return Polygon([move(v) for v in shape.vertices])
    raise UnsupportedTransformError(operation, shape)


def translate(shape: Shape, dx: Number, dy: Number) -> Shape:
    """Shift a shape.

    Args:
        shape: Point, Line, Segment, Rectangle or Polygon
        dx: Offset along x
        dy: Offset along y

    Returns:
        Shape of the same type

    Raises:
        UnsupportedTransformError: If shape is not a supported shape
    """
    if isinstance(shape, Rectangle):
        if shape.is_null():
            return shape
        return Rectangle(shape.left + dx, shape.right + dx,
                         shape.top + dy, shape.bottom + dy)
    return _map_points(shape, "translate", lambda p: Point(p.x + dx, p.y + dy))


def rotate(
    shape: Shape,
    about: Point,
    angle: float,
    clockwise: bool = True,
    coord_type: type = float,
) -> Shape:
    """Rotate a shape about a point.

    Clockwise is as seen with the y axis pointing down (screen coordinates).

    Args:
        shape: Point, Line, Segment, Rectangle or Polygon
        about: Center of rotation
        angle: Angle in degrees
        clockwise: Rotation sense
        coord_type: Type the resulting coordinates are round-cast to

    Returns:
        Rotated shape; a Rectangle becomes a Polygon

    Raises:
        UnsupportedTransformError: If shape is not a supported shape

    Examples:
        >>> rotate(Point(1, 0), Point(0, 0), 90, coord_type=int)
        Point(x=0, y=1)
    """
    radians = math.radians(angle if clockwise else -angle)
    cos_a, sin_a = math.cos(radians), math.sin(radians)

    def move(point: Point) -> Point:
        if about.is_null():
            return Point.null()
        rel_x, rel_y = point.x - about.x, point.y - about.y
        return Point.cast(
            about.x + cos_a * rel_x - sin_a * rel_y,
            about.y + sin_a * rel_x + cos_a * rel_y,
            coord_type,
        )

    if isinstance(shape, Rectangle):
        return _rectangle_as_polygon(shape, move)
    return _map_points(shape, "rotate", move)


def mirror(shape: Shape, over: LinearShape, coord_type: type = float) -> Shape:
    """Reflect a shape across the infinite line through ``over``.

    Args:
        shape: Point, Line, Segment, Rectangle or Polygon
        over: Line or segment defining the mirror axis
        coord_type: Type the resulting coordinates are round-cast to

    Returns:
        Mirrored shape; a Rectangle becomes a Polygon. A null axis gives the
        null value of the result type.

    Raises:
        UnsupportedTransformError: If shape is not a supported shape
    """
    axis = over.direction
    length_sq = axis.dot(axis) if not over.is_null() else 0

    def move(point: Point) -> Point:
        if over.is_null():
            return Point.null()
        rel = point - over.anchor
        scale = 2 * rel.dot(axis) / length_sq
        return Point.cast(
            over.anchor.x + scale * axis.dx - rel.dx,
            over.anchor.y + scale * axis.dy - rel.dy,
            coord_type,
        )

    if isinstance(shape, Rectangle):
        return _rectangle_as_polygon(shape, move)
    return _map_points(shape, "mirror", move)


def _rectangle_as_polygon(rect: Rectangle, move: Callable[[Point], Point]) -> Polygon:
    if rect.is_null():
        return Polygon.null()
    return Polygon([move(corner) for corner in rect.corners()])
