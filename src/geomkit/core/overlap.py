"""Overlap (intersection) of pairs of shapes.

    +===========+===========+===========+
    | Shape one | Shape two |  Result   |
    +===========+===========+===========+
    | Point     | Point     | Point     |
    |           | Line      | Point     |
    |           | Segment   | Point     |
    |           | Rectangle | Point     |
    |           | Polygon   | Point     |
    +-----------+-----------+-----------+
    | Line      | Line      | Point     |
    |           | Segment   | Point     |
    | Segment   | Segment   | Point     |
    +-----------+-----------+-----------+
    | Line or   | Rectangle | Segment   |
    | Segment   | Polygon   | Segment   |
    +-----------+-----------+-----------+
    | Rectangle | Rectangle | Rectangle |
    +-----------+-----------+-----------+

Every pair works in either order. When the shapes do not intersect, or either
one is null, the null value of the result type is returned. Coordinates that
have to be computed (as opposed to returned from an operand) are round-cast to
``coord_type``, ``float`` unless the caller asks for ``int``.
"""

import logging
import math
from collections.abc import Callable
from typing import Any

from geomkit.domain import Line, LinearShape, Point, Polygon, Rectangle, Segment
from geomkit.exceptions import UnsupportedOverlapError
from geomkit.utils.tolerance import equal, less_equal, less_than, orientation

logger = logging.getLogger(__name__)

Shape = Point | LinearShape | Rectangle | Polygon


# Point with *


def overlap_point_point(pt1: Point, pt2: Point) -> Point:
    if pt1.is_null() or pt2.is_null():
        return Point.null()
    return pt1 if pt1 == pt2 else Point.null()


def overlap_point_linear(pt: Point, shape: LinearShape) -> Point:
    """Point on a line (anywhere) or a segment (within its endpoints)."""
    if pt.is_null() or shape.is_null():
        return Point.null()
    return pt if shape.contains(pt) else Point.null()


def overlap_point_rectangle(pt: Point, rect: Rectangle) -> Point:
    """Point inside a rectangle, edges included."""
    if pt.is_null() or rect.is_null():
        return Point.null()
    if (
        less_equal(rect.left, pt.x)
        and less_equal(pt.x, rect.right)
        and less_equal(rect.top, pt.y)
        and less_equal(pt.y, rect.bottom)
    ):
        return pt
    return Point.null()


def overlap_point_polygon(pt: Point, poly: Polygon) -> Point:
    """Point inside a convex polygon, edges included.

    After a bounding box test, the point has to lie on the same side of every
    hull edge. Points on an edge count as either side.
    """
    if pt.is_null() or poly.is_null():
        return Point.null()
    if overlap_point_rectangle(pt, poly.bounding_box).is_null():
        return Point.null()

    sides: set[int] = set()
    for start, end in poly.edges():
        turn = orientation(start, end, pt)
        if turn:
            sides.add(turn)
            if len(sides) > 1:
                return Point.null()
    return pt


# Line with *


def _supporting_intersection(ln1: LinearShape, ln2: LinearShape) -> Point:
    """Unrounded intersection of the infinite lines through two shapes."""
    if ln1.is_null() or ln2.is_null():
        return Point.null()

    slope1, slope2 = ln1.slope(), ln2.slope()
    # parallel, both vertical included
    if equal(slope1, slope2):
        return Point.null()

    if ln1.is_vertical():
        x = ln1.pt1.x
        return Point(x, slope2 * x + ln2.intercept())
    if ln2.is_vertical():
        x = ln2.pt1.x
        return Point(x, slope1 * x + ln1.intercept())

    x = (ln1.intercept() - ln2.intercept()) / (slope2 - slope1)
    return Point(x, slope1 * x + ln1.intercept())


def overlap_line_line(ln1: Line, ln2: Line, coord_type: type = float) -> Point:
    """Crossing point of two infinite lines.

    Parallel lines (coincident ones included) have no single crossing point
    and give null.
    """
    crossing = _supporting_intersection(ln1, ln2)
    if crossing.is_null():
        return crossing
    return Point.cast(crossing.x, crossing.y, coord_type)


def overlap_line_segment(line: Line, segment: Segment, coord_type: type = float) -> Point:
    crossing = _supporting_intersection(line, segment)
    if crossing.is_null() or not segment.spans(crossing):
        return Point.null()
    return Point.cast(crossing.x, crossing.y, coord_type)


def overlap_segment_segment(
    seg1: Segment, seg2: Segment, coord_type: type = float
) -> Point:
    """Intersection point of two bounded segments.

    Uses orientation tests: the segments cross when each one's endpoints lie
    on opposite sides of (or on) the other's supporting line. Collinear
    segments that share exactly one point return it; collinear segments that
    overlap along a stretch have no single intersection point and give null.
    """
    if seg1.is_null() or seg2.is_null():
        return Point.null()

    o1 = orientation(seg1.pt1, seg1.pt2, seg2.pt1)
    o2 = orientation(seg1.pt1, seg1.pt2, seg2.pt2)
    o3 = orientation(seg2.pt1, seg2.pt2, seg1.pt1)
    o4 = orientation(seg2.pt1, seg2.pt2, seg1.pt2)

    if o1 == o2 == o3 == o4 == 0:
        shared: list[Point] = []
        candidates = [p for p in (seg2.pt1, seg2.pt2) if seg1.spans(p)]
        candidates += [p for p in (seg1.pt1, seg1.pt2) if seg2.spans(p)]
        for point in candidates:
            if point not in shared:
                shared.append(point)
        if len(shared) == 1:
            return Point.cast(shared[0].x, shared[0].y, coord_type)
        return Point.null()

    if o1 == o2 or o3 == o4:
        return Point.null()

    crossing = _supporting_intersection(seg1, seg2)
    if crossing.is_null():
        return crossing
    return Point.cast(crossing.x, crossing.y, coord_type)


def _segment_between(shape: LinearShape, lo: float, hi: float, coord_type: type) -> Segment:
    first = shape.pt1 + shape.direction * lo
    second = shape.pt1 + shape.direction * hi
    return Segment(Point.cast(first.x, first.y, coord_type),
                   Point.cast(second.x, second.y, coord_type))


def _clip_segment_to_box(segment: Segment, rect: Rectangle, coord_type: type) -> Segment:
    """Liang-Barsky clip of a segment against a rectangle, edges included."""
    origin, direction = segment.pt1, segment.direction
    lo, hi = 0.0, 1.0
    for rate, start, low, high in (
        (direction.dx, origin.x, rect.left, rect.right),
        (direction.dy, origin.y, rect.top, rect.bottom),
    ):
        if rate == 0:
            if less_than(start, low) or less_than(high, start):
                return Segment.null()
            continue
        t_low = (low - start) / rate
        t_high = (high - start) / rate
        lo = max(lo, min(t_low, t_high))
        hi = min(hi, max(t_low, t_high))

    if not less_than(lo, hi):
        return Segment.null()
    return _segment_between(segment, lo, hi, coord_type)


def overlap_linear_rectangle(
    shape: LinearShape, rect: Rectangle, coord_type: type = float
) -> Segment:
    """Part of a line or segment inside a rectangle.

    Segments are clipped against the four edges (Liang-Barsky), edges
    included, so a segment inside the rectangle comes back unchanged.

    Lines are intersected with each edge (as lines). Only crossings strictly
    inside an edge's span count, so a line that passes exactly through a
    corner does not register there. The first qualifying pair, checked in
    the order left/right, left/top, left/bottom, right/top, right/bottom,
    top/bottom, forms the chord.

    Returns:
        The overlapping segment, or the null segment
    """
    if shape.is_null() or rect.is_null():
        return Segment.null()
    if shape.bounded:
        return _clip_segment_to_box(shape, rect, coord_type)

    left = _supporting_intersection(shape, rect.left_edge())
    right = _supporting_intersection(shape, rect.right_edge())
    top = _supporting_intersection(shape, rect.top_edge())
    bottom = _supporting_intersection(shape, rect.bottom_edge())

    hits = {
        "left": less_than(rect.top, left.y) and less_than(left.y, rect.bottom),
        "right": less_than(rect.top, right.y) and less_than(right.y, rect.bottom),
        "top": less_than(rect.left, top.x) and less_than(top.x, rect.right),
        "bottom": less_than(rect.left, bottom.x) and less_than(bottom.x, rect.right),
    }
    crossings = {"left": left, "right": right, "top": top, "bottom": bottom}

    for first, second in (
        ("left", "right"),
        ("left", "top"),
        ("left", "bottom"),
        ("right", "top"),
        ("right", "bottom"),
        ("top", "bottom"),
    ):
        if hits[first] and hits[second]:
            start, end = crossings[first], crossings[second]
            return Segment(Point.cast(start.x, start.y, coord_type),
                           Point.cast(end.x, end.y, coord_type))

    return Segment.null()


def overlap_linear_polygon(
    shape: LinearShape,
    poly: Polygon,
    coord_type: type = float,
    bounding_box_only: bool = False,
) -> Segment:
    """Part of a line or segment inside a convex polygon.

    The polygon's bounding box is checked first. The chord is then clipped
    against every hull edge (Cyrus-Beck), which is exact for convex shapes.

    Args:
        shape: Line or segment
        poly: Convex polygon
        coord_type: Type the resulting coordinates are round-cast to
        bounding_box_only: Return the overlap with the bounding box instead
            of the hull. This is an approximation that treats the polygon as
            its bounding rectangle.

    Returns:
        The overlapping segment, or the null segment
    """
    if shape.is_null() or poly.is_null():
        return Segment.null()

    if bounding_box_only:
        return overlap_linear_rectangle(shape, poly.bounding_box, coord_type)
    if _misses_box(shape, poly.bounding_box):
        return Segment.null()

    winding = 1 if _signed_area(poly) > 0 else -1
    origin = shape.pt1
    direction = shape.direction
    lo, hi = (0.0, 1.0) if shape.bounded else (-math.inf, math.inf)

    for start, end in poly.edges():
        edge = end - start
        if equal(edge.dx * direction.dy, edge.dy * direction.dx):
            if orientation(start, end, origin) * winding < 0:
                return Segment.null()
            continue
        inside = winding * edge.cross(origin - start)
        rate = winding * edge.cross(direction)
        t = -inside / rate
        if rate > 0:
            lo = max(lo, t)
        else:
            hi = min(hi, t)

    if not less_than(lo, hi):
        return Segment.null()
    return _segment_between(shape, lo, hi, coord_type)


def _misses_box(shape: LinearShape, rect: Rectangle) -> bool:
    """Inclusive rejection test: True only if the shape cannot touch the box."""
    sides = {orientation(shape.pt1, shape.pt2, corner) for corner in rect.corners()}
    if sides in ({1}, {-1}):
        return True
    if not shape.bounded:
        return False
    return (
        less_than(max(shape.pt1.x, shape.pt2.x), rect.left)
        or less_than(rect.right, min(shape.pt1.x, shape.pt2.x))
        or less_than(max(shape.pt1.y, shape.pt2.y), rect.top)
        or less_than(rect.bottom, min(shape.pt1.y, shape.pt2.y))
    )


def _signed_area(poly: Polygon) -> float:
    return sum(s.x * e.y - e.x * s.y for s, e in poly.edges()) / 2.0


# Rectangle with *


def overlap_rectangle_rectangle(rect1: Rectangle, rect2: Rectangle) -> Rectangle:
    """Common area of two rectangles, null unless it has positive area."""
    if rect1.is_null() or rect2.is_null():
        return Rectangle.null()

    left = max(rect1.left, rect2.left)
    right = min(rect1.right, rect2.right)
    top = max(rect1.top, rect2.top)
    bottom = min(rect1.bottom, rect2.bottom)
    if not less_than(left, right) or not less_than(top, bottom):
        return Rectangle.null()
    return Rectangle(left, right, top, bottom)


# Dispatch


# (left type, right type, function, takes coord_type)
_RULES: list[tuple[type, type, Callable[..., Any], bool]] = [
    (Point, Point, overlap_point_point, False),
    (Point, LinearShape, overlap_point_linear, False),
    (Point, Rectangle, overlap_point_rectangle, False),
    (Point, Polygon, overlap_point_polygon, False),
    (Line, Line, overlap_line_line, True),
    (Line, Segment, overlap_line_segment, True),
    (Segment, Segment, overlap_segment_segment, True),
    (LinearShape, Rectangle, overlap_linear_rectangle, True),
    (LinearShape, Polygon, overlap_linear_polygon, True),
    (Rectangle, Rectangle, overlap_rectangle_rectangle, False),
]


def overlap(left: Shape, right: Shape, coord_type: type = float) -> Shape:
    """Intersect two shapes.

    Args:
        left: First shape
        right: Second shape
        coord_type: Type computed coordinates are round-cast to

    Returns:
        The overlap, or the null value of the result type

    Raises:
        UnsupportedOverlapError: If no rule covers the pair

    Examples:
        >>> overlap(Rectangle(0, 2, 0, 2), Rectangle(1, 3, 1, 3))
        Rectangle(left=1, right=2, top=1, bottom=2)
    """
    for left_type, right_type, func, takes_coord_type in _RULES:
        if isinstance(left, left_type) and isinstance(right, right_type):
            operands = (left, right)
        elif isinstance(right, left_type) and isinstance(left, right_type):
            operands = (right, left)
        else:
            continue

        if takes_coord_type:
            result = func(*operands, coord_type=coord_type)
        else:
            result = func(*operands)
        logger.debug("overlap %s x %s -> %s", type(left).__name__,
                     type(right).__name__, "null" if result.is_null() else result)
        return result

    raise UnsupportedOverlapError(left, right)
