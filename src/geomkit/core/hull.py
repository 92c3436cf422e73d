"""Convex hull construction (Graham scan).

The hull of a point set is built by:
1. Dropping null points
2. Picking the pivot: lowest y, ties broken by lowest x
3. Sorting the rest by angle around the pivot, closer points first on ties
4. Scanning the sorted points, keeping only left turns

Collinear candidates are resolved by keeping whichever point is farther from
the second-to-last hull vertex. That keeps the outermost point of every ray
and drops interior collinear points and duplicates.

The resulting vertices wind counter-clockwise (with the y axis pointing up)
starting at the pivot. Fewer than three vertices yields a null result.
"""

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cmp_to_key

from geomkit.domain.point import Point
from geomkit.domain.rect import Rectangle
from geomkit.utils.tolerance import equal, greater_than, less_than, orientation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HullResult:
    """Output of a hull computation.

    Attributes:
        vertices: Hull vertices in winding order, empty when null
        bounding_box: Axis-aligned box bounding the vertices
    """

    vertices: tuple[Point, ...]
    bounding_box: Rectangle

    @classmethod
    def null(cls) -> "HullResult":
        return cls(vertices=(), bounding_box=Rectangle.null())

    def is_null(self) -> bool:
        return self.bounding_box.is_null()


def find_pivot(points: Sequence[Point]) -> Point:
    """Find the bottom-most point, left-most among ties.

    Args:
        points: Non-empty sequence of non-null points

    Returns:
        The pivot point
    """
    best = points[0]
    for point in points[1:]:
        if less_than(point.y, best.y):
            best = point
        elif equal(point.y, best.y) and less_than(point.x, best.x):
            best = point
    return best


def _polar_comparator(pivot: Point):
    def compare(lhs: Point, rhs: Point) -> int:
        if lhs == pivot:
            return 0 if rhs == pivot else -1
        if rhs == pivot:
            return 1

        angle1 = math.atan2(lhs.y - pivot.y, lhs.x - pivot.x)
        angle2 = math.atan2(rhs.y - pivot.y, rhs.x - pivot.x)
        if equal(angle1, angle2):
            dist1 = pivot.distance_to(lhs)
            dist2 = pivot.distance_to(rhs)
            if equal(dist1, dist2):
                return 0
            return -1 if dist1 < dist2 else 1
        return -1 if angle1 < angle2 else 1

    return compare


def sort_by_angle(points: Iterable[Point], pivot: Point) -> list[Point]:
    """Sort points by polar angle around the pivot, closer first on ties."""
    return sorted(points, key=cmp_to_key(_polar_comparator(pivot)))


def bounding_box(points: Sequence[Point]) -> Rectangle:
    """Calculate the tight axis-aligned box around a set of points.

    Args:
        points: Non-null points

    Returns:
        Bounding rectangle, null for an empty sequence
    """
    if not points:
        return Rectangle.null()

    left = right = points[0].x
    top = bottom = points[0].y
    for point in points[1:]:
        if less_than(point.x, left):
            left = point.x
        if greater_than(point.x, right):
            right = point.x
        if less_than(point.y, top):
            top = point.y
        if greater_than(point.y, bottom):
            bottom = point.y

    return Rectangle(left, right, top, bottom)


def graham_scan(points: Iterable[Point]) -> HullResult:
    """Compute the convex hull of a point set.

    Args:
        points: Points in any order; nulls and duplicates are allowed

    Returns:
        HullResult with the hull vertices and their bounding box. The result
        is null when fewer than three non-collinear points remain.

    Examples:
        >>> square = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4), Point(2, 2)]
        >>> [p.to_tuple() for p in graham_scan(square).vertices]
        [(0, 0), (4, 0), (4, 4), (0, 4)]
    """
    candidates = [p for p in points if not p.is_null()]
    if len(candidates) < 3:
        logger.debug("Hull skipped: only %d usable points", len(candidates))
        return HullResult.null()

    pivot = find_pivot(candidates)
    ordered = sort_by_angle(candidates, pivot)

    stack = ordered[:2]
    for candidate in ordered[2:]:
        while True:
            if len(stack) < 2:
                stack.append(candidate)
                break

            turn = orientation(stack[-2], stack[-1], candidate)
            if turn > 0:
                stack.append(candidate)
                break
            if turn == 0:
                base = stack[-2]
                if greater_than(base.distance_to(candidate), base.distance_to(stack[-1])):
                    stack.pop()
                    continue
                # candidate lies between base and top, or duplicates top
                break
            stack.pop()

    if len(stack) < 3:
        logger.debug("Hull degenerate: %d points collapse to %d vertices",
                     len(candidates), len(stack))
        return HullResult.null()

    logger.debug("Hull built: %d points -> %d vertices", len(candidates), len(stack))
    return HullResult(vertices=tuple(stack), bounding_box=bounding_box(stack))
