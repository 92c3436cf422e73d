"""Geomkit - 2D computational geometry primitives.

Geomkit provides points, lines, segments, axis-aligned rectangles and convex
polygons, together with convex hull construction, pairwise intersection
("overlap") and affine transforms. Coordinates are compared with a relative
tolerance, and operations that have no result return a null shape instead of
raising.

Example:
    >>> from geomkit import Line, Point, overlap
    >>> overlap(Line(Point(0, 0), Point(1, 1)), Line(Point(0, 1), Point(1, 0)))
    Point(x=0.5, y=0.5)
"""

from geomkit.core import graham_scan, mirror, overlap, rotate, translate
from geomkit.domain import Direction, Line, LinearShape, Point, Polygon, Rectangle, Segment
from geomkit.utils.tolerance import using_epsilon

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "Line",
    "LinearShape",
    "Point",
    "Polygon",
    "Rectangle",
    "Segment",
    "__version__",
    "graham_scan",
    "mirror",
    "overlap",
    "rotate",
    "translate",
    "using_epsilon",
]
