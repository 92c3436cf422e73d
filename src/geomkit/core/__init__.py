"""Core geometry algorithms for geomkit.

This module contains the algorithms that operate on the domain shapes:

- Convex hull construction (Graham scan) and bounding boxes
- Pairwise overlap of every supported shape combination
- Affine transforms (translate, rotate, mirror)

All functions are:
- Stateless (safe to call from any thread)
- Pure (inputs are never modified, results are new shapes)
- Null-propagating (invalid or disjoint input gives a null result)

Key functions:
- graham_scan: Convex hull of a point set
- overlap: Intersection of two shapes, dispatched on their types
- translate, rotate, mirror: Affine transforms for every shape
"""

from geomkit.core.hull import (
    HullResult,
    bounding_box,
    find_pivot,
    graham_scan,
    sort_by_angle,
)
from geomkit.core.overlap import (
    overlap,
    overlap_line_line,
    overlap_line_segment,
    overlap_linear_polygon,
    overlap_linear_rectangle,
    overlap_point_linear,
    overlap_point_point,
    overlap_point_polygon,
    overlap_point_rectangle,
    overlap_rectangle_rectangle,
    overlap_segment_segment,
)
from geomkit.core.transform import mirror, rotate, translate

__all__ = [
    # Hull
    "HullResult",
    "bounding_box",
    "find_pivot",
    "graham_scan",
    "sort_by_angle",
    # Overlap
    "overlap",
    "overlap_line_line",
    "overlap_line_segment",
    "overlap_linear_polygon",
    "overlap_linear_rectangle",
    "overlap_point_linear",
    "overlap_point_point",
    "overlap_point_polygon",
    "overlap_point_rectangle",
    "overlap_rectangle_rectangle",
    "overlap_segment_segment",
    # Transforms
    "mirror",
    "rotate",
    "translate",
]
