"""Unit tests for convex hull construction.

Tests cover:
- Pivot selection and angular ordering
- Bounding boxes of point sets
- Graham scan output (order, winding, degenerate input)
"""

import random

from geomkit.core.hull import (
    HullResult,
    bounding_box,
    find_pivot,
    graham_scan,
    sort_by_angle,
)
from geomkit.domain import Point, Rectangle
from geomkit.utils.tolerance import orientation


def _random_points(seed: int, count: int = 25) -> list[Point]:
    rng = random.Random(seed)
    return [Point(rng.randint(0, 100), rng.randint(0, 100)) for _ in range(count)]


class TestPivotAndSort:
    """Tests for pivot selection and polar sorting."""

    def test_pivot_lowest_y(self) -> None:
        """Test that the lowest y wins."""
        assert find_pivot([Point(5, 3), Point(2, 1), Point(0, 2)]) == Point(2, 1)

    def test_pivot_tie_breaks_on_x(self) -> None:
        """Test that equal y falls back to the lowest x."""
        assert find_pivot([Point(5, 1), Point(2, 1), Point(3, 4)]) == Point(2, 1)

    def test_sort_by_angle(self) -> None:
        """Test angular order with closer points first on ties."""
        pivot = Point(0, 0)
        ordered = sort_by_angle(
            [Point(0, 4), Point(2, 2), Point(4, 0), Point(1, 1), pivot], pivot
        )
        assert [p.to_tuple() for p in ordered] == [
            (0, 0), (4, 0), (1, 1), (2, 2), (0, 4),
        ]


class TestBoundingBox:
    """Tests for bounding_box."""

    def test_empty(self) -> None:
        """Test that no points give the null rectangle."""
        assert bounding_box([]).is_null()

    def test_points(self) -> None:
        """Test the tight box around a point set."""
        box = bounding_box([Point(1, 5), Point(-2, 3), Point(4, -1)])
        assert box == Rectangle(-2, 4, -1, 5)


class TestGrahamScan:
    """Tests for graham_scan."""

    def test_square_with_center(self) -> None:
        """Test the canonical square example."""
        result = graham_scan(
            [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4), Point(2, 2)]
        )
        assert [p.to_tuple() for p in result.vertices] == [(0, 0), (4, 0), (4, 4), (0, 4)]
        assert result.bounding_box == Rectangle(0, 4, 0, 4)
        assert not result.is_null()

    def test_nulls_are_ignored(self) -> None:
        """Test that null points do not take part."""
        result = graham_scan([Point.null(), Point(0, 0), Point(2, 0), Point(0, 2)])
        assert len(result.vertices) == 3

    def test_too_few_points(self) -> None:
        """Test that fewer than three points give a null result."""
        assert graham_scan([Point(0, 0), Point(1, 0)]).is_null()
        assert graham_scan([Point(0, 0), Point(1, 0), Point.null()]).is_null()
        assert graham_scan([]) == HullResult.null()

    def test_collinear(self) -> None:
        """Test that collinear input degenerates to null."""
        points = [Point(i, 2 * i) for i in range(6)]
        assert graham_scan(points).is_null()

    def test_unsorted_input(self) -> None:
        """Test that input order does not matter."""
        points = [Point(4, 4), Point(0, 4), Point(2, 2), Point(4, 0), Point(0, 0)]
        shuffled = list(reversed(points))
        assert graham_scan(points).vertices == graham_scan(shuffled).vertices

    def test_float_points(self) -> None:
        """Test a hull over float coordinates."""
        result = graham_scan([Point(0.5, 0.5), Point(2.5, 0.5), Point(1.5, 2.0), Point(1.5, 1.0)])
        assert [p.to_tuple() for p in result.vertices] == [(0.5, 0.5), (2.5, 0.5), (1.5, 2.0)]

    def test_random_hulls_are_convex(self) -> None:
        """Test that every random hull winds strictly counter-clockwise."""
        for seed in range(10):
            vertices = graham_scan(_random_points(seed)).vertices
            n = len(vertices)
            assert n >= 3
            for i in range(n):
                turn = orientation(vertices[i], vertices[(i + 1) % n], vertices[(i + 2) % n])
                assert turn == 1

    def test_random_hulls_contain_all_points(self) -> None:
        """Test that no input point lies outside the hull."""
        for seed in range(10):
            points = _random_points(seed)
            vertices = graham_scan(points).vertices
            n = len(vertices)
            for point in points:
                for i in range(n):
                    assert orientation(vertices[i], vertices[(i + 1) % n], point) >= 0

    def test_random_hulls_idempotent(self) -> None:
        """Test hull(hull(P)) == hull(P)."""
        for seed in range(10):
            first = graham_scan(_random_points(seed))
            second = graham_scan(first.vertices)
            assert second.vertices == first.vertices
            assert second.bounding_box == bounding_box(_random_points(seed))
