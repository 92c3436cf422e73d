"""Unit tests for the numeric tolerance kernel.

Tests cover:
- Tolerant comparisons (reflexive, symmetric, trichotomy)
- Exact comparison of integers
- Context-local epsilon overrides
- Round-to-nearest casts
- Orientation of point triples
"""

import math

import pytest

from geomkit.domain import Point
from geomkit.exceptions import CoordinateTypeError
from geomkit.utils.tolerance import (
    DEFAULT_EPSILON,
    RoundStyle,
    current_epsilon,
    equal,
    greater_equal,
    greater_than,
    is_exact,
    is_null_coord,
    less_equal,
    less_than,
    not_equal,
    orientation,
    round_nearest_cast,
    sign,
    using_epsilon,
)

SAMPLES = [0, 1, -1, 7, 0.1 + 0.2, 0.3, 1e-12, -2.5, 1e9, 1e9 + 0.5, math.inf]


class TestEqual:
    """Tests for tolerant equality."""

    def test_float_noise_is_equal(self) -> None:
        """Test that rounding noise is absorbed."""
        assert equal(0.1 + 0.2, 0.3)
        assert equal(1.0, 1.0 + 1e-12)

    def test_tolerance_scales_with_magnitude(self) -> None:
        """Test that the bound grows with the operands."""
        assert equal(1e9, 1e9 + 0.5)
        assert not equal(1.0, 1.5)

    def test_integers_compare_exactly(self) -> None:
        """Test that two ints never use the tolerance."""
        assert not equal(1_000_000_000, 1_000_000_001)
        assert equal(5, 5)

    def test_mixed_int_float(self) -> None:
        """Test that an int and a float compare with tolerance."""
        assert equal(1, 1.0)
        assert equal(3, 3.0000000001)

    def test_infinity(self) -> None:
        """Test that infinity only equals itself."""
        assert equal(math.inf, math.inf)
        assert not equal(math.inf, 1e300)
        assert not equal(1e300, math.inf)

    @pytest.mark.parametrize("value", SAMPLES)
    def test_reflexive(self, value: float) -> None:
        """Test equal(a, a) for every sample."""
        assert equal(value, value)

    def test_symmetric(self) -> None:
        """Test equal(a, b) == equal(b, a) for every pair."""
        for a in SAMPLES:
            for b in SAMPLES:
                assert equal(a, b) == equal(b, a)

    def test_trichotomy(self) -> None:
        """Test that exactly one of <, ==, > holds for finite pairs."""
        finite = [v for v in SAMPLES if math.isfinite(v)]
        for a in finite:
            for b in finite:
                outcomes = [less_than(a, b), equal(a, b), greater_than(a, b)]
                assert outcomes.count(True) == 1

    def test_derived_comparisons(self) -> None:
        """Test not_equal, less_equal and greater_equal."""
        assert not_equal(1.0, 2.0)
        assert not not_equal(0.3, 0.1 + 0.2)
        assert less_equal(0.3, 0.1 + 0.2)
        assert less_equal(1, 2)
        assert greater_equal(0.1 + 0.2, 0.3)
        assert not greater_equal(1, 2)

    def test_explicit_epsilon(self) -> None:
        """Test passing eps directly."""
        assert equal(1.0, 1.01, eps=0.01)
        assert not equal(1.0, 1.01)


class TestEpsilonContext:
    """Tests for context-local epsilon overrides."""

    def test_default(self) -> None:
        """Test the default epsilon."""
        assert current_epsilon() == DEFAULT_EPSILON

    def test_override_and_restore(self) -> None:
        """Test that the override applies only inside the block."""
        assert not equal(1.0, 1.0005)
        with using_epsilon(1e-3) as eps:
            assert eps == 1e-3
            assert current_epsilon() == 1e-3
            assert equal(1.0, 1.0005)
        assert current_epsilon() == DEFAULT_EPSILON
        assert not equal(1.0, 1.0005)

    def test_nested(self) -> None:
        """Test nested overrides unwind in order."""
        with using_epsilon(1e-3):
            with using_epsilon(1e-6):
                assert current_epsilon() == 1e-6
            assert current_epsilon() == 1e-3
        assert current_epsilon() == DEFAULT_EPSILON

    @pytest.mark.parametrize("eps", [-1e-9, math.inf, math.nan])
    def test_invalid_epsilon(self, eps: float) -> None:
        """Test that negative or non-finite eps is rejected."""
        with pytest.raises(ValueError):
            with using_epsilon(eps):
                pass


class TestHelpers:
    """Tests for small kernel helpers."""

    def test_is_exact(self) -> None:
        """Test int detection (bool excluded)."""
        assert is_exact(1, 2, 3)
        assert not is_exact(1, 2.0)
        assert not is_exact(True)

    def test_is_null_coord(self) -> None:
        """Test the null sentinel check."""
        assert is_null_coord(math.inf)
        assert is_null_coord(-math.inf)
        assert not is_null_coord(1e308)
        assert not is_null_coord(0)

    def test_sign(self) -> None:
        """Test sign with tolerance around zero."""
        assert sign(1e-12) == 0
        assert sign(-3) == -1
        assert sign(0.5) == 1


class TestRoundNearestCast:
    """Tests for round_nearest_cast."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(2.5, 3), (-2.5, -3), (2.4, 2), (-2.4, -2), (2.6, 3), (-2.6, -3), (7, 7)],
    )
    def test_int_target_rounds_to_nearest(self, value: float, expected: int) -> None:
        """Test default integer rounding."""
        result = round_nearest_cast(value, int)
        assert result == expected
        assert isinstance(result, int)

    def test_float_target(self) -> None:
        """Test that float targets convert without rounding."""
        result = round_nearest_cast(2, float)
        assert result == 2.0
        assert isinstance(result, float)
        assert round_nearest_cast(2.4) == 2.4

    def test_infinity_passes_through(self) -> None:
        """Test that null coordinates survive an int cast."""
        assert round_nearest_cast(math.inf, int) == math.inf

    def test_round_styles(self) -> None:
        """Test the alternative raw rounding styles."""
        assert round_nearest_cast(2.6, int, RoundStyle.TOWARD_INFINITY) == 3
        assert round_nearest_cast(2.4, int, RoundStyle.TOWARD_INFINITY) == 2
        assert round_nearest_cast(2.6, int, RoundStyle.TOWARD_NEG_INFINITY) == 3
        assert round_nearest_cast(2.4, int, RoundStyle.TOWARD_NEG_INFINITY) == 2
        assert round_nearest_cast(2.6, int, RoundStyle.TO_NEAREST) == 3

    def test_to_nearest_ties_away_from_zero(self) -> None:
        """Test that TO_NEAREST breaks ties like the native style."""
        for value, expected in ((2.5, 3), (-2.5, -3), (0.5, 1), (-0.5, -1), (3.5, 4)):
            assert round_nearest_cast(value, int, RoundStyle.TO_NEAREST) == expected
            assert round_nearest_cast(value, int) == expected
        assert round_nearest_cast(-2.4, int, RoundStyle.TO_NEAREST) == -2

    def test_unsupported_target(self) -> None:
        """Test that other target types raise."""
        with pytest.raises(CoordinateTypeError):
            round_nearest_cast(1.0, str)
        with pytest.raises(TypeError):
            round_nearest_cast(1.0, complex)


class TestOrientation:
    """Tests for orientation of point triples."""

    def test_left_turn(self) -> None:
        """Test a counter-clockwise turn."""
        assert orientation(Point(0, 0), Point(1, 0), Point(1, 1)) == 1

    def test_right_turn(self) -> None:
        """Test a clockwise turn."""
        assert orientation(Point(0, 0), Point(1, 0), Point(1, -1)) == -1

    def test_collinear(self) -> None:
        """Test exact and nearly collinear points."""
        assert orientation(Point(0, 0), Point(1, 1), Point(2, 2)) == 0
        assert orientation(Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 2.0 + 1e-12)) == 0
