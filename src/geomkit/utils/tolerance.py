"""Numeric tolerance kernel.

Every comparison between coordinates goes through this module instead of the
native ``==`` and ``<`` operators:

- Exact values (both operands ``int``) compare exactly
- Inexact values compare with a relative epsilon:
  ``|a - b| <= eps * (|a| + |b| + 1)``
- Identical values, infinities included, are always equal

The active epsilon is context-local. ``using_epsilon`` overrides it for a block
of code without touching other threads or tasks.

NaN is not a supported input; comparisons involving it follow whatever the
underlying float operations return.
"""

import math
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from enum import Enum
from typing import TYPE_CHECKING

from geomkit.exceptions import CoordinateTypeError

if TYPE_CHECKING:
    from geomkit.domain import Point

DEFAULT_EPSILON = 1e-9

# Coordinate value reserved for null shapes.
NULL_COORD = math.inf

Number = int | float

_epsilon: ContextVar[float] = ContextVar("geomkit_epsilon", default=DEFAULT_EPSILON)


class RoundStyle(Enum):
    """How a raw float-to-integer conversion rounds."""

    TOWARD_ZERO = 0
    TO_NEAREST = 1
    TOWARD_INFINITY = 2
    TOWARD_NEG_INFINITY = 3


# int() truncates
NATIVE_ROUND_STYLES: dict[type, RoundStyle] = {int: RoundStyle.TOWARD_ZERO}


def current_epsilon() -> float:
    """Get the epsilon used by comparisons in the current context."""
    return _epsilon.get()


@contextmanager
def using_epsilon(eps: float) -> Iterator[float]:
    """Temporarily change the comparison epsilon.

    Args:
        eps: Relative tolerance to use inside the block

    Yields:
        The epsilon now in effect

    Raises:
        ValueError: If eps is negative or not finite
    """
    if not math.isfinite(eps) or eps < 0:
        raise ValueError(f"Epsilon must be a finite non-negative number, got {eps}")
    token = _epsilon.set(eps)
    try:
        yield eps
    finally:
        _epsilon.reset(token)


def is_exact(*values: Number) -> bool:
    """Check whether all values are integers (compared without tolerance)."""
    return all(isinstance(v, int) and not isinstance(v, bool) for v in values)


def is_null_coord(value: Number) -> bool:
    """Check whether a coordinate is the null sentinel."""
    return isinstance(value, float) and math.isinf(value)


def equal(lhs: Number, rhs: Number, eps: float | None = None) -> bool:
    """Compare two values for equality within tolerance.

    Args:
        lhs: First value
        rhs: Second value
        eps: Relative tolerance (defaults to the active epsilon)

    Returns:
        True if the values are equal for geometric purposes

    Examples:
        >>> equal(0.1 + 0.2, 0.3)
        True
        >>> equal(1, 2)
        False
    """
    if lhs == rhs:
        return True
    if is_exact(lhs, rhs):
        return False
    if math.isinf(lhs) or math.isinf(rhs):
        return False
    if eps is None:
        eps = _epsilon.get()
    return abs(lhs - rhs) <= eps * (abs(lhs) + abs(rhs) + 1.0)


def not_equal(lhs: Number, rhs: Number, eps: float | None = None) -> bool:
    return not equal(lhs, rhs, eps)


def less_than(lhs: Number, rhs: Number, eps: float | None = None) -> bool:
    """Check ``lhs < rhs`` by more than the tolerance."""
    return lhs < rhs and not equal(lhs, rhs, eps)


def greater_than(lhs: Number, rhs: Number, eps: float | None = None) -> bool:
    """Check ``lhs > rhs`` by more than the tolerance."""
    return lhs > rhs and not equal(lhs, rhs, eps)


def less_equal(lhs: Number, rhs: Number, eps: float | None = None) -> bool:
    return not greater_than(lhs, rhs, eps)


def greater_equal(lhs: Number, rhs: Number, eps: float | None = None) -> bool:
    return not less_than(lhs, rhs, eps)


def sign(value: Number, eps: float | None = None) -> int:
    """Return -1, 0 or 1 for a value compared against zero within tolerance."""
    if equal(value, 0, eps):
        return 0
    return 1 if value > 0 else -1


def round_nearest_cast(
    value: Number,
    target: type = float,
    round_style: RoundStyle | None = None,
) -> Number:
    """Convert a continuous value to a coordinate of the target type.

    Integer targets round to the nearest integer. ``round_style`` describes
    how the raw conversion rounds; the value is shifted by half a unit first
    so the combined result is round-to-nearest. Halfway values round away
    from zero under the native and ``TO_NEAREST`` styles, unlike ``round()``.

    Args:
        value: Value to convert
        target: ``int`` or ``float``
        round_style: Rounding of the raw conversion (defaults to the target's
            native style)

    Returns:
        The converted value. Non-finite values are returned unchanged so null
        coordinates propagate.

    Raises:
        CoordinateTypeError: If target is not ``int`` or ``float``

    Examples:
        >>> round_nearest_cast(2.5, int)
        3
        >>> round_nearest_cast(-2.5, int)
        -3
        >>> round_nearest_cast(2, float)
        2.0
    """
    if target is float:
        return float(value)
    if target is not int:
        raise CoordinateTypeError(target)
    if isinstance(value, float) and not math.isfinite(value):
        return value

    style = round_style if round_style is not None else NATIVE_ROUND_STYLES[int]
    if style is RoundStyle.TOWARD_ZERO:
        return math.trunc(value - 0.5 if value < 0 else value + 0.5)
    if style is RoundStyle.TOWARD_INFINITY:
        return math.ceil(value - 0.5)
    if style is RoundStyle.TOWARD_NEG_INFINITY:
        return math.floor(value + 0.5)
    # ties away from zero, matching the native truncating style
    return math.floor(value + 0.5) if value >= 0 else math.ceil(value - 0.5)


def orientation(p0: "Point", p1: "Point", p2: "Point", eps: float | None = None) -> int:
    """Turn direction of the path p0 -> p1 -> p2.

    Computes the sign of the cross product ``(p1 - p0) x (p2 - p0)``. The two
    product terms are compared with ``equal`` so collinearity is judged
    relative to the coordinate magnitudes.

    Returns:
        1 for a counter-clockwise (left) turn with the y axis up, -1 for a
        clockwise turn, 0 when the points are collinear
    """
    lhs = (p1.x - p0.x) * (p2.y - p0.y)
    rhs = (p1.y - p0.y) * (p2.x - p0.x)
    if equal(lhs, rhs, eps):
        return 0
    return 1 if lhs > rhs else -1
