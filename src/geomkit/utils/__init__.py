"""Utility functions for geomkit.

This module provides:

- The numeric tolerance kernel (tolerant comparisons, rounding casts)
- Logging setup and configuration
"""

from geomkit.utils.tolerance import (
    DEFAULT_EPSILON,
    NULL_COORD,
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

__all__ = [
    "DEFAULT_EPSILON",
    "NULL_COORD",
    "RoundStyle",
    "current_epsilon",
    "equal",
    "greater_equal",
    "greater_than",
    "is_exact",
    "is_null_coord",
    "less_equal",
    "less_than",
    "not_equal",
    "orientation",
    "round_nearest_cast",
    "sign",
    "using_epsilon",
]
