"""Helpers for comparing floating point values."""

import math
import sys

DOUBLE_EPSILON = sys.float_info.epsilon
"""Machine epsilon of a double precision float."""

FLOAT_EPSILON = 2.0 ** -23
"""Machine epsilon of a single precision float."""

DOUBLE_DIGITS = sys.float_info.dig + 2
"""Decimal places that are usually enough to expose rounding differences."""


def rel_exp_eps(value: float, epsilon: float = DOUBLE_EPSILON) -> float:
    """Epsilon scaled to the binary exponent of ``value``.

    Returns 0 when the exponent reported by ``math.frexp`` is zero.
    """
    _, exponent = math.frexp(value)
    if not exponent:
        return 0.0
    return abs(2.0 ** (exponent - 1)) * epsilon


def rel_eps(value: float, epsilon: float = DOUBLE_EPSILON) -> float:
    """Epsilon scaled directly by the magnitude of ``value``."""
    return abs(value * epsilon)


def float_equal(
    lhs: float, rhs: float, units: int = 4, epsilon: float = DOUBLE_EPSILON
) -> bool:
    """True if the two values differ by at most ``units`` relative epsilons."""
    tolerance = units * max(rel_exp_eps(lhs, epsilon), rel_exp_eps(rhs, epsilon))
    return abs(rhs - lhs) <= tolerance


def float_to_string(value: float, digits: int = DOUBLE_DIGITS) -> str:
    """Format ``value`` in fixed notation with ``digits`` decimal places."""
    return f"{value:.{digits}f}"