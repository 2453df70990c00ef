"""
Numeric helpers shared by the engines
"""

import math

from .errors import InvalidInputError


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return min(high, max(low, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer; .5 rounds up."""
    return math.floor(value + 0.5)


def require_finite(field: str, value: float) -> float:
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(field, f"expected a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidInputError(field, f"expected a finite number, got {value!r}")
    return value
