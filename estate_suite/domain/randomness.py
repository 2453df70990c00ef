"""
Randomness sources

Matching noise and the pricing ranges draw from an injected source so
that results are reproducible under test.
"""

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything that can draw a float in [low, high)."""

    def uniform(self, low: float, high: float) -> float:
        ...


class UniformRandomSource:
    """Production source backed by random.Random."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def uniform(self, low: float, high: float) -> float:
        # random.uniform may return high; keep the interval half-open
        value = low + self._random.random() * (high - low)
        return value if value < high else low

    def __repr__(self) -> str:
        return "UniformRandomSource()"


class FixedRandomSource:
    """
    Deterministic source for tests

    Always returns the same fraction of the requested interval:
    fraction 0.0 yields `low`, 0.5 the midpoint.
    """

    def __init__(self, fraction: float = 0.0):
        if not 0.0 <= fraction < 1.0:
            raise ValueError(f"fraction must be in [0, 1), got {fraction}")
        self.fraction = fraction

    def uniform(self, low: float, high: float) -> float:
        return low + self.fraction * (high - low)

    def __repr__(self) -> str:
        return f"FixedRandomSource({self.fraction})"
