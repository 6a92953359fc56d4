"""
Pytest configuration and fixtures for zipfload.
"""

import math
from typing import Callable

import pytest
import simpy

from zipfload import ShuffleStream


@pytest.fixture
def env() -> simpy.Environment:
    """Create a fresh SimPy environment."""
    return simpy.Environment()


@pytest.fixture
def uniforms() -> list[float]:
    """Fixed set of in-contract uniform variates, including both ends."""
    stream = ShuffleStream.from_seed(2024)
    return [0.0, 1.0 - 2.0**-53] + [stream() for _ in range(2000)]


@pytest.fixture
def reference_inverse_cdf() -> Callable[[float, float, float, float], float]:
    """Inverse CDF computed directly from the textbook formulas."""

    def _inverse(a: float, b: float, s: float, u: float) -> float:
        if s == 1.0:
            return a * (b / a) ** u
        q = 1.0 - s
        return ((b**q - a**q) * u + a**q) ** (1.0 / q)

    return _inverse


def assert_strictly_increasing(values: list[float]) -> None:
    """Every value must exceed its predecessor."""
    for i, (prev, cur) in enumerate(zip(values, values[1:])):
        assert cur > prev, f"Not increasing at index {i + 1}: {prev} >= {cur}"


def relative_diff(x: float, y: float) -> float:
    return abs(x - y) / max(abs(x), abs(y), math.ulp(1.0))
