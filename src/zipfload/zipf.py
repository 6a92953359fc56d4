"""
Zipf (power-law) distribution over a bounded positive range.

Density is C * x^(-s) on [a, b]. Variates are produced by inverse
transform sampling with a closed-form inverse CDF, so each sample costs
O(1) with no rejection loop.

Power case (s != 1), with q = 1 - s:

    F(t) = (t^q - a^q) / (b^q - a^q)
    t    = ((b^q - a^q) * u + a^q) ^ (1/q)

Harmonic case (s == 1):

    F(t) = ln(t/a) / ln(b/a)
    t    = a * (b/a)^u = exp(ln a + u * ln(b/a))
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

from zipfload.errors import InvalidRangeError, InvalidShapeError

if TYPE_CHECKING:
    from zipfload.iterator import ZipfIterator

_LOGGER = logging.getLogger(__name__)

# Numerical-stability boundary between the two closed forms. As s -> 1 the
# power form divides a vanishing difference b^q - a^q by a vanishing q, so
# shapes within this distance of 1 use the harmonic form instead.
S_ONE_TOLERANCE = 1e-9


class _Branch(ABC):
    """One closed form of the inverse CDF, with its cached constants."""

    @abstractmethod
    def sample(self, u: float) -> float:
        ...


class _HarmonicBranch(_Branch):
    """Inverse CDF for s == 1."""

    __slots__ = ("_ln_a", "_ln_b_div_a")

    def __init__(self, a: float, b: float) -> None:
        self._ln_a = math.log(a)
        self._ln_b_div_a = math.log(b) - math.log(a)

    def sample(self, u: float) -> float:
        return math.exp(self._ln_a + u * self._ln_b_div_a)


class _PowerBranch(_Branch):
    """
    Inverse CDF for s != 1.

    a^q and b^q over- or underflow for large |q|, so the endpoint whose
    power dominates is divided out. With r = min(a/b, b/a)^|q| in (0, 1]
    and span = 1 - r:

        q < 0:  (t/a)^q = 1 - u * span
        q > 0:  (t/b)^q = 1 - (1 - u) * span

    and t is evaluated as exp(ln(endpoint) + log1p(-w * span) / q).
    """

    __slots__ = ("_q_inv", "_negative", "_ln_scale", "_span", "_limit")

    def __init__(self, a: float, b: float, q: float) -> None:
        self._q_inv = 1.0 / q
        self._negative = q < 0.0
        self._ln_scale = math.log(a) if self._negative else math.log(b)
        # r = exp(-|q| ln(b/a)); expm1 keeps span exact as q -> 0
        self._span = -math.expm1(-abs(q) * (math.log(b) - math.log(a)))
        # Value at w * span == 1, where r has underflowed to 0
        self._limit = b if self._negative else a

    def sample(self, u: float) -> float:
        w = u if self._negative else 1.0 - u
        x = w * self._span
        if x >= 1.0:
            return self._limit
        return math.exp(self._ln_scale + self._q_inv * math.log1p(-x))


@dataclass(frozen=True)
class Zipf:
    """
    Zipf distributed variates on [a, b] with power s > 0.

    Usually a >= 1, since C * x^(-s) grows without bound as x approaches 0.
    Instances are immutable and may be shared by any number of iterators.

    Raises:
        InvalidShapeError: s is not a finite number > 0
        InvalidRangeError: a is not a finite number > 0, or b is not a
            finite number > a

    Example:
        >>> zipf = Zipf(1.0, 100.0, 1.1)
        >>> f"{zipf.sample(0.5):.4f}"
        '7.6891'
    """

    a: float
    b: float
    s: float
    _branch: _Branch = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        a, b, s = float(self.a), float(self.b), float(self.s)

        if not (s > 0.0 and math.isfinite(s)):
            raise InvalidShapeError(self.s)
        if not (a > 0.0 and math.isfinite(a)):
            raise InvalidRangeError.start(self.a)
        if not (b > a and math.isfinite(b)):
            raise InvalidRangeError.end(self.a, self.b)

        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "s", s)

        if abs(s - 1.0) < S_ONE_TOLERANCE:
            branch: _Branch = _HarmonicBranch(a, b)
        else:
            branch = _PowerBranch(a, b, 1.0 - s)
        object.__setattr__(self, "_branch", branch)

        _LOGGER.debug("Zipf a=%r b=%r s=%r branch=%s", a, b, s, type(branch).__name__)

    @property
    def q(self) -> float:
        """Exponent of the antiderivative, 1 - s."""
        return 1.0 - self.s

    @property
    def is_harmonic(self) -> bool:
        """True when s is treated as exactly 1."""
        return isinstance(self._branch, _HarmonicBranch)

    def sample(self, u: float) -> float:
        """
        Map a uniform variate u in [0, 1) to a Zipf variate in [a, b].

        Strictly increasing in u: small u lands near a, u close to 1 lands
        near b.

        Out-of-contract input never raises: u is clamped into [0, 1] (NaN
        is treated as 0). The result is clamped into [a, b] to absorb
        floating-point overshoot at either end.
        """
        if not u >= 0.0:
            u = 0.0
        elif u > 1.0:
            u = 1.0
        t = self._branch.sample(u)
        if t < self.a:
            return self.a
        if t > self.b:
            return self.b
        return t

    def sample_batch(self, us: Iterable[float]) -> list[float]:
        """Sample every variate in us, preserving order."""
        sample = self.sample
        return [sample(u) for u in us]

    def iter(self, seed: int | None = None, stream_select: int = 0) -> ZipfIterator:
        """
        Infinite iterator of variates from this distribution.

        Args:
            seed: Seed for a reproducible sequence; None seeds from OS entropy
            stream_select: Independent sub-stream of the seed to use
        """
        from zipfload.iterator import ZipfIterator

        if seed is None:
            return ZipfIterator(self)
        return ZipfIterator.with_seed(self, seed, stream_select)
