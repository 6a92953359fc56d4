"""
Seedable uniform random sources.

The sampler consumes uniform variates in [0, 1). ShuffleStream is the
generator behind every reproducible access sequence: the same seed and
stream_select always produce the same variates, on every platform.

Each raw draw of the shuffled generator carries only 24 free bits (the
multiplier 5^5 is 1 mod 4, so the low two bits of the state never
change), and the multiplicative generator has period 2^24. Every emitted
variate therefore packs three raw draws into 53 bits, so keyspaces far
larger than 2^24 are reachable.

CRITICAL: changing any constant or step below changes every seeded
sequence. Treat such a change as a breaking release.
"""

from __future__ import annotations

import logging
import secrets
from abc import ABC, abstractmethod

_LOGGER = logging.getLogger(__name__)

TWO_26 = 67108864  # 2**26
TWO_53 = 9007199254740992  # 2**53
M = 100000000
B = 31415821
M1 = 10000

SERIES_SIZE = 128

# Draws discarded per stream_select step
STREAM_SKIP = 1000

# Knuth multiplicative hash, spreads small seeds over the MGen state
SEED_MULTIPLIER = 2654435761

DEFAULT_MG_SEED = 772531  # Must be odd
DEFAULT_LCG_SEED = 1878892440


def entropy_seed() -> int:
    """Return a fresh 64-bit seed from the OS entropy pool."""
    return secrets.randbits(64)


class UniformSource(ABC):
    """
    Source of uniform variates in [0, 1).

    Each call advances the internal state deterministically. Instances
    are not safe for concurrent use; give each consumer its own source.
    """

    @abstractmethod
    def __call__(self) -> float:
        """Return the next uniform variate in [0, 1)."""
        ...


class ShuffleStream(UniformSource):
    """
    Dual-generator uniform stream.

    - Multiplicative generator (MGen) fills and refills a shuffle table
    - Linear congruential generator picks the table slot to emit
      (Maclaren-Marsaglia shuffle, Knuth Vol 2)

    Emitted variates are j / 2**53 for an integer j in [0, 2**53).
    """

    def __init__(
        self,
        mg_seed: int = DEFAULT_MG_SEED,
        lcg_seed: int = DEFAULT_LCG_SEED,
        stream_select: int = 0,
    ) -> None:
        # MGSeed must be odd and positive
        if mg_seed % 2 == 0:
            mg_seed -= 1
        if mg_seed < 0:
            mg_seed = -mg_seed
        if lcg_seed < 0:
            lcg_seed = -lcg_seed
        if stream_select < 0:
            raise ValueError(f"stream_select must be >= 0, got: {stream_select}")

        self._mseed = mg_seed
        self._lseed = lcg_seed
        self._series = [self._mgen() for _ in range(SERIES_SIZE)]

        # Skip values for stream independence
        for _ in range(stream_select * STREAM_SKIP):
            self._next()

    @classmethod
    def from_seed(cls, seed: int, stream_select: int = 0) -> ShuffleStream:
        """
        Build a stream from a single integer seed.

        Args:
            seed: Any integer; equal seeds give identical streams
            stream_select: Index of the independent sub-stream to use
        """
        mg_seed = (seed * SEED_MULTIPLIER) % TWO_26 | 1
        lcg_seed = seed % M
        _LOGGER.debug(
            "ShuffleStream seed=%d -> mg_seed=%d lcg_seed=%d stream_select=%d",
            seed,
            mg_seed,
            lcg_seed,
            stream_select,
        )
        return cls(mg_seed, lcg_seed, stream_select)

    def _mgen(self) -> float:
        """
        Multiplicative generator.

        Y[i+1] = Y[i] * 5^5 mod 2^26
        Period: 2^24, initial seed must be odd.
        """
        self._mseed = (self._mseed * 25) % TWO_26
        self._mseed = (self._mseed * 25) % TWO_26
        self._mseed = (self._mseed * 5) % TWO_26
        return self._mseed / TWO_26

    def _uniform(self) -> float:
        # LCG step split into 4-digit halves to keep products small
        p0 = self._lseed % M1
        p1 = self._lseed // M1
        q0 = B % M1
        q1 = B // M1

        self._lseed = (((((p0 * q1 + p1 * q0) % M1) * M1 + p0 * q0) % M) + 1) % M

        choose = self._lseed % SERIES_SIZE
        result = self._series[choose]
        self._series[choose] = self._mgen()

        return result

    def _bits(self) -> int:
        # Raw draws are k / 2**26 with k odd and k mod 4 fixed by the seed
        return int(self._uniform() * TWO_26) >> 2

    def _next(self) -> float:
        high = self._bits()
        middle = self._bits()
        low = self._bits() >> 19
        return ((high << 29) | (middle << 5) | low) / TWO_53

    def __call__(self) -> float:
        return self._next()

    def copy(self) -> ShuffleStream:
        """Return an independent stream in the same state."""
        other = ShuffleStream.__new__(ShuffleStream)
        other._mseed = self._mseed
        other._lseed = self._lseed
        other._series = self._series.copy()
        return other
