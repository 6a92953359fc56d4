"""
Discrete-event replay of an access stream against a target.

AccessDriver is a SimPy process: it waits an exponentially distributed
gap, pulls the next key from an access iterator, hands it to the target
and records the access. With seeded sources the whole run, including the
simulated timestamps, is reproducible.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable, Generator, Generic, Iterator, TypeVar

import simpy

from zipfload.random import ShuffleStream, UniformSource, entropy_seed
from zipfload.stats import AccessCounts

if TYPE_CHECKING:
    from simpy import Environment

_LOGGER = logging.getLogger(__name__)

K = TypeVar("K")

_EXHAUSTED = object()


class AccessDriver(Generic[K]):
    """
    Replays accesses at exponentially distributed inter-arrival times.

    Args:
        env: SimPy environment driving simulated time
        accesses: Iterator of keys; the driver stops when it is exhausted
        target: Called with each key; a truthy return counts as a hit
        mean: Mean inter-arrival time, must be > 0
        source: Uniform source for the gaps; None seeds from OS entropy
        limit: Stop after this many accesses; None runs until the
            environment stops
    """

    def __init__(
        self,
        env: Environment,
        accesses: Iterator[K],
        target: Callable[[K], object],
        mean: float,
        source: UniformSource | None = None,
        limit: int | None = None,
    ) -> None:
        if not mean > 0.0:
            raise ValueError(f"Mean inter-arrival time must be > 0, got: {mean}")
        if limit is not None and limit < 0:
            raise ValueError(f"Access limit must be >= 0, got: {limit}")
        if source is None:
            source = ShuffleStream.from_seed(entropy_seed())

        self._env = env
        self._accesses = accesses
        self._target = target
        self._mean = mean
        self._inter_arrival = source
        self._limit = limit
        self._hits = 0
        self._counts = AccessCounts()
        self._process: simpy.Process | None = None

    @property
    def env(self) -> Environment:
        return self._env

    @property
    def counts(self) -> AccessCounts:
        """Accesses replayed so far, per key."""
        return self._counts

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def hit_ratio(self) -> float:
        if self._counts.total == 0:
            return 0.0
        return self._hits / self._counts.total

    @property
    def process(self) -> simpy.Process | None:
        """The SimPy process, once started."""
        return self._process

    def _gap(self) -> float:
        # Inversion of the exponential CDF; 1 - u is in (0, 1]
        return -self._mean * math.log(1.0 - self._inter_arrival())

    def body(self) -> Generator[simpy.Event, None, None]:
        while self._limit is None or self._counts.total < self._limit:
            yield self._env.timeout(self._gap())
            key = next(self._accesses, _EXHAUSTED)
            if key is _EXHAUSTED:
                break
            if self._target(key):
                self._hits += 1
            self._counts.record(key)

        _LOGGER.debug(
            "AccessDriver finished at t=%s: %d accesses, %d hits",
            self._env.now,
            self._counts.total,
            self._hits,
        )

    def start(self) -> simpy.Process:
        """Register the driver with the environment. Idempotent."""
        if self._process is None:
            _LOGGER.debug("AccessDriver starting at t=%s, mean=%s, limit=%s", self._env.now, self._mean, self._limit)
            self._process = self._env.process(self.body())
        return self._process

    def run(self, until: float | None = None) -> None:
        """Start the driver and run the environment."""
        self.start()
        self._env.run(until=until)
