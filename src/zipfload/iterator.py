"""
Lazy, repeatable access sequences built on a Zipf distribution.

Every iterator here is pull-based and infinite: each next() draws one
uniform variate and maps it through the distribution, holding no buffer.
A fresh iterator with the same seed replays the same sequence. Iterators
are not thread-safe; give each consumer its own, sharing the Zipf core.
"""

from __future__ import annotations

import logging
import math
import operator
from typing import Generic, Iterator, Sequence, TypeVar

from zipfload.errors import EmptyArrayError, InvalidRangeError
from zipfload.random import ShuffleStream, UniformSource, entropy_seed
from zipfload.zipf import Zipf

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class ZipfIterator:
    """
    Infinite iterator of Zipf variates.

    Example:
        >>> zipf = Zipf(1.0, 100.0, 1.5)
        >>> values = ZipfIterator.with_seed(zipf, 42).take(3)
    """

    def __init__(self, zipf: Zipf, source: UniformSource | None = None) -> None:
        if source is None:
            seed = entropy_seed()
            _LOGGER.debug("ZipfIterator seeded from entropy: %d", seed)
            source = ShuffleStream.from_seed(seed)
        self._zipf = zipf
        self._source = source

    @classmethod
    def with_seed(cls, zipf: Zipf, seed: int, stream_select: int = 0) -> ZipfIterator:
        """Iterator over zipf whose sequence is fully determined by seed."""
        return cls(zipf, ShuffleStream.from_seed(seed, stream_select))

    def with_source(self, source: UniformSource) -> ZipfIterator:
        """New iterator over the same distribution drawing from source."""
        return type(self)(self._zipf, source)

    @property
    def zipf(self) -> Zipf:
        return self._zipf

    @property
    def source(self) -> UniformSource:
        return self._source

    def __iter__(self) -> ZipfIterator:
        return self

    def __next__(self) -> float:
        return self._zipf.sample(self._source())

    def take(self, n: int) -> list[float]:
        """Consume and return the next n values."""
        return [next(self) for _ in range(n)]


class IndexIterator:
    """
    Infinite iterator of integer indices in [lo, hi).

    Samples Zipf(lo, hi, s), truncates to an int and clamps into
    [lo, hi - 1], so a variate that lands exactly on hi never escapes the
    index range.
    """

    def __init__(self, values: ZipfIterator, lo: int, hi: int) -> None:
        self._values = values
        self._lo = lo
        self._last = hi - 1

    @property
    def lo(self) -> int:
        return self._lo

    @property
    def hi(self) -> int:
        return self._last + 1

    def __iter__(self) -> IndexIterator:
        return self

    def __next__(self) -> int:
        index = math.floor(next(self._values))
        if index > self._last:
            return self._last
        if index < self._lo:
            return self._lo
        return index

    def take(self, n: int) -> list[int]:
        """Consume and return the next n indices."""
        return [next(self) for _ in range(n)]


class ArrayIterator(Generic[T]):
    """Infinite iterator of items, picked by Zipf distributed position."""

    def __init__(self, items: Sequence[T], indices: IndexIterator, offset: int) -> None:
        self._items = items
        self._indices = indices
        self._offset = offset

    def __iter__(self) -> ArrayIterator[T]:
        return self

    def __next__(self) -> T:
        return self._items[next(self._indices) - self._offset]

    def take(self, n: int) -> list[T]:
        """Consume and return the next n items."""
        return [next(self) for _ in range(n)]


def _bounds(index_range: range | tuple[int, int]) -> tuple[int, int]:
    if isinstance(index_range, range):
        if index_range.step != 1:
            raise InvalidRangeError.step(index_range)
        return index_range.start, index_range.stop
    lo, hi = index_range
    return _integral("start", lo), _integral("end", hi)


def _integral(parameter: str, value: object) -> int:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidRangeError.integral(parameter, value) from None


def _source(seed: int | None, stream_select: int) -> UniformSource:
    if seed is None:
        seed = entropy_seed()
        _LOGGER.debug("Access sequence seeded from entropy: %d", seed)
    return ShuffleStream.from_seed(seed, stream_select)


def indices_access(
    index_range: range | tuple[int, int],
    s: float,
    seed: int | None = None,
    stream_select: int = 0,
) -> IndexIterator:
    """
    Infinite iterator of Zipf distributed indices in [lo, hi).

    Low indices are the popular ones: lo is drawn most often.

    Args:
        index_range: range(lo, hi) or a (lo, hi) pair; lo must be > 0
        s: Power parameter, must be > 0
        seed: Seed for a reproducible sequence; None seeds from OS entropy
        stream_select: Independent sub-stream of the seed to use

    Raises:
        InvalidRangeError: lo <= 0, hi <= lo, or a range with step != 1
        InvalidShapeError: s <= 0

    Example:
        >>> indices_access(range(1, 1001), 1.2, seed=42).take(5)
        [84, 398, 41, 1, 63]
    """
    lo, hi = _bounds(index_range)
    zipf = Zipf(lo, hi, s)
    return IndexIterator(ZipfIterator(zipf, _source(seed, stream_select)), lo, hi)


def array_access(
    items: Sequence[T],
    s: float,
    offset: int = 1,
    seed: int | None = None,
    stream_select: int = 0,
) -> ArrayIterator[T]:
    """
    Infinite iterator of items following a Zipf distribution.

    The first item is placed at offset on the x-axis, so with the default
    offset=1 items[0] is the most popular and items[-1] the least. A larger
    offset flattens the skew.

    Raises:
        EmptyArrayError: items is empty
        InvalidRangeError: offset <= 0
        InvalidShapeError: s <= 0
    """
    if len(items) == 0:
        raise EmptyArrayError()
    indices = indices_access((offset, offset + len(items)), s, seed, stream_select)
    return ArrayIterator(items, indices, offset)
