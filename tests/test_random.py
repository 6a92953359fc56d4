"""
Tests for the uniform sources.

ShuffleStream sequences are a compatibility contract: the literal values
below must never change.
"""

import pytest

from zipfload.random import (
    DEFAULT_MG_SEED,
    STREAM_SKIP,
    TWO_53,
    ShuffleStream,
    UniformSource,
    entropy_seed,
)


class TestShuffleStream:
    """Tests for ShuffleStream."""

    def test_range(self) -> None:
        """Values should be within [0, 1)."""
        stream = ShuffleStream.from_seed(7)
        for _ in range(10000):
            v = stream()
            assert 0.0 <= v < 1.0

    def test_values_on_53_bit_grid(self) -> None:
        stream = ShuffleStream()
        for _ in range(1000):
            j = stream() * TWO_53
            assert j == int(j)

    def test_resolution_finer_than_raw_draws(self) -> None:
        """Low bits vary, so the stream is not confined to a 2**-24 lattice."""
        stream = ShuffleStream.from_seed(42)
        values = [stream() for _ in range(50000)]
        assert {int(v * TWO_53) % 4 for v in values} == {0, 1, 2, 3}
        assert any((v * 2**24) % 1 != 0 for v in values)
        assert len(set(values)) > 49990

    def test_draws_between_lattice_points(self) -> None:
        """Draws land between the points of a 2**-24 lattice."""
        stream = ShuffleStream.from_seed(3)
        cells = {int(stream() * 2**30) % 64 for _ in range(5000)}
        assert len(cells) == 64

    def test_known_sequence(self) -> None:
        stream = ShuffleStream.from_seed(42)
        assert [stream() for _ in range(3)] == [
            0.78494113159556456,
            0.93222851884900915,
            0.70112325666037956,
        ]

    def test_reproducibility(self) -> None:
        """Same seed should produce same sequence."""
        stream1 = ShuffleStream.from_seed(123)
        stream2 = ShuffleStream.from_seed(123)
        assert [stream1() for _ in range(500)] == [stream2() for _ in range(500)]

    def test_different_seeds(self) -> None:
        stream1 = ShuffleStream.from_seed(123)
        stream2 = ShuffleStream.from_seed(456)
        assert [stream1() for _ in range(10)] != [stream2() for _ in range(10)]

    def test_adjacent_seeds(self) -> None:
        stream1 = ShuffleStream.from_seed(0)
        stream2 = ShuffleStream.from_seed(1)
        assert [stream1() for _ in range(10)] != [stream2() for _ in range(10)]

    def test_stream_select_skips_ahead(self) -> None:
        """stream_select=k starts k * STREAM_SKIP draws into the seed's sequence."""
        base = ShuffleStream.from_seed(99)
        for _ in range(STREAM_SKIP):
            base()
        selected = ShuffleStream.from_seed(99, stream_select=1)
        assert [base() for _ in range(20)] == [selected() for _ in range(20)]

    def test_stream_select_independence(self) -> None:
        stream1 = ShuffleStream.from_seed(99, stream_select=0)
        stream2 = ShuffleStream.from_seed(99, stream_select=1)
        assert [stream1() for _ in range(10)] != [stream2() for _ in range(10)]

    def test_negative_stream_select(self) -> None:
        with pytest.raises(ValueError):
            ShuffleStream.from_seed(1, stream_select=-1)

    def test_seed_cleanup(self) -> None:
        """Even and negative generator seeds are normalised, not rejected."""
        even = ShuffleStream(DEFAULT_MG_SEED + 1, 5)
        odd = ShuffleStream(DEFAULT_MG_SEED, 5)
        assert [even() for _ in range(10)] == [odd() for _ in range(10)]

        negative = ShuffleStream(-DEFAULT_MG_SEED, -5)
        positive = ShuffleStream(DEFAULT_MG_SEED, 5)
        assert [negative() for _ in range(10)] == [positive() for _ in range(10)]

    def test_copy_replays(self) -> None:
        stream = ShuffleStream.from_seed(5)
        stream()
        clone = stream.copy()
        assert [stream() for _ in range(50)] == [clone() for _ in range(50)]

    def test_copy_is_independent(self) -> None:
        stream = ShuffleStream.from_seed(5)
        clone = stream.copy()
        expected = stream.copy()()
        for _ in range(100):
            stream()
        assert clone() == expected

    def test_mean_approximately_correct(self) -> None:
        stream = ShuffleStream.from_seed(11)
        values = [stream() for _ in range(20000)]
        assert abs(sum(values) / len(values) - 0.5) < 0.01

    def test_buckets_roughly_even(self) -> None:
        stream = ShuffleStream.from_seed(11)
        counts = [0] * 10
        for _ in range(20000):
            counts[int(stream() * 10)] += 1
        assert all(1700 < c < 2300 for c in counts)

    def test_is_uniform_source(self) -> None:
        assert isinstance(ShuffleStream(), UniformSource)


class TestEntropySeed:
    pass
