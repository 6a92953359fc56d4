"""
Zipf sampling demonstration.

Demonstrates:
- Zipf: closed-form inverse CDF for s != 1 and s == 1
- ZipfIterator: seeded, reproducible streams of variates
- indices_access / array_access: skewed index and item streams
- AccessCounts: measuring the skew of a stream
"""

from __future__ import annotations

from zipfload import AccessCounts, Zipf, array_access, indices_access


def demo_sample() -> None:
    """Demonstrate Zipf.sample."""
    print("=" * 60)
    print("ZIPF SAMPLE")
    print("=" * 60)
    print()

    for s in (0.5, 1.0, 1.1, 2.0):
        zipf = Zipf(1.0, 100.0, s)
        values = ", ".join(f"{zipf.sample(u):8.4f}" for u in (0.1, 0.5, 0.9))
        print(f"s={s:<4} u=0.1,0.5,0.9 -> {values}")
    print()


def demo_iterator() -> None:
    """Demonstrate seeded iterators."""
    print("=" * 60)
    print("ZIPF ITERATOR")
    print("=" * 60)
    print()

    zipf = Zipf(1.0, 100.0, 1.5)
    print(f"seed 42, first run : {[round(v, 4) for v in zipf.iter(seed=42).take(5)]}")
    print(f"seed 42, second run: {[round(v, 4) for v in zipf.iter(seed=42).take(5)]}")
    print(f"seed 42, stream 1  : {[round(v, 4) for v in zipf.iter(seed=42, stream_select=1).take(5)]}")
    print()


def demo_indices() -> None:
    """Demonstrate index and item access skew."""
    print("=" * 60)
    print("INDICES ACCESS")
    print("=" * 60)
    print()

    counts = AccessCounts(indices_access(range(1, 11), 1.2, seed=42).take(100000))
    print(counts)
    print()

    print("=" * 60)
    print("ARRAY ACCESS")
    print("=" * 60)
    print()

    items = ["home", "search", "cart", "checkout", "account"]
    print(AccessCounts(array_access(items, 1.1, seed=42).take(10000)))
    print()


def main() -> None:
    demo_sample()
    demo_iterator()
    demo_indices()


if __name__ == "__main__":
    main()
