"""
Cache hit-ratio example.

Replays a Zipf access stream against LRU caches of several sizes on a
SimPy environment and reports the hit ratio of each.

Demonstrates:
- indices_access for a 10,000 key dataset
- AccessDriver with exponential inter-arrival times
- Identical, seeded workloads across runs
"""

from __future__ import annotations

from collections import OrderedDict

import simpy

from zipfload import AccessDriver, ShuffleStream, indices_access

KEYS = 10000
SHAPE = 1.1
SEED = 7


class LRUCache:
    """Least recently used cache of keys."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._entries: OrderedDict[int, None] = OrderedDict()

    def __call__(self, key: int) -> bool:
        """Access key; True on a hit."""
        if key in self._entries:
            self._entries.move_to_end(key)
            return True
        self._entries[key] = None
        if len(self._entries) > self._capacity:
            self._entries.popitem(last=False)
        return False


def run(capacity: int) -> AccessDriver:
    env = simpy.Environment()
    driver = AccessDriver(
        env,
        indices_access(range(1, KEYS + 1), SHAPE, seed=SEED),
        LRUCache(capacity),
        mean=1.0,
        source=ShuffleStream.from_seed(SEED, stream_select=1),
    )
    driver.run(until=50000)
    return driver


def main() -> None:
    print(f"{KEYS} keys, s={SHAPE}, seed={SEED}")
    for capacity in (10, 100, 1000):
        driver = run(capacity)
        print(
            f"capacity {capacity:>5}: {driver.counts.total} accesses, "
            f"hit ratio {driver.hit_ratio:.4f}"
        )

    hottest = run(10).counts.hottest(5)
    print("Hottest keys:", ", ".join(f"{b.key} ({b.count})" for b in hottest))


if __name__ == "__main__":
    main()
