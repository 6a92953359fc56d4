"""
Access frequency collection.

Counts how often each key of an access stream is hit, to check the skew
of a generated workload or to report what a load driver replayed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterable


@dataclass
class Bucket:
    """Access count of a single key."""

    key: Hashable
    count: int = 0


class AccessCounts:
    """
    Per-key access counter.

    Keys are kept in first-seen order; hottest() sorts by count.
    """

    def __init__(self, keys: Iterable[Hashable] = ()) -> None:
        self.reset()
        for key in keys:
            self.record(key)

    def reset(self) -> None:
        """Forget all recorded accesses."""
        self._counts: dict[Hashable, int] = {}
        self._total = 0

    def record(self, key: Hashable) -> None:
        """Record one access to key."""
        self._counts[key] = self._counts.get(key, 0) + 1
        self._total += 1

    def __iadd__(self, key: Hashable) -> AccessCounts:
        """Operator += equivalent."""
        self.record(key)
        return self

    @property
    def total(self) -> int:
        """Number of accesses recorded."""
        return self._total

    def count(self, key: Hashable) -> int:
        """Accesses recorded for key, 0 if never seen."""
        return self._counts.get(key, 0)

    def share(self, key: Hashable) -> float:
        """Fraction of all accesses that hit key."""
        if self._total == 0:
            return 0.0
        return self._counts.get(key, 0) / self._total

    def hottest(self, n: int | None = None) -> list[Bucket]:
        """
        Most accessed keys, highest count first.

        Ties keep first-seen order. n=None returns every key.
        """
        ranked = sorted(self._counts.items(), key=lambda item: item[1], reverse=True)
        if n is not None:
            ranked = ranked[:n]
        return [Bucket(key=key, count=count) for key, count in ranked]

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._counts

    def __str__(self) -> str:
        lines = [f"Number of accesses : {self._total}", f"Distinct keys      : {len(self)}"]
        for bucket in self.hottest():
            lines.append(f"Key : < {bucket.key}, {bucket.count}, {self.share(bucket.key):.4f} >")
        return "\n".join(lines)
