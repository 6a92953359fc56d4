"""
zipfload - Zipf distributed access patterns for load testing.

Closed-form inverse transform sampling of a bounded power law, wrapped in
lazy, seedable access sequences.
"""

from zipfload.errors import EmptyArrayError, InvalidRangeError, InvalidShapeError, ZipfError
from zipfload.iterator import (
    ArrayIterator,
    IndexIterator,
    ZipfIterator,
    array_access,
    indices_access,
)
from zipfload.random import ShuffleStream, UniformSource, entropy_seed
from zipfload.stats import AccessCounts, Bucket
from zipfload.workload import AccessDriver
from zipfload.zipf import S_ONE_TOLERANCE, Zipf

__version__ = "0.1.0"
__all__ = [
    # Distribution
    "Zipf",
    "S_ONE_TOLERANCE",
    # Sequences
    "ZipfIterator",
    "IndexIterator",
    "ArrayIterator",
    "indices_access",
    "array_access",
    # Random
    "UniformSource",
    "ShuffleStream",
    "entropy_seed",
    # Statistics
    "AccessCounts",
    "Bucket",
    # Load driver
    "AccessDriver",
    # Errors
    "ZipfError",
    "InvalidRangeError",
    "InvalidShapeError",
    "EmptyArrayError",
]
