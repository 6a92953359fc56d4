"""
Errors raised when constructing Zipf distributions and access sequences.

All failures are detected at construction time; sampling never raises.
"""

from __future__ import annotations


class ZipfError(ValueError):
    """
    Base class for invalid Zipf parameters.

    Attributes:
        parameter: Name of the offending parameter
        value: The rejected value
    """

    def __init__(self, parameter: str, value: object, message: str) -> None:
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class InvalidShapeError(ZipfError):
    """The power parameter s must be finite and > 0."""

    def __init__(self, s: float) -> None:
        super().__init__("s", s, f"Power parameter s must be > 0, got: {s}")


class InvalidRangeError(ZipfError):
    """The range start must be > 0 and the range end must be > start."""

    @classmethod
    def start(cls, start: float) -> InvalidRangeError:
        return cls("start", start, f"Range start must be > 0, got: {start}")

    @classmethod
    def end(cls, start: float, end: float) -> InvalidRangeError:
        return cls("end", end, f"Range end must be > start, got: {start}..{end}")

    @classmethod
    def step(cls, index_range: range) -> InvalidRangeError:
        return cls("step", index_range.step, f"Index range step must be 1, got: {index_range!r}")

    @classmethod
    def integral(cls, parameter: str, value: object) -> InvalidRangeError:
        return cls(parameter, value, f"Index range {parameter} must be an integer, got: {value!r}")


class EmptyArrayError(ZipfError):
    """The array to access cannot be empty."""

    def __init__(self) -> None:
        super().__init__("items", [], "Array cannot be empty")
