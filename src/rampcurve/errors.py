"""Construction errors raised by interpolators."""

from __future__ import annotations


class InterpolationError(ValueError):
    """Base class for interpolators that cannot be built."""


class InvalidInterval(InterpolationError):
    """Domain bounds are not finite or do not satisfy ``low < high``."""

    def __init__(self, low: float, high: float, reason: str | None = None) -> None:
        super().__init__(reason or f"Invalid interval: {low} !< {high}")
        self.low = low
        self.high = high


class NoInterpolators(InterpolationError):
    """A piecewise interpolator was given no children."""

    def __init__(self) -> None:
        super().__init__("Need at least one interpolator.")


class DiscontinuousDomain(InterpolationError):
    """Adjacent child domains do not meet exactly."""

    def __init__(self, index: int, expected: float, found: float) -> None:
        super().__init__(
            f"Combined domains are not closed: interpolator {index} starts at {found}, expected {expected}"
        )
        self.index = index
        self.expected = expected
        self.found = found
