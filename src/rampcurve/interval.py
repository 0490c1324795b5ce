"""Closed numeric intervals used for interpolator domains and ranges."""

from __future__ import annotations

from dataclasses import dataclass, field
import math

from .errors import InvalidInterval


@dataclass(frozen=True)
class ClosedInterval:
    """Closed interval ``[low, high]``.

    Intervals are validated on construction: both bounds must be finite and
    ``low`` must be strictly smaller than ``high``. Output ranges may run
    backwards (``low > high``) to invert an interpolator, so they are built
    with ``ordered=False`` which skips both checks. ``length`` is signed and
    negative for such ranges.
    """

    low: float
    high: float
    ordered: bool = field(default=True, repr=False, compare=False)
    length: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        low = float(self.low)
        high = float(self.high)
        if self.ordered:
            if not low < high:
                raise InvalidInterval(low, high)
            if not (math.isfinite(low) and math.isfinite(high)):
                raise InvalidInterval(low, high, f"Invalid interval: bounds must be finite, got [{low}, {high}]")
        object.__setattr__(self, "low", low)
        object.__setattr__(self, "high", high)
        object.__setattr__(self, "length", high - low)

    @classmethod
    def coerce(cls, bounds, *, ordered: bool = True) -> "ClosedInterval":
        """Build an interval from a ``(low, high)`` pair or copy an existing one."""
        if isinstance(bounds, ClosedInterval):
            return cls(bounds.low, bounds.high, ordered=ordered)
        low, high = bounds
        return cls(low, high, ordered=ordered)

    @property
    def bounds(self) -> tuple[float, float]:
        return self.low, self.high

    @property
    def midpoint(self) -> float:
        return self.low + (self.high - self.low) / 2.0

    def contains(self, x: float) -> bool:
        return self.low <= x <= self.high

    def __iter__(self):
        yield self.low
        yield self.high
