"""Leaf interpolators mapping one domain interval onto one range interval.

Every variant is flat outside its domain: inputs at or below ``domain.low``
evaluate like ``domain.low`` and inputs at or above ``domain.high`` evaluate
like ``domain.high``. Ranges may be given high-to-low to invert the output.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .constants import SIGMOID_HALF_WINDOW
from .interpolation_api import InterpolatorBase
from .interval import ClosedInterval


@dataclass(frozen=True)
class _LeafInterpolator(InterpolatorBase):
    domain: ClosedInterval
    range: ClosedInterval

    def __post_init__(self) -> None:
        object.__setattr__(self, "domain", ClosedInterval.coerce(self.domain))
        object.__setattr__(self, "range", ClosedInterval.coerce(self.range, ordered=False))


@dataclass(frozen=True)
class StepInterpolator(_LeafInterpolator):
    """Two-level step jumping from ``range.low`` to ``range.high`` right after ``domain.low``."""

    def eval(self, x: float) -> float:
        if float(x) <= self.domain.low:
            return self.range.low
        return self.range.high

    def _eval_flat(self, xs: np.ndarray) -> np.ndarray:
        return np.where(xs <= self.domain.low, self.range.low, self.range.high)


@dataclass(frozen=True)
class NearestNeighborInterpolator(_LeafInterpolator):
    """Step placed at the domain midpoint; the midpoint itself maps to ``range.low``."""

    midpoint: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "midpoint", self.domain.midpoint)

    def eval(self, x: float) -> float:
        if float(x) <= self.midpoint:
            return self.range.low
        return self.range.high

    def _eval_flat(self, xs: np.ndarray) -> np.ndarray:
        return np.where(xs <= self.midpoint, self.range.low, self.range.high)


@dataclass(frozen=True)
class LinearInterpolator(_LeafInterpolator):
    """Straight line between ``(domain.low, range.low)`` and ``(domain.high, range.high)``."""

    slope: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "slope", self.range.length / self.domain.length)

    def eval(self, x: float) -> float:
        x = float(x)
        if x <= self.domain.low:
            return self.range.low
        if x >= self.domain.high:
            return self.range.high
        return self.range.low + (x - self.domain.low) * self.slope

    def _eval_flat(self, xs: np.ndarray) -> np.ndarray:
        inner = self.range.low + (np.clip(xs, self.domain.low, self.domain.high) - self.domain.low) * self.slope
        return np.where(
            xs <= self.domain.low,
            self.range.low,
            np.where(xs >= self.domain.high, self.range.high, inner),
        )


def _logistic(x):
    return 1.0 / (1.0 + np.exp(-x))


@dataclass(frozen=True)
class SigmoidInterpolator(_LeafInterpolator):
    """Logistic S-curve across the domain.

    The domain is rescaled onto ``[-4, 4]`` before applying the logistic
    function, so values just inside the domain edges sit about 1.8% of the
    range away from the bounds. The bounds themselves are clamped exactly.
    """

    def _rescale(self, x):
        width = 2.0 * SIGMOID_HALF_WINDOW
        return (x - self.domain.low) / self.domain.length * width - SIGMOID_HALF_WINDOW

    def eval(self, x: float) -> float:
        x = float(x)
        if x <= self.domain.low:
            return self.range.low
        if x >= self.domain.high:
            return self.range.high
        return float(_logistic(self._rescale(x)) * self.range.length + self.range.low)

    def _eval_flat(self, xs: np.ndarray) -> np.ndarray:
        inner = _logistic(self._rescale(np.clip(xs, self.domain.low, self.domain.high)))
        inner = inner * self.range.length + self.range.low
        return np.where(
            xs <= self.domain.low,
            self.range.low,
            np.where(xs >= self.domain.high, self.range.high, inner),
        )
