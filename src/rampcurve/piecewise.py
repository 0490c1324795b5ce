"""Composition of interpolators over contiguous sub-domains."""

from __future__ import annotations

from dataclasses import dataclass, field
import math

import numpy as np

from .errors import DiscontinuousDomain, NoInterpolators
from .interpolation_api import Interpolator, InterpolatorBase, evaluate_array
from .interval import ClosedInterval


@dataclass(frozen=True)
class PiecewiseInterpolator(InterpolatorBase):
    """Chain of interpolators evaluated end to end.

    Each child's upper domain bound must equal the next child's lower bound
    exactly. A value sitting on a shared bound is evaluated by the earlier
    child. Outside the combined domain the first or last child takes over,
    so the composite is flat-extended whenever its end children are.
    """

    interpolators: tuple[Interpolator, ...]
    domain: ClosedInterval = field(init=False)
    _upper_bounds: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        children = tuple(self.interpolators)
        if not children:
            raise NoInterpolators()

        domains = [child.get_domain() for child in children]
        for index in range(1, len(domains)):
            expected = domains[index - 1].high
            found = domains[index].low
            if found != expected:
                raise DiscontinuousDomain(index, expected, found)

        object.__setattr__(self, "interpolators", children)
        object.__setattr__(self, "domain", ClosedInterval(domains[0].low, domains[-1].high))
        object.__setattr__(self, "_upper_bounds", np.array([d.high for d in domains], dtype=float))

    @classmethod
    def of(cls, *interpolators: Interpolator) -> "PiecewiseInterpolator":
        return cls(interpolators)

    def __len__(self) -> int:
        return len(self.interpolators)

    def child_for(self, x: float) -> Interpolator:
        """Return the child that evaluates ``x``."""
        x = float(x)
        if x <= self.domain.low or math.isnan(x):
            return self.interpolators[0]
        if x >= self.domain.high:
            return self.interpolators[-1]
        for child in self.interpolators:
            if child.get_domain().contains(x):
                return child
        # Contiguity is checked on construction, reaching this is a bug.
        raise AssertionError(f"No interpolator domain contained {x}")

    def eval(self, x: float) -> float:
        x = float(x)
        return self.child_for(x).eval(x)

    def _child_indices(self, xs: np.ndarray) -> np.ndarray:
        # First upper bound >= x picks the earliest child containing x.
        idx = np.searchsorted(self._upper_bounds, xs, side="left")
        idx = np.minimum(idx, len(self.interpolators) - 1)
        return np.where(np.isnan(xs), 0, idx)

    def _eval_flat(self, xs: np.ndarray) -> np.ndarray:
        out = np.empty_like(xs)
        idx = self._child_indices(xs)
        for i, child in enumerate(self.interpolators):
            mask = idx == i
            if mask.any():
                out[mask] = evaluate_array(child, xs[mask])
        return out
