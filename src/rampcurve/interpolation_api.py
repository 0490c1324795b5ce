"""Shared interpolator contract and the helpers every variant builds on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

import numpy as np

from .interval import ClosedInterval


@runtime_checkable
class Interpolator(Protocol):
    def eval(self, x: float) -> float:
        """Evaluate the curve at ``x``; defined for every real ``x``."""
        ...

    def exceeds_domain(self, x: float) -> bool:
        """True once ``x`` reaches the upper domain bound.

        If this holds for ``x'`` then ``eval(x' + e) == eval(x')`` for every
        ``e >= 0``.
        """
        ...

    def get_domain(self) -> ClosedInterval:
        ...


def evaluate_array(interp: Interpolator, xs) -> np.ndarray:
    """Evaluate ``interp`` element-wise, preserving the input shape."""
    arr = np.asarray(xs, dtype=float)
    eval_array = getattr(interp, "eval_array", None)
    if eval_array is not None:
        return eval_array(arr)
    flat = np.fromiter((interp.eval(float(x)) for x in arr.ravel()), dtype=float, count=arr.size)
    return flat.reshape(arr.shape)


class InterpolatorBase(ABC):
    """Behaviour common to every interpolator owning a single domain.

    Subclasses provide ``eval`` and ``_eval_flat``; the latter receives a 1-D
    float array and returns the curve values for it.
    """

    domain: ClosedInterval

    @abstractmethod
    def eval(self, x: float) -> float:
        ...

    @abstractmethod
    def _eval_flat(self, xs: np.ndarray) -> np.ndarray:
        ...

    def eval_array(self, xs) -> np.ndarray:
        arr = np.asarray(xs, dtype=float)
        return self._eval_flat(arr.ravel()).reshape(arr.shape)

    def exceeds_domain(self, x: float) -> bool:
        return float(x) >= self.domain.high

    def exceeds_domain_array(self, xs) -> np.ndarray:
        return np.asarray(xs, dtype=float) >= self.domain.high

    def get_domain(self) -> ClosedInterval:
        # Intervals are frozen, handing out the instance is as good as a copy.
        return self.domain

    def __call__(self, x):
        if np.ndim(x) == 0 and not isinstance(x, np.ndarray):
            return self.eval(x)
        return self.eval_array(x)
