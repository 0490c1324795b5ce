"""Sampling and sanity checks for interpolation curves."""

from __future__ import annotations

import numpy as np

from .interpolation_api import Interpolator, evaluate_array


def sample_curve(interp: Interpolator, start: float, stop: float, num: int = 101) -> tuple[np.ndarray, np.ndarray]:
    if num < 2:
        raise ValueError("num must be >= 2")
    if not stop > start:
        raise ValueError("stop must be > start")
    xs = np.linspace(float(start), float(stop), int(num))
    return xs, evaluate_array(interp, xs)


def _direction(ys: np.ndarray) -> str:
    steps = np.diff(ys)
    if np.all(steps == 0.0):
        return "constant"
    if np.all(steps >= 0.0):
        return "increasing"
    if np.all(steps <= 0.0):
        return "decreasing"
    return "mixed"


def curve_diagnostics(interp: Interpolator, num: int = 257) -> dict:
    """Sample ``interp`` around its domain and check the saturation contract.

    The domain is padded by a tenth of its length on both sides.
    """
    dom = interp.get_domain()
    pad = 0.1 * dom.length
    xs, ys = sample_curve(interp, dom.low - pad, dom.high + pad, num)

    below = xs <= dom.low
    above = xs >= dom.high
    low_value = interp.eval(dom.low)
    high_value = interp.eval(dom.high)
    exceeds = np.array([interp.exceeds_domain(float(x)) for x in xs], dtype=bool)

    checks = {
        "flat_below_domain": bool(np.all(ys[below] == low_value)),
        "flat_above_domain": bool(np.all(ys[above] == high_value)),
        "saturates_at_upper_bound": bool(np.array_equal(exceeds, above)),
    }
    return {
        "domain": [dom.low, dom.high],
        "value_at_low": float(low_value),
        "value_at_high": float(high_value),
        "min_value": float(np.min(ys)),
        "max_value": float(np.max(ys)),
        "n_samples": int(xs.shape[0]),
        "monotonic": _direction(ys),
        "checks": checks,
        "all_checks_pass": bool(all(checks.values())),
    }
