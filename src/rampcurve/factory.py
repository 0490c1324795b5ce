"""Build interpolators by kind name or from a ``CurveConfig``."""

from __future__ import annotations

from .config import CurveConfig
from .constants import LINEAR, NEAREST, SIGMOID, STEP
from .interpolation import (
    LinearInterpolator,
    NearestNeighborInterpolator,
    SigmoidInterpolator,
    StepInterpolator,
)
from .interpolation_api import Interpolator
from .piecewise import PiecewiseInterpolator


def build_interpolator(kind: str, domain, range_) -> Interpolator:
    if kind == STEP:
        return StepInterpolator(domain, range_)
    if kind == NEAREST:
        return NearestNeighborInterpolator(domain, range_)
    if kind == LINEAR:
        return LinearInterpolator(domain, range_)
    if kind == SIGMOID:
        return SigmoidInterpolator(domain, range_)
    raise ValueError(f"Unknown interpolator kind: {kind}")


def build_curve(cfg: CurveConfig) -> Interpolator:
    """A single segment is returned as-is; anything else becomes piecewise."""
    children = [build_interpolator(seg.kind, seg.domain, seg.range) for seg in cfg.segments]
    if len(children) == 1:
        return children[0]
    return PiecewiseInterpolator(tuple(children))
