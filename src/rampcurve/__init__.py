"""Scalar interpolation curves with flat extension and piecewise composition."""

from . import constants
from .config import CurveConfig, SegmentConfig, load_curve_config
from .diagnostics import curve_diagnostics, sample_curve
from .errors import DiscontinuousDomain, InterpolationError, InvalidInterval, NoInterpolators
from .factory import build_curve, build_interpolator
from .interpolation import (
    LinearInterpolator,
    NearestNeighborInterpolator,
    SigmoidInterpolator,
    StepInterpolator,
)
from .interpolation_api import Interpolator, evaluate_array
from .interval import ClosedInterval
from .piecewise import PiecewiseInterpolator
from .plotting import plot_curve

__all__ = [
    "constants",
    "ClosedInterval",
    "CurveConfig",
    "SegmentConfig",
    "load_curve_config",
    "curve_diagnostics",
    "sample_curve",
    "InterpolationError",
    "InvalidInterval",
    "NoInterpolators",
    "DiscontinuousDomain",
    "build_curve",
    "build_interpolator",
    "Interpolator",
    "evaluate_array",
    "StepInterpolator",
    "NearestNeighborInterpolator",
    "LinearInterpolator",
    "SigmoidInterpolator",
    "PiecewiseInterpolator",
    "plot_curve",
]
