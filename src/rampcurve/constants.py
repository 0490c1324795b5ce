"""Numeric constants shared by the interpolators."""

from __future__ import annotations

# Half-width of the logistic input window. The sigmoid interpolator rescales
# its domain onto [-SIGMOID_HALF_WINDOW, SIGMOID_HALF_WINDOW].
SIGMOID_HALF_WINDOW = 4.0

STEP = "step"
NEAREST = "nearest"
LINEAR = "linear"
SIGMOID = "sigmoid"

LEAF_KINDS = (STEP, NEAREST, LINEAR, SIGMOID)
