"""Type-safe configuration dataclasses for pyramid quality metrics.

Degeneracy floors follow the numeric type in use rather than a
domain-specific epsilon. Normalization constants are calibrated on the
right square pyramid with unit edges.
"""

import math
import sys
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class DegeneracyThresholds:
    """Floors below which a length counts as collapsed.

    Default values use the smallest positive normal float64.
    Use for_dtype() when coordinates come from a narrower type.
    """

    edge_length_floor: float = sys.float_info.min
    """Min edge length for the scaled Jacobian. Shorter edges return 0."""

    quad_length_squared_floor: float = sys.float_info.min
    """Min squared base edge length for the quad shape primitive."""

    quad_shape_floor: float = sys.float_info.min
    """Min quad shape score (unitless). Smaller scores clamp to 0."""

    @classmethod
    def for_dtype(cls, dtype) -> "DegeneracyThresholds":
        """Floors taken from ``numpy.finfo(dtype).tiny``."""
        tiny = float(np.finfo(dtype).tiny)
        return cls(edge_length_floor=tiny, quad_length_squared_floor=tiny, quad_shape_floor=tiny)


@dataclass(frozen=True)
class NormalizationConstants:
    """Geometric constants used to scale raw values into [0, 1]."""

    corner_factor: float = math.sqrt(2.0) / 2.0
    """cos(45°). Scaled Jacobian of an ideal pyramid corner is 1.0."""

    height_factor: float = math.sqrt(2.0) / 2.0
    """Ideal height as a fraction of the longest edge (shape metric)."""


DEFAULT_THRESHOLDS = DegeneracyThresholds()
DEFAULT_CONSTANTS = NormalizationConstants()
