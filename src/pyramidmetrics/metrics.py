"""Quality metrics for five-node pyramids.

Every metric comes in two forms:

- ``evaluate_pyramid_<metric>`` returns a :class:`MetricOutcome` that
  tells a measured value apart from a detected degeneracy or bad input.
- ``pyramid_<metric>`` returns the plain float, 0.0 for either failure.

Both forms accept a :class:`Pyramid` or any (5, 3) array-like.
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from .config_classes import (
    DEFAULT_CONSTANTS,
    DEFAULT_THRESHOLDS,
    DegeneracyThresholds,
    NormalizationConstants,
)
from .decomposition import (
    CORNER_EDGES,
    edge_lengths,
    make_faces,
    make_jacobian_tets,
    make_volume_tets,
)
from .element import PyramidLike, coerce_coordinates
from .geometry import GeometryCalculator
from .outcome import MetricOutcome
from .primitives import quad_shape, tet_jacobian, tet_volume

logger = logging.getLogger(__name__)


# =============================================================================
# Geometry helpers
# =============================================================================

def largest_edge(coordinates: np.ndarray) -> float:
    """Length of the longest of the eight pyramid edges."""
    return float(edge_lengths(coordinates).max())


def distance_to_base(coordinates: np.ndarray) -> Tuple[float, float]:
    """Signed apex height over the base and its alignment with the normal.

    The base normal is (v1 - v0) x (v3 - v0); the height is the
    projection of (apex - base centroid) on that normal.

    Returns
    -------
    tuple
        (distance, cos_angle). cos_angle is distance / |apex - centroid|.
        Both are 0.0 when the normal or the offset has zero length.
    """
    a, b, _, d = coordinates[:4]
    centroid = coordinates[:4].mean(axis=0)

    normal = np.cross(b - a, d - a)
    normal_length = GeometryCalculator.length(normal)
    offset = coordinates[4] - centroid
    offset_length = GeometryCalculator.length(offset)

    if normal_length == 0.0 or offset_length == 0.0:
        return 0.0, 0.0

    distance = float(np.dot(offset, normal)) / normal_length
    return distance, distance / offset_length


def base_planarity_deviation(coordinates: PyramidLike) -> float:
    """Max distance of the base vertices from their best-fit plane.

    Metrics do not check planarity; a warped base only degrades them.
    Returns NaN for input that is not a pyramid.
    """
    coords = coerce_coordinates(coordinates)
    if coords is None:
        return float("nan")
    deviation, _ = GeometryCalculator.plane_deviation(coords[:4])
    return deviation


# =============================================================================
# Volume
# =============================================================================

def evaluate_pyramid_volume(coordinates: PyramidLike) -> MetricOutcome:
    """Signed volume as the sum of two tetrahedra split along diagonal 1-3.

    Negative for a base wound clockwise seen from the apex.
    """
    coords = coerce_coordinates(coordinates)
    if coords is None:
        return MetricOutcome.invalid_input()

    volume = sum(tet_volume(tet) for tet in make_volume_tets(coords))
    return MetricOutcome(float(volume))


def pyramid_volume(coordinates: PyramidLike) -> float:
    return evaluate_pyramid_volume(coordinates).value


# =============================================================================
# Jacobian
# =============================================================================

def _corner_jacobians(coords: np.ndarray) -> np.ndarray:
    return np.array([tet_jacobian(tet) for tet in make_jacobian_tets(coords)])


def evaluate_pyramid_jacobian(coordinates: PyramidLike) -> MetricOutcome:
    """Minimum raw Jacobian over the four corner tetrahedra (length³)."""
    coords = coerce_coordinates(coordinates)
    if coords is None:
        return MetricOutcome.invalid_input()

    return MetricOutcome(float(_corner_jacobians(coords).min()))


def pyramid_jacobian(coordinates: PyramidLike) -> float:
    return evaluate_pyramid_jacobian(coordinates).value


# =============================================================================
# Scaled Jacobian
# =============================================================================

def evaluate_pyramid_scaled_jacobian(
    coordinates: PyramidLike,
    thresholds: DegeneracyThresholds = DEFAULT_THRESHOLDS,
    constants: NormalizationConstants = DEFAULT_CONSTANTS,
) -> MetricOutcome:
    """Worst corner Jacobian normalized by its three edge lengths.

    Each corner value is j / (l_a * l_b * l_c * cos 45°), which is 1.0
    for every corner of a right square pyramid with unit edges. Any edge
    shorter than ``thresholds.edge_length_floor`` makes the element
    degenerate.
    """
    coords = coerce_coordinates(coordinates)
    if coords is None:
        return MetricOutcome.invalid_input()

    lengths = edge_lengths(coords)
    short = np.flatnonzero(lengths < thresholds.edge_length_floor)
    if short.size:
        reason = f"zero-length edge {int(short[0])}"
        logger.debug("Scaled Jacobian degenerate: %s", reason)
        return MetricOutcome.degenerate(reason)

    jacobians = _corner_jacobians(coords)
    norms = lengths[np.array(CORNER_EDGES)].prod(axis=1) * constants.corner_factor
    return MetricOutcome(float((jacobians / norms).min()))


def pyramid_scaled_jacobian(
    coordinates: PyramidLike,
    thresholds: DegeneracyThresholds = DEFAULT_THRESHOLDS,
    constants: NormalizationConstants = DEFAULT_CONSTANTS,
) -> float:
    return evaluate_pyramid_scaled_jacobian(coordinates, thresholds, constants).value


# =============================================================================
# Shape
# =============================================================================

def evaluate_pyramid_shape(
    coordinates: PyramidLike,
    thresholds: DegeneracyThresholds = DEFAULT_THRESHOLDS,
    constants: NormalizationConstants = DEFAULT_CONSTANTS,
) -> MetricOutcome:
    """Base quad shape x apex alignment x height/footprint ratio.

    Any non-positive factor short-circuits to a degenerate outcome:

    1. quad shape of the base (0 for a flat or folded base)
    2. apex height over the base and cosine between the apex offset and
       the base normal (apex on, or behind, the base plane)
    3. min(h, h_ref) / max(h, h_ref) with h_ref the longest edge times
       ``constants.height_factor``
    """
    coords = coerce_coordinates(coordinates)
    if coords is None:
        return MetricOutcome.invalid_input()

    base, _ = make_faces(coords)
    base_shape = quad_shape(base, thresholds)
    if base_shape == 0.0:
        logger.debug("Shape degenerate: base quad shape is 0")
        return MetricOutcome.degenerate("degenerate base quadrilateral")

    dist, cos_angle = distance_to_base(coords)
    if dist <= 0.0 or cos_angle <= 0.0:
        logger.debug("Shape degenerate: apex height %.6g, cos %.6g", dist, cos_angle)
        return MetricOutcome.degenerate("apex on or behind the base plane")

    reference = largest_edge(coords) * constants.height_factor
    if dist < reference:
        aspect = dist / reference
    else:
        aspect = reference / dist

    return MetricOutcome(base_shape * cos_angle * aspect)


def pyramid_shape(
    coordinates: PyramidLike,
    thresholds: DegeneracyThresholds = DEFAULT_THRESHOLDS,
    constants: NormalizationConstants = DEFAULT_CONSTANTS,
) -> float:
    return evaluate_pyramid_shape(coordinates, thresholds, constants).value
