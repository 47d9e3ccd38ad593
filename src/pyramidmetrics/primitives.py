"""Tetrahedron and quadrilateral primitives shared by the pyramid metrics.

Vertex order conventions match the sub-shapes produced in
``decomposition``: a tetrahedron is (p0, p1, p2, p3) with p3 the
off-base vertex, a quadrilateral is four points in traversal order.
"""

from __future__ import annotations

import numpy as np

from .config_classes import DEFAULT_THRESHOLDS, DegeneracyThresholds
from .geometry import GeometryCalculator


def tet_jacobian(tet: np.ndarray) -> float:
    """Signed Jacobian of a linear tetrahedron.

    Equals six times the signed volume: positive when p0, p1, p2 wind
    counter-clockwise seen from p3.
    """
    p0, p1, p2, p3 = tet
    side0 = p1 - p0
    side2 = p0 - p2
    side3 = p3 - p0
    return GeometryCalculator.triple_product(side3, side2, side0)


def tet_volume(tet: np.ndarray) -> float:
    """Signed volume of a linear tetrahedron."""
    return tet_jacobian(tet) / 6.0


def quad_edges(quad: np.ndarray) -> np.ndarray:
    """Directed edges q[i] -> q[i+1 mod 4], shape (4, 3)."""
    return np.roll(quad, -1, axis=0) - quad


def quad_signed_corner_areas(quad: np.ndarray) -> np.ndarray:
    """Signed area of the parallelogram at each corner.

    Corner normals are projected on the unit normal of the quad centre,
    so a corner that folds over reports a negative area.
    """
    edges = quad_edges(quad)
    # corner i sits between incoming edge i-1 and outgoing edge i
    corner_normals = np.cross(np.roll(edges, 1, axis=0), edges)

    axis0 = edges[0] - edges[2]
    axis1 = edges[1] - edges[3]
    unit_center_normal = GeometryCalculator.normalize(np.cross(axis0, axis1))

    return corner_normals @ unit_center_normal


def quad_shape(quad: np.ndarray, thresholds: DegeneracyThresholds = DEFAULT_THRESHOLDS) -> float:
    """Shape score of a quadrilateral in [0, 1]; 1.0 for a square.

    Returns 0 for a collapsed edge or when the worst corner is folded.
    """
    edges = quad_edges(quad)
    length_squared = np.einsum("ij,ij->i", edges, edges)
    if np.any(length_squared <= thresholds.quad_length_squared_floor):
        return 0.0

    areas = quad_signed_corner_areas(quad)
    # each corner against its two adjacent edges
    ratios = areas / (length_squared + np.roll(length_squared, 1))
    min_shape = 2.0 * float(ratios.min())

    if min_shape < thresholds.quad_shape_floor:
        return 0.0
    return min_shape
