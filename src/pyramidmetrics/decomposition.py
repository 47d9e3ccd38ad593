"""Decomposition of a pyramid into tractable sub-shapes.

A pyramid has no single canonical split, so each metric family uses its
own decomposition:

- two tetrahedra whose signed volumes sum to the pyramid volume
- four corner tetrahedra probing the Jacobian at each base corner
  (overlapping, not a partition)
- five faces: the base quadrilateral and four apex triangles
- eight directed edges for length normalization

Builders copy vertices; they never validate arity (see ``element``).
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

# Vertex index tables. Order within each tuple matters for orientation.
VOLUME_TETS: Tuple[Tuple[int, ...], ...] = (
    (0, 1, 3, 4),
    (2, 3, 1, 4),
)

JACOBIAN_TETS: Tuple[Tuple[int, ...], ...] = (
    (0, 1, 2, 4),
    (0, 2, 3, 4),
    (0, 1, 3, 4),
    (1, 2, 3, 4),
)

BASE_FACE: Tuple[int, ...] = (0, 1, 2, 3)

SIDE_FACES: Tuple[Tuple[int, ...], ...] = (
    (0, 1, 4),
    (1, 2, 4),
    (2, 3, 4),
    (3, 0, 4),
)

# (tail, head): four base edges then four lateral edges towards the apex
EDGES: Tuple[Tuple[int, int], ...] = (
    (0, 1),
    (1, 2),
    (2, 3),
    (3, 0),
    (0, 4),
    (1, 4),
    (2, 4),
    (3, 4),
)

# Edges meeting at each corner tetrahedron of JACOBIAN_TETS
CORNER_EDGES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 5),
    (2, 3, 7),
    (0, 3, 4),
    (1, 2, 6),
)


def make_volume_tets(coordinates: np.ndarray) -> np.ndarray:
    """Two tetrahedra, shape (2, 4, 3), summing to the pyramid volume.

    Both share the base diagonal 1-3 so the split holds for a
    non-convex base as well.
    """
    return coordinates[np.array(VOLUME_TETS)]


def make_jacobian_tets(coordinates: np.ndarray) -> np.ndarray:
    """Four corner tetrahedra, shape (4, 4, 3), apex last in each."""
    return coordinates[np.array(JACOBIAN_TETS)]


def make_faces(coordinates: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Base quadrilateral (4, 3) and side triangles (4, 3, 3)."""
    base = coordinates[np.array(BASE_FACE)]
    triangles = coordinates[np.array(SIDE_FACES)]
    return base, triangles


def make_edges(coordinates: np.ndarray) -> np.ndarray:
    """Eight directed edge vectors, shape (8, 3), head minus tail."""
    idx = np.array(EDGES)
    return coordinates[idx[:, 1]] - coordinates[idx[:, 0]]


def edge_lengths(coordinates: np.ndarray) -> np.ndarray:
    """Lengths of the eight edges in EDGES order."""
    return np.linalg.norm(make_edges(coordinates), axis=1)
