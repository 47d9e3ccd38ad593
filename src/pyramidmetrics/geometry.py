"""Pure vector calculations on 3-D points.

All methods are stateless and operate on coordinate data.
"""

from typing import Tuple

import numpy as np


class GeometryCalculator:
    """Stateless vector primitive backed by numpy.

    All methods are static - no mutable state, can be shared across components.
    """

    @staticmethod
    def length(v: np.ndarray) -> float:
        """Euclidean length of a vector."""
        return float(np.linalg.norm(v))

    @staticmethod
    def length_squared(v: np.ndarray) -> float:
        return float(np.dot(v, v))

    @staticmethod
    def normalize(v: np.ndarray) -> np.ndarray:
        """Unit vector along v; a zero vector is returned unchanged."""
        mag = np.linalg.norm(v)
        if mag == 0.0:
            return np.asarray(v, dtype=float)
        return v / mag

    @staticmethod
    def triple_product(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> float:
        """Scalar triple product a · (b × c)."""
        return float(np.dot(a, np.cross(b, c)))

    @staticmethod
    def plane_deviation(points: np.ndarray) -> Tuple[float, np.ndarray]:
        """Max distance of points from their best-fit plane.

        Uses SVD to find the plane through the centroid.

        Parameters
        ----------
        points : np.ndarray
            (N, 3) coordinates, N >= 3

        Returns
        -------
        tuple
            (max_deviation, unit_normal)
        """
        coords = np.asarray(points, dtype=float)
        centered = coords - coords.mean(axis=0)

        # Plane normal is smallest singular vector
        _, _, vh = np.linalg.svd(centered)
        normal = vh[-1]

        distances = np.abs(centered @ normal)
        return float(distances.max()), normal
