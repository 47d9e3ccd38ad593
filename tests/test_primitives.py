"""Tests for the tetrahedron and quadrilateral primitives."""

import numpy as np
import pytest

from pyramidmetrics.config_classes import DegeneracyThresholds
from pyramidmetrics.primitives import (
    quad_edges,
    quad_shape,
    quad_signed_corner_areas,
    tet_jacobian,
    tet_volume,
)

RIGHT_TET = np.array([(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1)], dtype=float)
SQUARE = np.array([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)], dtype=float)


class TestTetrahedron:
    def test_right_tet_jacobian(self):
        assert tet_jacobian(RIGHT_TET) == pytest.approx(1.0)

    def test_right_tet_volume(self):
        assert tet_volume(RIGHT_TET) == pytest.approx(1.0 / 6.0)

    def test_swapped_base_is_negative(self):
        swapped = RIGHT_TET[[0, 2, 1, 3]]
        assert tet_jacobian(swapped) == pytest.approx(-1.0)

    def test_flat_tet_is_zero(self):
        flat = RIGHT_TET.copy()
        flat[3] = (0.3, 0.3, 0.0)
        assert tet_jacobian(flat) == pytest.approx(0.0)


class TestQuadrilateral:
    def test_edges_close_the_loop(self):
        edges = quad_edges(SQUARE)
        assert np.allclose(edges.sum(axis=0), 0.0)
        assert np.allclose(edges[3], [0, -1, 0])

    def test_square_corner_areas(self):
        assert np.allclose(quad_signed_corner_areas(SQUARE), 1.0)

    def test_square_shape_is_one(self):
        assert quad_shape(SQUARE) == pytest.approx(1.0)

    def test_rectangle_shape(self):
        """2x1 rectangle: 2 * area / (l0² + l1²) = 2 * 2 / 5."""
        rect = SQUARE * np.array([2.0, 1.0, 1.0])
        assert quad_shape(rect) == pytest.approx(0.8)

    def test_shape_independent_of_winding(self):
        assert quad_shape(SQUARE[::-1]) == pytest.approx(1.0)

    def test_collapsed_edge_is_zero(self):
        collapsed = SQUARE.copy()
        collapsed[1] = collapsed[0]
        assert quad_shape(collapsed) == 0.0

    def test_bowtie_is_zero(self):
        """Self-intersecting quad has no centre normal; shape collapses to 0."""
        bowtie = np.array([(0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 0)], dtype=float)
        assert quad_shape(bowtie) == 0.0

    def test_custom_floor_rejects_short_edge(self):
        small = SQUARE * 0.1
        assert quad_shape(small) == pytest.approx(1.0)
        strict = DegeneracyThresholds(quad_length_squared_floor=0.05)
        assert quad_shape(small, strict) == 0.0

    def test_length_floor_does_not_clamp_score(self):
        """2x1 rectangle scores 0.8; a squared-length floor of 0.9 leaves it alone."""
        rect = SQUARE * np.array([2.0, 1.0, 1.0])
        floor = DegeneracyThresholds(quad_length_squared_floor=0.9)
        assert quad_shape(rect, floor) == pytest.approx(0.8)

    def test_shape_floor_clamps_score(self):
        rect = SQUARE * np.array([2.0, 1.0, 1.0])
        assert quad_shape(rect, DegeneracyThresholds(quad_shape_floor=0.85)) == 0.0
        assert quad_shape(rect, DegeneracyThresholds(quad_shape_floor=0.75)) == pytest.approx(0.8)
