"""Tests for the sub-shape builders."""

import numpy as np
import pytest

from pyramidmetrics.decomposition import (
    CORNER_EDGES,
    EDGES,
    JACOBIAN_TETS,
    edge_lengths,
    make_edges,
    make_faces,
    make_jacobian_tets,
    make_volume_tets,
)

# Distinct rows so index mix-ups show up
COORDS = np.arange(15, dtype=float).reshape(5, 3)


def test_volume_tets_order():
    tets = make_volume_tets(COORDS)
    assert tets.shape == (2, 4, 3)
    assert np.array_equal(tets[0], COORDS[[0, 1, 3, 4]])
    assert np.array_equal(tets[1], COORDS[[2, 3, 1, 4]])


def test_jacobian_tets_order():
    tets = make_jacobian_tets(COORDS)
    assert tets.shape == (4, 4, 3)
    expected = [(0, 1, 2, 4), (0, 2, 3, 4), (0, 1, 3, 4), (1, 2, 3, 4)]
    for tet, idx in zip(tets, expected):
        assert np.array_equal(tet, COORDS[list(idx)])


def test_jacobian_tets_end_at_apex():
    assert all(tet[-1] == 4 for tet in JACOBIAN_TETS)


def test_faces():
    base, triangles = make_faces(COORDS)
    assert np.array_equal(base, COORDS[:4])
    assert triangles.shape == (4, 3, 3)
    assert np.array_equal(triangles[0], COORDS[[0, 1, 4]])
    assert np.array_equal(triangles[3], COORDS[[3, 0, 4]])


def test_builders_copy():
    """Writing into a sub-shape leaves the input untouched."""
    coords = COORDS.copy()
    tets = make_jacobian_tets(coords)
    tets[0, 0] = -1.0
    assert np.array_equal(coords, COORDS)


def test_edges_directed_head_minus_tail():
    edges = make_edges(COORDS)
    assert edges.shape == (8, 3)
    for vec, (tail, head) in zip(edges, EDGES):
        assert np.array_equal(vec, COORDS[head] - COORDS[tail])


def test_base_edges_close_the_loop():
    assert np.allclose(make_edges(COORDS)[:4].sum(axis=0), 0.0)


def test_edge_lengths_unit_pyramid(ideal_pyramid):
    assert np.allclose(edge_lengths(ideal_pyramid), 1.0)


def test_corner_edges_meet_at_corner():
    """The three normalizing edges of a corner share one node of that tet."""
    for tet, corner in zip(JACOBIAN_TETS, CORNER_EDGES):
        shared = set.intersection(*(set(EDGES[e]) for e in corner))
        assert len(shared) == 1
        assert shared.pop() in tet


@pytest.mark.parametrize("builder", [make_volume_tets, make_jacobian_tets, make_edges])
def test_builders_are_deterministic(builder):
    assert np.array_equal(builder(COORDS), builder(COORDS))
