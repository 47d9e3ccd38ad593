"""Reference pyramids shared across test modules."""

import math

import numpy as np
import pytest

H_IDEAL = 1.0 / math.sqrt(2.0)


def right_pyramid(height=H_IDEAL, scale=1.0):
    """Unit square base, apex above the centroid."""
    return np.array([
        (0.0, 0.0, 0.0),
        (1.0, 0.0, 0.0),
        (1.0, 1.0, 0.0),
        (0.0, 1.0, 0.0),
        (0.5, 0.5, height),
    ]) * scale


@pytest.fixture
def ideal_pyramid():
    """Right square pyramid with every edge of unit length."""
    return right_pyramid()


@pytest.fixture
def inverted_pyramid():
    """Apex below the base plane."""
    return right_pyramid(height=-H_IDEAL)
