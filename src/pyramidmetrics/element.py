"""Fixed-arity pyramid element.

The pyramid element::

           4
          /|\
         / | \
        /  |  \
       3---|---2
      /    |  /
     0---------1

Nodes 0-3 form the quadrilateral base, traversed consistently. Node 4
is the apex. A well-formed element winds the base counter-clockwise
seen from the apex.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

logger = logging.getLogger(__name__)

NUM_NODES = 5
BASE_NODES = (0, 1, 2, 3)
APEX_NODE = 4


class PyramidArityError(ValueError):
    """Raised when a pyramid is built from anything but five 3-D points."""

    def __init__(self, shape: tuple, message: Optional[str] = None) -> None:
        if message is None:
            message = f"A pyramid needs {NUM_NODES} points with 3 coordinates each, got array of shape {shape}."
        super().__init__(message)
        self.shape = shape


@dataclass(frozen=True)
class Pyramid:
    """Five ordered 3-D points: base v0..v3 followed by the apex v4.

    The coordinate array is copied on construction and made read-only,
    so a Pyramid can be shared freely between threads.
    """

    coordinates: np.ndarray

    def __post_init__(self):
        coords = np.array(self.coordinates, dtype=float)
        if coords.shape != (NUM_NODES, 3):
            raise PyramidArityError(coords.shape)
        # -0.0 -> 0.0 so equal pyramids hash equal
        coords = coords + 0.0
        coords.setflags(write=False)
        object.__setattr__(self, "coordinates", coords)

    @classmethod
    def from_points(cls, points: Sequence[Sequence[float]]) -> "Pyramid":
        """Build from any sequence of five (x, y, z) triples."""
        return cls(np.asarray(points, dtype=float))

    @property
    def base(self) -> np.ndarray:
        """(4, 3) copy of the base quadrilateral."""
        return self.coordinates[list(BASE_NODES)]

    @property
    def apex(self) -> np.ndarray:
        return self.coordinates[APEX_NODE]

    def __len__(self) -> int:
        return NUM_NODES

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pyramid):
            return NotImplemented
        return bool(np.array_equal(self.coordinates, other.coordinates))

    def __hash__(self) -> int:
        return hash(self.coordinates.tobytes())


PyramidLike = Union[Pyramid, np.ndarray, Sequence[Sequence[float]]]


def coerce_coordinates(coordinates: PyramidLike) -> Optional[np.ndarray]:
    """Return a (5, 3) float array, or None if the input has the wrong arity."""
    if isinstance(coordinates, Pyramid):
        return coordinates.coordinates

    try:
        coords = np.asarray(coordinates, dtype=float)
    except ValueError:
        # ragged nesting, e.g. a point with two coordinates
        logger.debug("Rejected pyramid input that is not a rectangular array")
        return None
    if coords.shape != (NUM_NODES, 3):
        logger.debug("Rejected pyramid input of shape %s", coords.shape)
        return None
    return coords
