"""Bitmask dispatch over the pyramid metrics."""

from __future__ import annotations

import logging
import operator
from dataclasses import asdict, dataclass
from enum import IntFlag
from typing import Callable, Dict, Tuple

from .element import PyramidLike, coerce_coordinates
from .metrics import (
    pyramid_jacobian,
    pyramid_scaled_jacobian,
    pyramid_shape,
    pyramid_volume,
)

logger = logging.getLogger(__name__)


class PyramidMetric(IntFlag):
    """Metric request flags."""

    VOLUME = 1
    JACOBIAN = 2
    SCALED_JACOBIAN = 4
    SHAPE = 8
    ALL = VOLUME | JACOBIAN | SCALED_JACOBIAN | SHAPE


@dataclass
class PyramidMetricVals:
    """One field per metric family, all 0.0 unless computed."""

    volume: float = 0.0
    jacobian: float = 0.0
    scaled_jacobian: float = 0.0
    shape: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


# Priority order: the first set flag wins unless accumulating.
_DISPATCH: Tuple[Tuple[PyramidMetric, str, Callable[..., float]], ...] = (
    (PyramidMetric.VOLUME, "volume", pyramid_volume),
    (PyramidMetric.JACOBIAN, "jacobian", pyramid_jacobian),
    (PyramidMetric.SCALED_JACOBIAN, "scaled_jacobian", pyramid_scaled_jacobian),
    (PyramidMetric.SHAPE, "shape", pyramid_shape),
)


def pyramid_quality(
    coordinates: PyramidLike,
    request: int,
    accumulate: bool = False,
) -> PyramidMetricVals:
    """Compute the requested metrics into a fresh, zeroed record.

    Parameters
    ----------
    coordinates : Pyramid or array-like
        Five points, base v0..v3 then apex v4.
    request : int
        Bitwise OR of :class:`PyramidMetric` flags. Unknown bits are ignored.
    accumulate : bool
        False (default): only the first set flag in the order volume,
        Jacobian, scaled Jacobian, shape is computed and later flags are
        skipped. True: every set flag is computed.

    Returns
    -------
    PyramidMetricVals
        Fields not computed stay at 0.0.
    """
    if isinstance(request, bool):
        raise TypeError("request must be an int or PyramidMetric, got bool")
    try:
        request = operator.index(request)
    except TypeError:
        raise TypeError(f"request must be an int or PyramidMetric, got {type(request).__name__}") from None

    vals = PyramidMetricVals()
    # coerce once so each metric sees the same array
    coords = coerce_coordinates(coordinates)
    if coords is None:
        logger.debug("pyramid_quality: input is not five 3-D points, all metrics left at 0")
        return vals

    for flag, field_name, func in _DISPATCH:
        if not request & flag:
            continue
        setattr(vals, field_name, func(coords))
        if not accumulate:
            break

    return vals
