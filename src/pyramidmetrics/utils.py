import logging
from typing import List

from .decomposition import EDGES, edge_lengths
from .element import PyramidLike, coerce_coordinates
from .metrics import (
    base_planarity_deviation,
    distance_to_base,
    evaluate_pyramid_jacobian,
    evaluate_pyramid_scaled_jacobian,
    evaluate_pyramid_shape,
    evaluate_pyramid_volume,
)

PACKAGE_LOGGER = "pyramidmetrics"


def configure_debug_logging() -> logging.Logger:
    """Send package DEBUG records to stderr. Safe to call repeatedly."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


# -----------------------------
# Debug (tabular) representation
# -----------------------------
def quality_report(coordinates: PyramidLike) -> str:
    """
    Debug listing of nodes, edge lengths, apex placement and all four metrics.
    Degenerate metrics are shown with the reason that zeroed them.
    """
    coords = coerce_coordinates(coordinates)
    if coords is None:
        return "# Pyramid: invalid input (expected 5 points with 3 coordinates)"

    lines: List[str] = []
    lines.append("# Pyramid: 5 nodes, 8 edges")
    lines.append("# [idx]          x            y            z")
    for idx, (x, y, z) in enumerate(coords):
        tag = " apex" if idx == 4 else ""
        lines.append(f"[{idx:>3}] {x:>12.6g} {y:>12.6g} {z:>12.6g}{tag}")

    lines.append("")
    lines.append("# Edges (i-j: length)")
    for (i, j), length in zip(EDGES, edge_lengths(coords)):
        lines.append(f"[{i}-{j}]: {length:.6g}")

    dist, cos_angle = distance_to_base(coords)
    lines.append("")
    lines.append(f"# apex height={dist:.6g}  cos(apex, normal)={cos_angle:.6g}  "
                 f"base warp={base_planarity_deviation(coords):.3g}")

    lines.append("")
    lines.append("# Metrics")
    outcomes = (
        ("volume", evaluate_pyramid_volume(coords)),
        ("jacobian", evaluate_pyramid_jacobian(coords)),
        ("scaled_jacobian", evaluate_pyramid_scaled_jacobian(coords)),
        ("shape", evaluate_pyramid_shape(coords)),
    )
    for name, outcome in outcomes:
        line = f"{name:<16} {outcome.value:>12.6g}  {outcome.status.value}"
        if outcome.reason:
            line += f" ({outcome.reason})"
        lines.append(line)
    return "\n".join(lines)
