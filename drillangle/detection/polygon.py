"""Polygon approximation and vertex filtering."""

import numpy as np

from ..config import DetectorConfig
from ..core.utils import as_points, distance
from ..vision.base import VisionBackend


def contour_perimeter(contour: np.ndarray) -> float:
    """Length of a contour treated as a closed loop."""
    points = as_points(contour).astype(np.float64)
    if len(points) < 2:
        return 0.0
    segments = np.roll(points, -1, axis=0) - points
    return float(np.sum(np.hypot(segments[:, 0], segments[:, 1])))


def approximate_polygon(
    contour: np.ndarray, backend: VisionBackend, config: DetectorConfig
) -> np.ndarray:
    """Simplify a contour to a polygon.

    The tolerance is `epsilon_factor` times the perimeter, so contours of
    the same shape simplify alike regardless of scale.
    """
    epsilon = config.epsilon_factor * contour_perimeter(contour)
    return as_points(backend.simplify_polygon(contour, epsilon, True))


def filter_vertices(points, min_distance: float) -> np.ndarray:
    """Drop vertices closer than `min_distance` to an earlier kept vertex.

    Args:
        points: Sequence of (x, y) points, visited in order.
        min_distance: Minimum distance in pixels between kept vertices.

    Returns:
        (K, 2) array of the kept vertices in their original order.
    """
    kept = []
    for p in as_points(points):
        if all(distance(p, q) >= min_distance for q in kept):
            kept.append(p)
    return as_points(kept)
