"""Capability protocol for vision backends."""

from typing import List, Protocol

import numpy as np


class VisionBackend(Protocol):
    """Protocol for the primitive operations the detection pipeline needs.

    Contours and polygons are exchanged as (N, 2) int32 arrays of (x, y)
    points, so pipeline stages never see backend-specific types.
    """

    def detect_edges(self, mask: np.ndarray, low: float, high: float) -> np.ndarray:
        """Detect edges in a single-channel image.

        Args:
            mask: Single-channel uint8 image.
            low: Lower hysteresis threshold.
            high: Upper hysteresis threshold.

        Returns:
            Binary edge map with the same shape as `mask`.
        """
        ...

    def trace_contours(self, edges: np.ndarray) -> List[np.ndarray]:
        """Trace all closed boundaries in an edge map, without hierarchy.

        Only the points where the boundary changes direction are kept.

        Returns:
            List of (N, 2) int32 contours, possibly empty.
        """
        ...

    def compute_area(self, contour: np.ndarray) -> float:
        """Return the area enclosed by a contour."""
        ...

    def simplify_polygon(
        self, contour: np.ndarray, epsilon: float, closed: bool = True
    ) -> np.ndarray:
        """Simplify a contour with the Douglas-Peucker algorithm.

        Args:
            contour: (N, 2) int32 contour.
            epsilon: Maximum distance between the contour and its approximation.
            closed: Treat the contour as a closed loop.

        Returns:
            (M, 2) int32 polygon.
        """
        ...
