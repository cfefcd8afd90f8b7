"""OpenCV implementation of the vision backend protocol."""

from typing import List

import cv2
import numpy as np

from ..core.utils import as_points


class OpenCVBackend:
    """Vision backend built on OpenCV primitives.

    The backend holds no state, so one instance can serve concurrent callers.
    """

    def detect_edges(self, mask: np.ndarray, low: float, high: float) -> np.ndarray:
        return cv2.Canny(mask, low, high)

    def trace_contours(self, edges: np.ndarray) -> List[np.ndarray]:
        # OpenCV 3 returns (image, contours, hierarchy), OpenCV 4 (contours, hierarchy)
        contours = cv2.findContours(edges, cv2.RETR_LIST, cv2.CHAIN_APPROX_SIMPLE)[-2]
        return [as_points(c) for c in contours]

    def compute_area(self, contour: np.ndarray) -> float:
        if len(contour) == 0:
            return 0.0
        return float(cv2.contourArea(as_points(contour)))

    def simplify_polygon(
        self, contour: np.ndarray, epsilon: float, closed: bool = True
    ) -> np.ndarray:
        if len(contour) == 0:
            return as_points([])
        approx = cv2.approxPolyDP(as_points(contour).reshape(-1, 1, 2), epsilon, closed)
        return as_points(approx)
