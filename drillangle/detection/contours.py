"""Contour extraction and selection."""

import logging
from typing import List

import numpy as np

from ..config import DetectorConfig
from ..core.utils import as_points
from ..vision.base import VisionBackend

logger = logging.getLogger("drillangle.detection.contours")


def extract_contours(
    mask: np.ndarray, backend: VisionBackend, config: DetectorConfig
) -> List[np.ndarray]:
    """Run edge detection on the mask and trace every closed boundary.

    Returns:
        List of (N, 2) contours. An empty list means no boundary was found.
    """
    edges = backend.detect_edges(mask, config.canny_low, config.canny_high)
    contours = backend.trace_contours(edges)
    logger.debug("Traced %d contours", len(contours))
    return contours


def select_main_contour(contours: List[np.ndarray], backend: VisionBackend) -> np.ndarray:
    """Pick the contour enclosing the largest area.

    The comparison is strict, so the first of several equal-area contours
    wins and a contour with zero area is never picked.

    Returns:
        The selected contour, or an empty (0, 2) array if none qualifies.
    """
    main_contour = as_points([])
    max_area = 0.0
    for contour in contours:
        area = backend.compute_area(contour)
        if area > max_area:
            max_area = area
            main_contour = contour
    logger.debug("Main contour: %d points, area %.1f", len(main_contour), max_area)
    return main_contour
