"""Angle detection pipeline."""

import logging
from typing import Optional, Tuple

import numpy as np

from ..config import DetectorConfig
from ..core.frame import FrameFormatError, as_bgr_array
from ..vision.base import VisionBackend
from ..vision.opencv_backend import OpenCVBackend
from .angle import calculate_angle
from .base import AngleResult, Detection, Found, NotFound, NotFoundReason
from .contours import extract_contours, select_main_contour
from .polygon import approximate_polygon, filter_vertices
from .preprocess import preprocess
from .render import render_result

logger = logging.getLogger("drillangle.detection.pipeline")


class AngleDetector:
    """Measure the opening angle of a V-shaped feature on single frames.

    Each call to `detect` is independent. The detector only holds its
    configuration and backend, so one instance can serve several threads
    as long as each call gets its own frame.
    """

    def __init__(
        self,
        config: Optional[DetectorConfig] = None,
        backend: Optional[VisionBackend] = None,
    ):
        """Initialize the detector.

        Args:
            config: Pipeline constants. Defaults to DetectorConfig().
            backend: Vision primitives. Defaults to OpenCVBackend().
        """
        self.config = config or DetectorConfig()
        self.backend = backend or OpenCVBackend()

    def measure(self, image: np.ndarray) -> Tuple[AngleResult, np.ndarray]:
        """Run the measuring stages on a BGR image.

        Exceptions from the stages propagate.

        Returns:
            Tuple of (result, main contour).
        """
        mask = preprocess(image, self.config)

        contours = extract_contours(mask, self.backend, self.config)
        if not contours:
            return NotFound(NotFoundReason.EMPTY_CONTOUR_SET), np.zeros((0, 2), np.int32)

        contour = select_main_contour(contours, self.backend)
        vertices = approximate_polygon(contour, self.backend, self.config)
        logger.debug("Polygon has %d vertices", len(vertices))
        if len(vertices) < 3:
            return NotFound(
                NotFoundReason.INSUFFICIENT_VERTICES,
                f"{len(vertices)} vertices after simplification",
            ), contour

        if len(vertices) == self.config.filter_vertex_count:
            vertices = filter_vertices(vertices, self.config.min_vertex_distance)
            if len(vertices) < 3:
                return NotFound(
                    NotFoundReason.INSUFFICIENT_VERTICES,
                    f"{len(vertices)} vertices after filtering",
                ), contour

        return calculate_angle(vertices), contour

    def detect(self, frame) -> Detection:
        """Detect the angle on a frame and annotate it.

        Never raises: unexpected failures are logged and reported as
        NotFound(PROCESSING_FAULT).

        Args:
            frame: RawFrame or (H, W, 3) uint8 BGR array.

        Returns:
            Detection with the annotated copy and the result.
        """
        try:
            image = np.ascontiguousarray(as_bgr_array(frame))
            result, contour = self.measure(image)
            if isinstance(result, Found):
                annotated = render_result(
                    image, contour, result.vertices, result.angle, self.config.render
                )
                logger.debug("Angle %.2f at apex %s", result.angle, result.apex)
            else:
                annotated = image.copy()
                logger.debug("No angle: %s %s", result.reason, result.message)
            return Detection(annotated=annotated, result=result)
        except Exception as e:
            logger.exception("Angle detection failed")
            return Detection(
                annotated=_unmodified_copy(frame),
                result=NotFound(NotFoundReason.PROCESSING_FAULT, str(e)),
            )


def _unmodified_copy(frame) -> np.ndarray:
    """Copy of the input frame, or an empty image if it cannot be read."""
    try:
        return np.array(as_bgr_array(frame), copy=True)
    except FrameFormatError:
        return np.zeros((0, 0, 3), dtype=np.uint8)


def detect(frame, config: Optional[DetectorConfig] = None) -> Tuple[np.ndarray, bool]:
    """Detect the angle on a single frame.

    Returns:
        Tuple of (annotated frame, found).
    """
    detection = AngleDetector(config).detect(frame)
    return detection.annotated, detection.found
