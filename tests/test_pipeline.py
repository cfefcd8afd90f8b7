import logging

import numpy as np
import pytest

from drillangle.config import DetectorConfig
from drillangle.core.frame import RawFrame
from drillangle.detection.base import Found, NotFound, NotFoundReason
from drillangle.detection.pipeline import AngleDetector, detect


class ScriptedBackend:
    """Backend returning one fixed contour and a fixed simplified polygon."""

    def __init__(self, polygon, contours=None):
        self.polygon = np.array(polygon, dtype=np.int32).reshape(-1, 2)
        if contours is None:
            contours = [np.array([[10, 10], [90, 10], [90, 90], [10, 90]], np.int32)]
        self.contours = contours

    def detect_edges(self, mask, low, high):
        return mask

    def trace_contours(self, edges):
        return self.contours

    def compute_area(self, contour):
        return 100.0

    def simplify_polygon(self, contour, epsilon, closed=True):
        return self.polygon


class FailingBackend(ScriptedBackend):
    def __init__(self):
        super().__init__([])

    def detect_edges(self, mask, low, high):
        raise RuntimeError("edge detector exploded")


def test_uniform_frame_is_not_found(uniform_frame):
    detection = AngleDetector().detect(uniform_frame)

    assert detection.found is False
    assert detection.angle is None
    assert detection.result == NotFound(NotFoundReason.EMPTY_CONTOUR_SET)
    np.testing.assert_array_equal(detection.annotated, uniform_frame)


def test_triangle_frame_is_found(triangle_frame):
    detection = AngleDetector().detect(triangle_frame)

    assert detection.found is True
    result = detection.result
    assert isinstance(result, Found)
    assert abs(result.apex[0] - 200) <= 15
    assert abs(result.apex[1] - 60) <= 15
    # Opening angle of the drawn triangle: 2 * atan(120 / 280) ~ 46.4 degrees
    assert result.angle == pytest.approx(46.4, abs=6.0)
    assert not np.array_equal(detection.annotated, triangle_frame)


def test_detection_is_deterministic(triangle_frame):
    detector = AngleDetector()
    first = detector.detect(triangle_frame)
    second = detector.detect(triangle_frame)

    assert first.result == second.result
    np.testing.assert_array_equal(first.annotated, second.annotated)


def test_output_never_aliases_input(triangle_frame, uniform_frame):
    before = triangle_frame.copy()
    for frame in (triangle_frame, uniform_frame):
        detection = AngleDetector().detect(frame)
        assert not np.shares_memory(detection.annotated, frame)
    np.testing.assert_array_equal(triangle_frame, before)


def test_raw_frame_with_row_padding(triangle_frame):
    height, width = triangle_frame.shape[:2]
    stride = width * 3 + 8
    padded = np.zeros((height, stride), dtype=np.uint8)
    padded[:, : width * 3] = triangle_frame.reshape(height, width * 3)
    frame = RawFrame(padded.tobytes(), width, height, stride)

    from_raw = AngleDetector().detect(frame)
    from_array = AngleDetector().detect(triangle_frame)

    assert from_raw.result == from_array.result
    np.testing.assert_array_equal(from_raw.annotated, from_array.annotated)


def test_two_vertex_polygon_is_not_found(uniform_frame):
    backend = ScriptedBackend([(10, 10), (90, 90)])

    detection = AngleDetector(backend=backend).detect(uniform_frame)

    assert detection.result.reason == NotFoundReason.INSUFFICIENT_VERTICES
    np.testing.assert_array_equal(detection.annotated, uniform_frame)


def test_four_vertex_polygon_is_filtered(uniform_frame):
    backend = ScriptedBackend([(80, 10), (30, 100), (40, 105), (130, 100)])

    detection = AngleDetector(backend=backend).detect(uniform_frame)

    assert detection.found is True
    assert detection.result.vertices == ((80, 10), (30, 100), (130, 100))
    assert detection.result.apex == (80, 10)


def test_four_vertex_polygon_filtered_below_three(uniform_frame):
    backend = ScriptedBackend([(80, 10), (85, 15), (30, 100), (35, 105)])

    detection = AngleDetector(backend=backend).detect(uniform_frame)

    assert detection.result == NotFound(
        NotFoundReason.INSUFFICIENT_VERTICES, "2 vertices after filtering"
    )


def test_five_vertex_polygon_skips_filter(uniform_frame):
    polygon = [(80, 10), (82, 12), (30, 100), (35, 105), (130, 100)]
    backend = ScriptedBackend(polygon)

    detection = AngleDetector(backend=backend).detect(uniform_frame)

    assert detection.found is True
    assert len(detection.result.vertices) == 5


def test_empty_contour_set_short_circuits(uniform_frame):
    backend = ScriptedBackend([(0, 0), (1, 1), (2, 0)], contours=[])

    detection = AngleDetector(backend=backend).detect(uniform_frame)

    assert detection.result.reason == NotFoundReason.EMPTY_CONTOUR_SET


def test_fault_is_contained_and_logged(uniform_frame, caplog):
    with caplog.at_level(logging.ERROR, logger="drillangle"):
        detection = AngleDetector(backend=FailingBackend()).detect(uniform_frame)

    assert detection.result.reason == NotFoundReason.PROCESSING_FAULT
    assert "edge detector exploded" in detection.result.message
    np.testing.assert_array_equal(detection.annotated, uniform_frame)
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_missing_frame_is_a_fault():
    detection = AngleDetector().detect(None)

    assert detection.result.reason == NotFoundReason.PROCESSING_FAULT
    assert detection.annotated.size == 0


def test_config_override_changes_filter_distance(uniform_frame):
    polygon = [(80, 10), (30, 100), (40, 105), (130, 100)]
    config = DetectorConfig(min_vertex_distance=5)

    detection = AngleDetector(config, ScriptedBackend(polygon)).detect(uniform_frame)

    assert len(detection.result.vertices) == 4


def test_detect_function_returns_frame_and_flag(triangle_frame, uniform_frame):
    annotated, found = detect(triangle_frame)
    assert found is True
    assert annotated.shape == triangle_frame.shape

    annotated, found = detect(uniform_frame)
    assert found is False
    np.testing.assert_array_equal(annotated, uniform_frame)
