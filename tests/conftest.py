import cv2
import numpy as np
import pytest


@pytest.fixture
def triangle_frame() -> np.ndarray:
    """Dark filled triangle, apex up, on a light background (BGR)."""
    frame = np.full((400, 400, 3), 230, dtype=np.uint8)
    pts = np.array([[200, 60], [80, 340], [320, 340]], dtype=np.int32)
    cv2.fillPoly(frame, [pts], (20, 20, 20))
    return frame


@pytest.fixture
def uniform_frame() -> np.ndarray:
    return np.full((120, 160, 3), 128, dtype=np.uint8)
