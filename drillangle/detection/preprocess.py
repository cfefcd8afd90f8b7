"""Image binarization ahead of edge detection."""

import cv2
import numpy as np

from ..config import DetectorConfig


def preprocess(image: np.ndarray, config: DetectorConfig) -> np.ndarray:
    """Turn a BGR frame into a binary mask of locally dark regions.

    The frame is converted to grayscale, Gaussian smoothed and binarized
    with a mean adaptive threshold in inverse polarity, so pixels darker
    than their neighbourhood mean minus `adaptive_offset` become 255.

    Args:
        image: (H, W, 3) uint8 BGR image.
        config: Detector configuration.

    Returns:
        (H, W) uint8 mask.
    """
    gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    gray = cv2.GaussianBlur(gray, config.blur_kernel, config.blur_sigma)
    return cv2.adaptiveThreshold(
        gray,
        255,
        cv2.ADAPTIVE_THRESH_MEAN_C,
        cv2.THRESH_BINARY_INV,
        config.adaptive_block_size,
        config.adaptive_offset,
    )
