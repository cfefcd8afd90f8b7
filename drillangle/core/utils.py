"""Point and geometry helpers."""

import math
from typing import Sequence, Tuple

import numpy as np


Point = Tuple[int, int]


def as_points(points) -> np.ndarray:
    """Convert a point sequence or OpenCV contour to an (N, 2) int32 array.

    Accepts lists of (x, y) pairs as well as the (N, 1, 2) layout OpenCV
    uses for contours.
    """
    return np.asarray(points, dtype=np.int32).reshape(-1, 2)


def as_point(p: Sequence[int]) -> Point:
    """Convert an array row to a plain (x, y) tuple."""
    return int(p[0]), int(p[1])


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(float(a[0]) - float(b[0]), float(a[1]) - float(b[1]))


def bearing(origin: Sequence[float], target: Sequence[float]) -> float:
    """Angle of the vector from `origin` to `target` in degrees.

    Measured from the +x axis with image coordinates (y grows downwards),
    in the range (-180, 180].
    """
    dy = float(target[1]) - float(origin[1])
    dx = float(target[0]) - float(origin[0])
    return math.degrees(math.atan2(dy, dx))
