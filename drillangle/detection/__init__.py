"""Angle detection pipeline and its stages."""

from .angle import calculate_angle
from .base import AngleResult, Detection, Found, NotFound, NotFoundReason
from .contours import extract_contours, select_main_contour
from .pipeline import AngleDetector, detect
from .polygon import approximate_polygon, contour_perimeter, filter_vertices
from .preprocess import preprocess
from .render import render_result

__all__ = [
    "AngleDetector",
    "AngleResult",
    "Detection",
    "Found",
    "NotFound",
    "NotFoundReason",
    "approximate_polygon",
    "calculate_angle",
    "contour_perimeter",
    "detect",
    "extract_contours",
    "filter_vertices",
    "preprocess",
    "render_result",
    "select_main_contour",
]
