"""Vision backends providing the primitive image operations."""

from .base import VisionBackend
from .opencv_backend import OpenCVBackend

__all__ = [
    "VisionBackend",
    "OpenCVBackend",
]
