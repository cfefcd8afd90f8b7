"""Result types of the angle detection pipeline."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union

import numpy as np

from ..core.utils import Point


class NotFoundReason(Enum):
    """Why no angle could be measured on a frame."""

    EMPTY_CONTOUR_SET = "empty_contour_set"
    INSUFFICIENT_VERTICES = "insufficient_vertices"
    PROCESSING_FAULT = "processing_fault"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Found:
    """A measured angle.

    Attributes:
        apex: Topmost vertex, the vertex of the angle.
        ray1: Second-to-last vertex in top-to-bottom order.
        ray2: Last vertex in top-to-bottom order.
        angle: Absolute difference of the two ray bearings in degrees.
        vertices: All vertices used, sorted top to bottom.
    """

    apex: Point
    ray1: Point
    ray2: Point
    angle: float
    vertices: Tuple[Point, ...] = ()

    found: ClassVar[bool] = True


@dataclass(frozen=True)
class NotFound:
    """No angle on this frame.

    Attributes:
        reason: Stage that gave up.
        message: Optional detail, e.g. the text of a caught exception.
    """

    reason: NotFoundReason
    message: str = ""

    found: ClassVar[bool] = False


AngleResult = Union[Found, NotFound]


@dataclass
class Detection:
    """Outcome of running the detector on one frame.

    Attributes:
        annotated: BGR image with overlays, or an unmodified copy of the
            input when nothing was found. Never aliases the input buffer.
        result: Found or NotFound.
    """

    annotated: np.ndarray
    result: AngleResult

    @property
    def found(self) -> bool:
        return self.result.found

    @property
    def angle(self) -> Optional[float]:
        return self.result.angle if isinstance(self.result, Found) else None
