"""Operator overlay drawing."""

import cv2
import numpy as np

from ..config import RenderConfig
from ..core.utils import as_points


def render_result(
    image: np.ndarray,
    contour: np.ndarray,
    vertices,
    angle: float,
    style: RenderConfig,
) -> np.ndarray:
    """Draw the contour, the vertices and the angle label on a copy of `image`.

    Args:
        image: BGR frame. Not modified.
        contour: (N, 2) contour the polygon was derived from.
        vertices: Polygon vertices to mark.
        angle: Measured angle in degrees.
        style: Colours and sizes of the overlay.

    Returns:
        New BGR image with the overlay.
    """
    result = image.copy()

    cv2.drawContours(
        result,
        [as_points(contour).reshape(-1, 1, 2)],
        -1,
        style.contour_color,
        style.contour_thickness,
    )
    for x, y in as_points(vertices):
        cv2.circle(result, (int(x), int(y)), style.vertex_radius, style.vertex_color, -1)

    cv2.putText(
        result,
        style.label_format.format(angle=angle),
        style.label_origin,
        cv2.FONT_HERSHEY_SIMPLEX,
        style.label_scale,
        style.label_color,
        style.label_thickness,
    )
    return result
