"""Angle computation from polygon vertices."""

import numpy as np

from ..core.utils import as_point, as_points, bearing
from .base import Found


def calculate_angle(vertices) -> Found:
    """Measure the angle at the topmost vertex.

    Vertices are sorted top to bottom (stable, so vertices on the same row
    keep their polygon order). The first is the apex and the last two are
    taken as the points the two rays run to. The result is the absolute
    difference of the two ray bearings, without wrapping into [0, 180].

    The last-two rule is only meaningful for a triangle. With five or more
    vertices the two lowest points need not be the ends of the sides that
    meet at the apex, and the angle can be meaningless. Angles from
    polygons with more than three vertices should be treated with care.

    Args:
        vertices: Sequence of at least three (x, y) points.

    Returns:
        Found with apex, ray points, angle in degrees and sorted vertices.

    Raises:
        ValueError: If fewer than three vertices are given.
    """
    points = as_points(vertices)
    if len(points) < 3:
        raise ValueError(f"Need at least 3 vertices, got {len(points)}")

    points = points[np.argsort(points[:, 1], kind="stable")]
    apex = as_point(points[0])
    ray1 = as_point(points[-2])
    ray2 = as_point(points[-1])

    angle = abs(bearing(apex, ray1) - bearing(apex, ray2))
    return Found(
        apex=apex,
        ray1=ray1,
        ray2=ray2,
        angle=angle,
        vertices=tuple(as_point(p) for p in points),
    )
