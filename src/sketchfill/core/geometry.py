"""Geometric operations shared by the hachure fillers.

This module provides the core mathematical utilities for:
- Line segment intersection with parametric positions
- Hachure angle normalization and trigonometry
- Bounding box calculation for point lists

All functions are pure, stateless, and designed for use in parallel processing.
"""

import math
from collections.abc import Sequence
from typing import NamedTuple

from sketchfill.domain import Point


class SegmentIntersection(NamedTuple):
    """Result of a successful segment intersection test.

    Attributes:
        x: X coordinate of the crossing
        y: Y coordinate of the crossing
        ua: Parametric position along the first segment (0..1)
        ub: Parametric position along the second segment (0..1)
    """

    x: float
    y: float
    ua: float
    ub: float

    def to_point(self) -> Point:
        """Return the crossing as a Point."""
        return Point(self.x, self.y)


class HachureAngle(NamedTuple):
    """A hachure angle normalized into [0, 180) with its trig values.

    Attributes:
        degrees: Normalized angle in degrees
        sin: Sine of the angle
        cos: Cosine of the angle
        tan: Tangent of the angle
    """

    degrees: float
    sin: float
    cos: float
    tan: float


def segment_intersection(
    p1: Point, p2: Point, p3: Point, p4: Point
) -> SegmentIntersection | None:
    """Find where segment p1-p2 crosses segment p3-p4.

    Solves the 2x2 linear system of the two parametric line equations. The
    crossing counts only when both parametric positions lie in the closed
    interval [0, 1], so touching an endpoint is a crossing.

    Args:
        p1: First endpoint of segment A
        p2: Second endpoint of segment A
        p3: First endpoint of segment B
        p4: Second endpoint of segment B

    Returns:
        SegmentIntersection if the segments cross, None if they are parallel,
        collinear or cross outside either segment

    Examples:
        >>> hit = segment_intersection(
        ...     Point(0.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0), Point(2.0, 0.0)
        ... )
        >>> (hit.x, hit.y, hit.ua, hit.ub)
        (1.0, 1.0, 0.5, 0.5)
    """
    x1, y1 = p1.x, p1.y
    x2, y2 = p2.x, p2.y
    x3, y3 = p3.x, p3.y
    x4, y4 = p4.x, p4.y

    denom = (y2 - y1) * (x4 - x3) - (x2 - x1) * (y4 - y3)

    # Parallel or collinear; no single crossing
    if denom == 0:
        return None

    ua = ((y4 - y3) * (x1 - x3) - (x4 - x3) * (y1 - y3)) / denom
    ub = ((y2 - y1) * (x1 - x3) - (x2 - x1) * (y1 - y3)) / denom

    if 0 <= ua <= 1 and 0 <= ub <= 1:
        return SegmentIntersection(
            x=x1 + ua * (x2 - x1),
            y=y1 + ua * (y2 - y1),
            ua=ua,
            ub=ub,
        )

    return None


def hachure_angle(degrees: float) -> HachureAngle:
    """Normalize a hachure angle into [0, 180) and compute its trig values.

    An angle and its 180 degree rotation describe the same family of lines,
    so the fill for ``a`` and ``a + 180`` is identical. Values are computed
    fresh on every call.

    Args:
        degrees: Hachure angle in degrees (any real value)

    Returns:
        HachureAngle with the normalized angle and its sin, cos and tan
    """
    normalized = degrees % 180
    radians = math.radians(normalized)
    return HachureAngle(
        degrees=normalized,
        sin=math.sin(radians),
        cos=math.cos(radians),
        tan=math.tan(radians),
    )


def bounding_box(points: Sequence[Point]) -> tuple[float, float, float, float] | None:
    """Calculate the axis-aligned bounding box of a point list.

    Args:
        points: Points to enclose

    Returns:
        Tuple of (left, top, right, bottom), or None for an empty list
    """
    if not points:
        return None

    left = right = points[0].x
    top = bottom = points[0].y
    for p in points[1:]:
        left = min(left, p.x)
        right = max(right, p.x)
        top = min(top, p.y)
        bottom = max(bottom, p.y)

    return (left, top, right, bottom)
