"""Hachure fill generation for polygons and ellipses.

The polygon path sweeps parallel lines across the shape's bounding box,
clips each line against the polygon edges and pairs up the crossings into
interior segments. The ellipse path avoids curve intersection entirely: it
fills chords of a circle and maps them into ellipse space with a single
affine transform derived from the aspect ratio and the hachure angle.

Both paths hand every interior segment to a StrokeRenderer and collect the
resulting operations into a ``fillSketch`` OpSet. Fillers hold no state
between calls beyond the renderer they were built with.
"""

import math
from collections.abc import Sequence

from sketchfill.config import FillConfig
from sketchfill.core.geometry import bounding_box, hachure_angle, segment_intersection
from sketchfill.core.hachure import SweepLine, hachure_lines
from sketchfill.core.renderer import StrokeRenderer
from sketchfill.domain import Ellipse, OpSet, OpSetKind, Point, Polygon, Shape

# Radius jitter band applied to ellipses, as a fraction of each radius
ELLIPSE_JITTER = 0.05


def polygon_intersections(line: SweepLine, points: Sequence[Point]) -> list[Point]:
    """Intersect a sweep line with every edge of a closed polygon.

    Edges are visited in order (edge i runs from point i to point i+1,
    wrapping around), and crossings are returned in that visiting order,
    not sorted along the line. For convex polygons the two orders agree.
    For non-convex or self-intersecting polygons they may not, and the
    even/odd pairing downstream can then join the wrong crossings. This
    is a known limitation of the fill rule.

    Args:
        line: Sweep line as (x1, y1, x2, y2)
        points: Polygon vertices

    Returns:
        Crossing points in edge-visiting order
    """
    start = Point(line[0], line[1])
    end = Point(line[2], line[3])

    intersections: list[Point] = []
    n = len(points)
    for i in range(n):
        hit = segment_intersection(start, end, points[i], points[(i + 1) % n])
        if hit is not None:
            intersections.append(hit.to_point())

    return intersections


def ellipse_affine(
    x: float,
    y: float,
    cx: float,
    cy: float,
    sin_angle_prime: float,
    cos_angle_prime: float,
    aspect_ratio: float,
) -> Point:
    """Map a point from circle space into ellipse space.

    The map rotates about the center by the pre-affine angle and then
    squashes the y axis by the aspect ratio, so chords of a circle of
    radius rx become hachure lines of the ellipse at the requested angle.

    Args:
        x: X coordinate in circle space
        y: Y coordinate in circle space
        cx: Ellipse center X
        cy: Ellipse center Y
        sin_angle_prime: Sine of the hachure angle in circle space
        cos_angle_prime: Cosine of the hachure angle in circle space
        aspect_ratio: ry / rx

    Returns:
        The transformed point
    """
    a = -cx * cos_angle_prime - cy * sin_angle_prime + cx
    b = aspect_ratio * (cx * sin_angle_prime - cy * cos_angle_prime) + cy
    c = cos_angle_prime
    d = sin_angle_prime
    e = -aspect_ratio * sin_angle_prime
    f = aspect_ratio * cos_angle_prime
    return Point(a + c * x + d * y, b + e * x + f * y)


class HachureFiller:
    """Fills polygons and ellipses with sketchy hachure lines.

    Example:
        filler = HachureFiller(SketchRenderer(random.Random(7)))
        op_set = filler.fill_polygon(points, FillConfig(hachure_gap=5))
    """

    def __init__(self, renderer: StrokeRenderer) -> None:
        """Initialize the filler.

        Args:
            renderer: Stroke renderer that draws each interior segment
        """
        self.renderer = renderer

    def fill(self, shape: Shape, config: FillConfig, connect_ends: bool = False) -> OpSet:
        """Fill any supported shape.

        Args:
            shape: Polygon or ellipse to fill
            config: Fill style parameters
            connect_ends: Join consecutive rows with connecting strokes

        Returns:
            OpSet tagged ``fillSketch``
        """
        if isinstance(shape, Ellipse):
            return self.fill_ellipse(
                shape.cx, shape.cy, shape.width, shape.height, config, connect_ends
            )
        return self.fill_polygon(shape.points, config, connect_ends)

    def fill_polygon(
        self,
        points: Sequence[Point] | Polygon,
        config: FillConfig,
        connect_ends: bool = False,
    ) -> OpSet:
        """Fill a closed polygon with hachure lines.

        Crossings along each sweep line are paired up as (0, 1), (2, 3), ...
        and each pair is stroked as one interior segment. With an odd number
        of crossings the last one is dropped.

        Args:
            points: Polygon vertices, or a Polygon
            config: Fill style parameters
            connect_ends: Also stroke from each segment's exit point to the
                next segment's entry point

        Returns:
            OpSet tagged ``fillSketch``; empty for an empty polygon or one
            with a vertex that is not finite
        """
        if isinstance(points, Polygon):
            points = points.points

        op_set = OpSet(kind=OpSetKind.FILL_SKETCH)
        box = bounding_box(points)
        if box is None or not all(math.isfinite(p.x) and math.isfinite(p.y) for p in points):
            return op_set

        left, top, right, bottom = box
        angle = hachure_angle(config.hachure_angle)
        gap = config.effective_gap()

        prev_point: Point | None = None
        for line in hachure_lines(top - 1, bottom + 1, left - 1, right + 1, gap, angle):
            crossings = polygon_intersections(line, points)
            for i in range(0, len(crossings) - 1, 2):
                p1 = crossings[i]
                p2 = crossings[i + 1]
                op_set.extend(self.renderer.double_line(p1.x, p1.y, p2.x, p2.y, config))
                if connect_ends and prev_point is not None:
                    op_set.extend(
                        self.renderer.double_line(prev_point.x, prev_point.y, p1.x, p1.y, config)
                    )
                prev_point = p2

        return op_set

    def fill_ellipse(
        self,
        cx: float,
        cy: float,
        width: float,
        height: float,
        config: FillConfig,
        connect_ends: bool = False,
    ) -> OpSet:
        """Fill an axis-aligned ellipse with hachure lines.

        The radii are jittered by up to 5% through the renderer's offset hook.
        Chords are walked across a circle of radius rx and mapped into
        ellipse space with ``ellipse_affine``; the gap is rescaled so the
        spacing after the transform matches the requested gap. The fill
        weight is resolved by the writer when the strokes are painted.

        Args:
            cx: Center X
            cy: Center Y
            width: Full width
            height: Full height
            config: Fill style parameters
            connect_ends: Join consecutive chords with connecting strokes

        Returns:
            OpSet tagged ``fillSketch``; empty when either radius is zero or
            the ellipse is not finite
        """
        op_set = OpSet(kind=OpSetKind.FILL_SKETCH)

        rx = abs(width / 2)
        ry = abs(height / 2)
        rx += self.renderer.offset(-rx * ELLIPSE_JITTER, rx * ELLIPSE_JITTER, config)
        ry += self.renderer.offset(-ry * ELLIPSE_JITTER, ry * ELLIPSE_JITTER, config)
        if not all(math.isfinite(v) for v in (cx, cy, rx, ry)) or rx <= 0 or ry <= 0:
            return op_set

        gap = config.effective_gap()

        tan_angle = hachure_angle(config.hachure_angle).tan
        aspect_ratio = ry / rx
        hyp = math.sqrt(aspect_ratio * tan_angle * aspect_ratio * tan_angle + 1)
        sin_angle_prime = aspect_ratio * tan_angle / hyp
        cos_angle_prime = 1 / hyp
        gap_prime = gap / (
            (
                rx
                * ry
                / math.sqrt(
                    (ry * cos_angle_prime) * (ry * cos_angle_prime)
                    + (rx * sin_angle_prime) * (rx * sin_angle_prime)
                )
            )
            / rx
        )

        prev_point: Point | None = None
        x_pos = cx - rx + gap_prime
        while x_pos < cx + rx:
            half_len = math.sqrt(max(rx * rx - (cx - x_pos) * (cx - x_pos), 0.0))
            p1 = ellipse_affine(
                x_pos, cy - half_len, cx, cy, sin_angle_prime, cos_angle_prime, aspect_ratio
            )
            p2 = ellipse_affine(
                x_pos, cy + half_len, cx, cy, sin_angle_prime, cos_angle_prime, aspect_ratio
            )
            op_set.extend(self.renderer.double_line(p1.x, p1.y, p2.x, p2.y, config))
            if connect_ends and prev_point is not None:
                op_set.extend(
                    self.renderer.double_line(
                        prev_point.x, prev_point.y, p1.x, p1.y, config
                    )
                )
            prev_point = p2
            x_pos += gap_prime

        return op_set
