"""Sweep-line generation for hachure fills.

Produces the family of parallel candidate lines that the polygon filler
clips against the shape. Lines are generated lazily so that very large
shapes never materialize the whole family at once.
"""

import math
from collections.abc import Iterator

from sketchfill.core.geometry import HachureAngle

SweepLine = tuple[float, float, float, float]

# |sin| above this walks the sweep top to bottom
_NEAR_HORIZONTAL = 0.9999


def hachure_lines(
    top: float,
    bottom: float,
    left: float,
    right: float,
    gap: float,
    angle: HachureAngle,
) -> Iterator[SweepLine]:
    """Generate parallel sweep lines covering a bounding box.

    Works in a frame rotated to the hachure angle. The angle is measured from
    the vertical axis, so the lines run along ``d = (sin, cos)`` and are
    stepped along a unit normal ``n``. The box corners are projected onto
    both axes; the sweep starts on the box boundary and advances exactly
    ``gap`` per line until it passes the far side, and each line is long
    enough to span the box along ``d``.

    The normal is chosen so the sweep walks left to right, except for
    near-horizontal lines, which are walked top to bottom.

    No division by the angle's trig values takes place, so vertical and
    horizontal hachures need no special casing. A box or gap that is not
    finite yields nothing.

    Args:
        top: Smallest y of the box
        bottom: Largest y of the box
        left: Smallest x of the box
        right: Largest x of the box
        gap: Perpendicular distance between lines (must be > 0)
        angle: Normalized hachure angle with precomputed trig values

    Yields:
        Sweep lines as (x1, y1, x2, y2) tuples in sweep order
    """
    if not all(math.isfinite(v) for v in (top, bottom, left, right, gap)) or gap <= 0:
        return

    sin_a, cos_a = angle.sin, angle.cos
    if abs(sin_a) > _NEAR_HORIZONTAL or cos_a < 0:
        nx, ny = -cos_a, sin_a
    else:
        nx, ny = cos_a, -sin_a

    corners = ((left, top), (right, top), (right, bottom), (left, bottom))
    normal_offsets = [x * nx + y * ny for x, y in corners]
    along_offsets = [x * sin_a + y * cos_a for x, y in corners]

    n_min, n_max = min(normal_offsets), max(normal_offsets)
    d_min, d_max = min(along_offsets), max(along_offsets)
    # Huge coordinates can still overflow once projected
    if not all(math.isfinite(v) for v in (n_min, n_max, d_min, d_max, n_max - n_min)):
        return

    k = 0
    offset = n_min
    while offset < n_max:
        # Back to the original frame: p = offset * n + t * d
        base_x = offset * nx
        base_y = offset * ny
        yield (
            base_x + d_min * sin_a,
            base_y + d_min * cos_a,
            base_x + d_max * sin_a,
            base_y + d_max * cos_a,
        )
        k += 1
        offset = n_min + k * gap
