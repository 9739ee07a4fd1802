"""Core fill algorithms for sketchfill.

This module contains the core algorithms for:

- Geometry operations (segment intersection, angle normalization, bounds)
- Sweep-line generation across a bounding box
- Hachure filling of polygons and ellipses
- Stroke rendering of individual fill lines
- Drawing processing (per-shape configuration, optional parallelism)

All fill services are designed to be:
- Stateless between calls (safe for use in worker processes)
- Deterministic given a seeded random source

Key functions:
- segment_intersection: Find where two line segments cross
- hachure_angle: Normalize a hachure angle and compute its trig values
- hachure_lines: Lazily generate sweep lines covering a box
- polygon_intersections: Clip a sweep line against a polygon
- ellipse_affine: Map circle-space points into ellipse space

Key classes:
- HachureFiller: Fills polygons and ellipses
- SketchRenderer: Draws hand-drawn double strokes
- StraightRenderer: Draws exact straight strokes
- DrawingProcessor: Fills every shape of a drawing
"""

from sketchfill.core.filler import HachureFiller, ellipse_affine, polygon_intersections
from sketchfill.core.geometry import (
    HachureAngle,
    SegmentIntersection,
    bounding_box,
    hachure_angle,
    segment_intersection,
)
from sketchfill.core.hachure import SweepLine, hachure_lines
from sketchfill.core.processor import (
    DrawingProcessor,
    FilledShape,
    ProcessingResult,
    fill_shape,
    resolve_fill_config,
)
from sketchfill.core.renderer import (
    RandomSource,
    SketchRenderer,
    StraightRenderer,
    StrokeRenderer,
)

__all__ = [
    # Processor classes
    "DrawingProcessor",
    "FilledShape",
    # Geometry types
    "HachureAngle",
    # Filler classes
    "HachureFiller",
    "ProcessingResult",
    # Renderer classes
    "RandomSource",
    "SegmentIntersection",
    "SketchRenderer",
    "StraightRenderer",
    "StrokeRenderer",
    "SweepLine",
    # Functions
    "bounding_box",
    "ellipse_affine",
    "fill_shape",
    "hachure_angle",
    "hachure_lines",
    "polygon_intersections",
    "resolve_fill_config",
    "segment_intersection",
]
