"""Domain models for sketchfill.

This module contains the domain models representing shapes, drawings and
the drawing operations produced by the fillers. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of any rendering backend

Key classes:
- Point: A 2D point
- Polygon: An implicitly closed polygon
- Ellipse: An axis-aligned ellipse
- ShapeSpec: A shape with per-shape fill options
- Drawing: A canvas with shapes to fill
- Op / OpSet: Drawing operations emitted by the fillers
"""

from sketchfill.domain.ops import Op, OpSet, OpSetKind, OpType
from sketchfill.domain.shapes import (
    Drawing,
    Ellipse,
    Point,
    Polygon,
    Shape,
    ShapeKind,
    ShapeSpec,
    shape_from_dict,
)

__all__: list[str] = [
    # Enums
    "OpSetKind",
    "OpType",
    "ShapeKind",
    # Core types
    "Point",
    "Polygon",
    "Ellipse",
    "Shape",
    "ShapeSpec",
    "Drawing",
    "Op",
    "OpSet",
    # Helpers
    "shape_from_dict",
]
