"""Drawing I/O layer for sketchfill.

This module handles reading drawing documents and writing filled output.
It provides a clean abstraction layer between file formats and the
domain models.

Key responsibilities:
- Load JSON drawing documents into domain models
- Validate shapes and fill overrides early, with precise errors
- Paint operation sets into SVG documents
- Output naming convention (drawing.json -> drawing-hachure.svg)

Key classes:
- DrawingReader: Load drawing documents
- SvgWriter: Save filled drawings as SVG
"""

from sketchfill.io.document import DrawingDocument, EllipseEntry, FillOverrides, PolygonEntry
from sketchfill.io.reader import DrawingReader, parse_drawing, parse_shape
from sketchfill.io.writer import SvgWriter, op_set_to_path_data

__all__ = [
    "DrawingDocument",
    "EllipseEntry",
    "FillOverrides",
    "PolygonEntry",
    "DrawingReader",
    "SvgWriter",
    "op_set_to_path_data",
    "parse_drawing",
    "parse_shape",
]
