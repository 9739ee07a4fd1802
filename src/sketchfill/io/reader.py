"""Drawing reader for loading JSON drawing documents.

This module provides the DrawingReader class for loading drawing documents
and converting them into domain models. Validation is done by the pydantic
models in ``sketchfill.io.document``.

Document layout:

    {
        "width": 200, "height": 120,
        "fill": {"hachure_gap": 6},
        "shapes": [
            {"type": "polygon", "points": [[10, 10], [90, 10], [50, 80]]},
            {"type": "ellipse", "cx": 150, "cy": 60, "width": 80, "height": 50,
             "fill": {"hachure_angle": 60}, "connect_ends": true}
        ]
    }
"""

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from sketchfill.domain import Drawing, ShapeSpec
from sketchfill.exceptions import DrawingFormatError, DrawingLoadError, ShapeFormatError
from sketchfill.io.document import DrawingDocument, ShapeEntry, describe_error

_shape_entry_adapter: TypeAdapter[Any] = TypeAdapter(ShapeEntry)


def parse_shape(data: Any, index: int) -> ShapeSpec:
    """Convert one shape entry of a drawing document into a ShapeSpec.

    Args:
        data: Raw shape entry
        index: Position of the entry in the document

    Returns:
        ShapeSpec for the entry

    Raises:
        ShapeFormatError: If the entry cannot be interpreted
    """
    try:
        entry = _shape_entry_adapter.validate_python(data)
    except ValidationError as e:
        raise ShapeFormatError(index, describe_error(e.errors()[0])) from e
    return entry.to_spec()


def parse_drawing(data: Any, source: str = "<memory>") -> Drawing:
    """Convert a decoded drawing document into a Drawing.

    Args:
        data: Decoded JSON document
        source: Name of the document, used in error messages

    Returns:
        Drawing instance

    Raises:
        DrawingFormatError: If the document structure is invalid
    """
    try:
        document = DrawingDocument.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        loc = error["loc"]
        if len(loc) >= 2 and loc[0] == "shapes" and isinstance(loc[1], int):
            details = str(ShapeFormatError(loc[1], describe_error(error, skip=2)))
        else:
            details = describe_error(error)
        raise DrawingFormatError(source, details) from e

    return document.to_drawing()


class DrawingReader:
    """Reads drawing documents from JSON files.

    Example:
        reader = DrawingReader(Path("drawing.json"))
        drawing = reader.load()
        for spec in drawing.shapes:
            print(spec.shape.kind)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the drawing reader.

        Args:
            path: Path to the drawing document
        """
        self.path = path
        self._drawing: Drawing | None = None

    def load(self) -> Drawing:
        """Load and parse the drawing document.

        Returns:
            The parsed Drawing

        Raises:
            DrawingLoadError: If the file cannot be read or is not valid JSON
            DrawingFormatError: If the document structure is invalid
        """
        if not self.path.exists():
            raise DrawingLoadError(str(self.path), "file not found")

        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise DrawingLoadError(str(self.path), str(e)) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DrawingLoadError(str(self.path), f"invalid JSON: {e}") from e

        self._drawing = parse_drawing(data, str(self.path))
        return self._drawing

    @property
    def drawing(self) -> Drawing:
        """The loaded drawing.

        Raises:
            RuntimeError: If load() has not been called
        """
        if self._drawing is None:
            raise RuntimeError("Drawing not loaded. Call load() first.")
        return self._drawing

    @property
    def shape_count(self) -> int:
        """Number of shapes in the loaded drawing."""
        return self.drawing.shape_count
