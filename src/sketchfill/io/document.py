"""Pydantic models for the JSON drawing document.

The models validate a decoded document in one pass: coordinates must be
finite numbers, shape entries are told apart by their ``type`` tag, and
unknown keys are rejected at every level.
"""

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    ValidationError,
    model_validator,
)

from sketchfill.config import FillConfig
from sketchfill.domain import Drawing, Ellipse, Point, Polygon, Shape, ShapeSpec

# Ints and floats only (no bools or numeric strings), never inf or NaN
Coordinate = Annotated[float, Field(strict=True, allow_inf_nan=False)]


def describe_error(error: dict[str, Any], skip: int = 0) -> str:
    """Format one pydantic error as ``location: message``.

    Args:
        error: Entry of ``ValidationError.errors()``
        skip: Number of leading location parts to drop
    """
    loc = ".".join(str(part) for part in error["loc"][skip:])
    return f"{loc}: {error['msg']}" if loc else error["msg"]


class FillOverrides(BaseModel):
    """Partial fill configuration given in a document.

    Only the fields that are present are applied on top of the base style.
    The combination must still form a valid FillConfig.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    hachure_angle: Coordinate | None = None
    hachure_gap: Coordinate | None = None
    fill_weight: Coordinate | None = None
    stroke_width: Coordinate | None = None
    roughness: Coordinate | None = None
    bowing: Coordinate | None = None
    max_randomness_offset: Coordinate | None = None
    seed: int | None = None

    @model_validator(mode="after")
    def _check_ranges(self) -> "FillOverrides":
        try:
            FillConfig(**self.to_overrides())
        except ValidationError as e:
            raise ValueError(describe_error(e.errors()[0])) from None
        return self

    def to_overrides(self) -> dict[str, Any]:
        """Return the fields given in the document."""
        return self.model_dump(exclude_unset=True)


class _ShapeEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    fill: FillOverrides = Field(default_factory=FillOverrides)
    connect_ends: StrictBool | None = None
    name: StrictStr | None = None

    def to_shape(self) -> Shape:
        raise NotImplementedError

    def to_spec(self) -> ShapeSpec:
        """Convert the entry into a domain ShapeSpec."""
        return ShapeSpec(
            shape=self.to_shape(),
            fill=self.fill.to_overrides(),
            connect_ends=self.connect_ends,
            name=self.name,
        )


class PolygonEntry(_ShapeEntry):
    """A polygon given as a list of ``[x, y]`` pairs."""

    type: Literal["polygon"]
    points: list[tuple[Coordinate, Coordinate]]

    def to_shape(self) -> Polygon:
        return Polygon(points=[Point(x, y) for x, y in self.points])


class EllipseEntry(_ShapeEntry):
    """An axis-aligned ellipse given by center and size."""

    type: Literal["ellipse"]
    cx: Coordinate
    cy: Coordinate
    width: Coordinate
    height: Coordinate

    def to_shape(self) -> Ellipse:
        return Ellipse(cx=self.cx, cy=self.cy, width=self.width, height=self.height)


ShapeEntry = Annotated[PolygonEntry | EllipseEntry, Field(discriminator="type")]


class DrawingDocument(BaseModel):
    """A whole drawing document."""

    model_config = ConfigDict(extra="forbid")

    width: Coordinate = 0.0
    height: Coordinate = 0.0
    fill: FillOverrides = Field(default_factory=FillOverrides)
    shapes: list[ShapeEntry] = Field(default_factory=list)

    def to_drawing(self) -> Drawing:
        """Convert the document into a domain Drawing.

        A canvas size that is missing or not positive is fitted to the shapes.
        """
        specs = [entry.to_spec() for entry in self.shapes]
        width, height = self.width, self.height
        if width <= 0 or height <= 0:
            right = max((spec.shape.bounding_box()[2] for spec in specs), default=0.0)
            bottom = max((spec.shape.bounding_box()[3] for spec in specs), default=0.0)
            width = width if width > 0 else max(right, 0.0)
            height = height if height > 0 else max(bottom, 0.0)
        return Drawing(width=width, height=height, shapes=specs, fill=self.fill.to_overrides())
