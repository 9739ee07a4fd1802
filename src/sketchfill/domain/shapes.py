"""Core geometric types for shapes to be filled.

This module defines the shapes the hachure filler works on:
- Point: An immutable 2D point
- Polygon: An implicitly closed sequence of points
- Ellipse: An axis-aligned ellipse given by center and size
- ShapeSpec: A shape plus its per-shape fill options
- Drawing: A canvas holding an ordered list of shape specs
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ShapeKind(str, Enum):
    """Kind of fillable shape."""

    POLYGON = "polygon"
    ELLIPSE = "ellipse"


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


@dataclass
class Polygon:
    """A closed polygon.

    The last point connects back to the first. The polygon may be
    non-convex or self-intersecting; no validation is performed, and empty
    or single-point polygons are allowed (they simply fill to nothing).

    Attributes:
        points: Ordered list of vertices
    """

    points: list[Point]
    kind: ShapeKind = field(default=ShapeKind.POLYGON, init=False)

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate the axis-aligned bounding box.

        Returns:
            Tuple of (left, top, right, bottom), where top is the smallest y.
            All zeros for an empty polygon.
        """
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def is_empty(self) -> bool:
        """Check if the polygon has no points."""
        return len(self.points) == 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the polygon
        """
        return {
            "type": self.kind.value,
            "points": [p.to_dict() for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a polygon

        Returns:
            Polygon instance
        """
        return cls(points=[Point.from_dict(p) for p in data["points"]])


@dataclass
class Ellipse:
    """An axis-aligned ellipse.

    Attributes:
        cx: Center X coordinate
        cy: Center Y coordinate
        width: Full width (sign is ignored)
        height: Full height (sign is ignored)
    """

    cx: float
    cy: float
    width: float
    height: float
    kind: ShapeKind = field(default=ShapeKind.ELLIPSE, init=False)

    @property
    def rx(self) -> float:
        """Horizontal radius."""
        return abs(self.width / 2)

    @property
    def ry(self) -> float:
        """Vertical radius."""
        return abs(self.height / 2)

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate the axis-aligned bounding box as (left, top, right, bottom)."""
        return (
            self.cx - self.rx,
            self.cy - self.ry,
            self.cx + self.rx,
            self.cy + self.ry,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "type": self.kind.value,
            "cx": self.cx,
            "cy": self.cy,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Ellipse":
        """Deserialize from dictionary."""
        return cls(
            cx=data["cx"],
            cy=data["cy"],
            width=data["width"],
            height=data["height"],
        )


Shape = Polygon | Ellipse


def shape_from_dict(data: dict[str, Any]) -> Shape:
    """Deserialize a polygon or ellipse based on its ``type`` field.

    Args:
        data: Dictionary produced by ``Polygon.to_dict`` or ``Ellipse.to_dict``

    Returns:
        Polygon or Ellipse instance

    Raises:
        ValueError: If the type field is missing or unknown
    """
    kind = ShapeKind(data.get("type"))
    if kind == ShapeKind.POLYGON:
        return Polygon.from_dict(data)
    return Ellipse.from_dict(data)


@dataclass
class ShapeSpec:
    """A shape together with the options used to fill it.

    Attributes:
        shape: The polygon or ellipse to fill
        fill: Fill configuration overrides for this shape only
        connect_ends: Override for connect-ends mode (None = use settings)
        name: Optional label used in logs and output ids
    """

    shape: Shape
    fill: dict[str, Any] = field(default_factory=dict)
    connect_ends: bool | None = None
    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "shape": self.shape.to_dict(),
            "fill": dict(self.fill),
            "connect_ends": self.connect_ends,
            "name": self.name,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShapeSpec":
        """Deserialize from dictionary."""
        return cls(
            shape=shape_from_dict(data["shape"]),
            fill=dict(data.get("fill") or {}),
            connect_ends=data.get("connect_ends"),
            name=data.get("name"),
        )


@dataclass
class Drawing:
    """A drawing document: a canvas and the shapes to hachure.

    Attributes:
        width: Canvas width
        height: Canvas height
        shapes: Shapes in drawing order
        fill: Fill configuration overrides applied to every shape
    """

    width: float
    height: float
    shapes: list[ShapeSpec] = field(default_factory=list)
    fill: dict[str, Any] = field(default_factory=dict)

    @property
    def shape_count(self) -> int:
        """Number of shapes in the drawing."""
        return len(self.shapes)

    def is_empty(self) -> bool:
        """Check if the drawing holds no shapes."""
        return not self.shapes
