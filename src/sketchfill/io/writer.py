"""SVG writer for hachure fill output.

This module provides the SvgWriter class, which paints the operation sets
produced by the fillers into a standalone SVG document.
"""

from collections.abc import Sequence
from pathlib import Path
from xml.sax.saxutils import quoteattr

from sketchfill.config import FillConfig, OutputConfig
from sketchfill.domain import Drawing, Ellipse, OpSet, OpType, Polygon, Shape
from sketchfill.exceptions import OutputSaveError

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# SVG path commands for each operation type
PATH_COMMANDS = {
    OpType.MOVE: "M",
    OpType.BCURVE_TO: "C",
    OpType.LINE_TO: "L",
}


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def op_set_to_path_data(op_set: OpSet, precision: int = 2) -> str:
    """Convert an operation set into SVG path data.

    Args:
        op_set: Operations to convert
        precision: Decimal places for coordinates

    Returns:
        Path data string, e.g. "M0 0 C1 1 2 2 3 3"
    """
    parts = []
    for op in op_set.ops:
        coords = " ".join(_fmt(v, precision) for v in op.data)
        parts.append(f"{PATH_COMMANDS[op.op]}{coords}")
    return " ".join(parts)


def shape_outline(shape: Shape, precision: int = 2) -> str | None:
    """Build a plain SVG element tracing the shape outline.

    Returns:
        SVG element string, or None for an empty polygon
    """
    if isinstance(shape, Ellipse):
        return (
            f'<ellipse cx="{_fmt(shape.cx, precision)}" cy="{_fmt(shape.cy, precision)}" '
            f'rx="{_fmt(shape.rx, precision)}" ry="{_fmt(shape.ry, precision)}"/>'
        )
    if isinstance(shape, Polygon) and shape.points:
        points = " ".join(
            f"{_fmt(p.x, precision)},{_fmt(p.y, precision)}" for p in shape.points
        )
        return f'<polygon points="{points}"/>'
    return None


class SvgWriter:
    """Writes filled drawings as SVG documents.

    Every operation set becomes one unfilled ``<path>`` whose stroke width is
    the resolved fill weight of its shape.

    Example:
        writer = SvgWriter(Path("drawing-hachure.svg"))
        writer.write(drawing, op_sets, configs)
    """

    def __init__(self, output_path: Path, config: OutputConfig | None = None) -> None:
        """Initialize the SVG writer.

        Args:
            output_path: Path where the SVG will be saved
            config: Output settings (defaults if omitted)
        """
        self._output_path = output_path
        self._config = config or OutputConfig()

    def render(
        self,
        drawing: Drawing,
        op_sets: Sequence[OpSet],
        fill_configs: Sequence[FillConfig],
    ) -> str:
        """Render the filled drawing to an SVG string.

        Args:
            drawing: Drawing that was filled
            op_sets: Fill operations, one per drawing shape
            fill_configs: Resolved fill configuration, one per drawing shape

        Returns:
            SVG document text
        """
        precision = self._config.precision
        color = quoteattr(self._config.stroke_color)
        width = _fmt(drawing.width, precision)
        height = _fmt(drawing.height, precision)

        lines = [
            f'<svg xmlns="{SVG_NAMESPACE}" width="{width}" height="{height}" '
            f'viewBox="0 0 {width} {height}">'
        ]

        if self._config.draw_outline:
            lines.append(f'  <g class="outlines" fill="none" stroke={color}>')
            for spec in drawing.shapes:
                outline = shape_outline(spec.shape, precision)
                if outline is not None:
                    lines.append(f"    {outline}")
            lines.append("  </g>")

        lines.append(f'  <g class="fills" fill="none" stroke={color}>')
        for spec, op_set, fill in zip(drawing.shapes, op_sets, fill_configs, strict=True):
            if op_set.is_empty():
                continue
            stroke_width = _fmt(fill.effective_fill_weight(), precision)
            attrs = f'class="{op_set.kind.value}" stroke-width="{stroke_width}"'
            if spec.name:
                attrs = f"id={quoteattr(spec.name)} " + attrs
            lines.append(f'    <path {attrs} d="{op_set_to_path_data(op_set, precision)}"/>')
        lines.append("  </g>")
        lines.append("</svg>")

        return "\n".join(lines) + "\n"

    def write(
        self,
        drawing: Drawing,
        op_sets: Sequence[OpSet],
        fill_configs: Sequence[FillConfig],
    ) -> None:
        """Render the filled drawing and save it to the output path.

        Raises:
            OutputSaveError: If the file cannot be written
        """
        svg = self.render(drawing, op_sets, fill_configs)
        try:
            self._output_path.write_text(svg, encoding="utf-8")
        except OSError as e:
            raise OutputSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Generate the default output path for a drawing document.

        Converts: drawing.json -> drawing-hachure.svg

        Args:
            input_path: Drawing document path

        Returns:
            Path with -hachure suffix and .svg extension
        """
        return input_path.parent / f"{input_path.stem}-hachure.svg"
