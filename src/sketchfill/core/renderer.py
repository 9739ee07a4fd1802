"""Stroke rendering for hachure fills.

Fillers only decide *where* strokes go. A StrokeRenderer decides how each
stroke looks, turning an ideal segment into path operations. The default
SketchRenderer draws every segment twice with small random displacements
and a slight bow, which gives the hand-drawn look.

Randomness always comes from an injected RandomSource, never from the
module-level generator, so a seeded source reproduces output exactly.
"""

import random
from typing import Protocol

from sketchfill.config import FillConfig
from sketchfill.domain import Op, OpType

# Midpoint displacement scale used for bowing
BOWING_DIVISOR = 200.0


class RandomSource(Protocol):
    """Source of uniform samples in [0, 1).

    ``random.Random`` instances satisfy this protocol.
    """

    def random(self) -> float: ...


class StrokeRenderer(Protocol):
    """Turns ideal segments into drawing operations."""

    def double_line(
        self, x1: float, y1: float, x2: float, y2: float, config: FillConfig
    ) -> list[Op]:
        """Draw a sketchy line from (x1, y1) to (x2, y2)."""
        ...

    def offset(self, min_value: float, max_value: float, config: FillConfig) -> float:
        """Sample a jitter offset in [min_value, max_value) scaled by roughness."""
        ...


class SketchRenderer:
    """Renders segments as rough, hand-drawn double strokes.

    Each call to ``double_line`` emits two passes over the segment. Each pass
    is a ``move`` followed by one cubic ``bcurveTo``; the second pass uses
    half the endpoint displacement so the two strokes overlap loosely.

    Example:
        renderer = SketchRenderer(random.Random(42))
        ops = renderer.double_line(0, 0, 100, 0, FillConfig())
    """

    def __init__(self, random_source: RandomSource | None = None) -> None:
        """Initialize the renderer.

        Args:
            random_source: Source of jitter samples (a fresh unseeded
                ``random.Random`` if omitted)
        """
        self._random = random_source if random_source is not None else random.Random()

    def offset(self, min_value: float, max_value: float, config: FillConfig) -> float:
        """Sample a jitter offset scaled by the configured roughness.

        Returns:
            ``roughness * uniform(min_value, max_value)``; always 0.0 when
            roughness is 0
        """
        return config.roughness * (self._random.random() * (max_value - min_value) + min_value)

    def double_line(
        self, x1: float, y1: float, x2: float, y2: float, config: FillConfig
    ) -> list[Op]:
        """Draw a segment as two overlapping sketchy strokes.

        Args:
            x1: Start X
            y1: Start Y
            x2: End X
            y2: End Y
            config: Fill style parameters (roughness, bowing, offsets)

        Returns:
            Four operations: move, bcurveTo, move, bcurveTo
        """
        ops = self._line(x1, y1, x2, y2, config, overlay=False)
        ops.extend(self._line(x1, y1, x2, y2, config, overlay=True))
        return ops

    def _line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        config: FillConfig,
        overlay: bool,
    ) -> list[Op]:
        length_sq = (x1 - x2) ** 2 + (y1 - y2) ** 2
        max_offset = config.max_randomness_offset

        # Short lines get proportionally smaller wobble
        offset = max_offset
        if offset * offset * 100 > length_sq:
            offset = length_sq**0.5 / 10
        spread = offset / 2 if overlay else offset

        diverge_point = 0.2 + self._random.random() * 0.2
        mid_disp_x = config.bowing * max_offset * (y2 - y1) / BOWING_DIVISOR
        mid_disp_y = config.bowing * max_offset * (x1 - x2) / BOWING_DIVISOR
        mid_disp_x = self.offset(-mid_disp_x, mid_disp_x, config)
        mid_disp_y = self.offset(-mid_disp_y, mid_disp_y, config)

        move = Op(
            OpType.MOVE,
            (
                x1 + self.offset(-spread, spread, config),
                y1 + self.offset(-spread, spread, config),
            ),
        )
        curve = Op(
            OpType.BCURVE_TO,
            (
                mid_disp_x + x1 + (x2 - x1) * diverge_point + self.offset(-spread, spread, config),
                mid_disp_y + y1 + (y2 - y1) * diverge_point + self.offset(-spread, spread, config),
                mid_disp_x
                + x1
                + 2 * (x2 - x1) * diverge_point
                + self.offset(-spread, spread, config),
                mid_disp_y
                + y1
                + 2 * (y2 - y1) * diverge_point
                + self.offset(-spread, spread, config),
                x2 + self.offset(-spread, spread, config),
                y2 + self.offset(-spread, spread, config),
            ),
        )
        return [move, curve]


class StraightRenderer:
    """Renders segments as exact straight lines.

    Useful for plotters and for inspecting fill geometry without jitter.
    ``offset`` always returns 0.0, so ellipse radii are not perturbed.
    """

    def offset(self, min_value: float, max_value: float, config: FillConfig) -> float:
        return 0.0

    def double_line(
        self, x1: float, y1: float, x2: float, y2: float, config: FillConfig
    ) -> list[Op]:
        return [Op(OpType.MOVE, (x1, y1)), Op(OpType.LINE_TO, (x2, y2))]
