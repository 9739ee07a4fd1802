"""Configuration settings for Sketchfill."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# Hard floor for the spacing between hachure lines
MIN_HACHURE_GAP = 0.1


class RendererKind(str, Enum):
    """Stroke renderer used to draw fill lines."""

    SKETCH = "sketch"
    STRAIGHT = "straight"


class FillConfig(BaseModel):
    """Style parameters for a single hachure fill.

    Immutable for the duration of a fill call. Negative or zero values for
    gap and fill weight request stroke-width-derived defaults; use
    ``effective_gap`` and ``effective_fill_weight`` to resolve them.
    """

    model_config = ConfigDict(frozen=True)

    hachure_angle: float = Field(
        default=-41.0,
        allow_inf_nan=False,
        description="Angle of the hachure lines in degrees, measured from the vertical axis",
    )
    hachure_gap: float = Field(
        default=-1.0,
        allow_inf_nan=False,
        description="Distance between hachure lines (<= 0 uses stroke_width * 4)",
    )
    fill_weight: float = Field(
        default=-1.0,
        allow_inf_nan=False,
        description="Thickness of the fill strokes (< 0 uses stroke_width / 2)",
    )
    stroke_width: float = Field(
        default=1.0,
        allow_inf_nan=False,
        gt=0.0,
        description="Width of the shape outline stroke",
    )
    roughness: float = Field(
        default=1.0,
        allow_inf_nan=False,
        ge=0.0,
        le=10.0,
        description="How far the hand-drawn strokes wander from the ideal line",
    )
    bowing: float = Field(
        default=1.0,
        allow_inf_nan=False,
        ge=0.0,
        le=10.0,
        description="How much each stroke bows away from a straight line",
    )
    max_randomness_offset: float = Field(
        default=2.0,
        allow_inf_nan=False,
        ge=0.0,
        description="Maximum endpoint displacement for a single stroke",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the stroke jitter (None = nondeterministic)",
    )

    def effective_gap(self) -> float:
        """Resolve the hachure gap, applying the default and the hard floor.

        Returns:
            Gap strictly greater than zero (at least 0.1)
        """
        gap = self.hachure_gap
        if gap <= 0:
            gap = self.stroke_width * 4
        return max(gap, MIN_HACHURE_GAP)

    def effective_fill_weight(self) -> float:
        """Resolve the fill weight, defaulting from the stroke width."""
        if self.fill_weight < 0:
            return self.stroke_width / 2
        return self.fill_weight


class ProcessingConfig(BaseModel):
    """Configuration for drawing processing."""

    max_workers: int | None = Field(
        default=None,
        description="Worker processes for filling shapes (None or 1 = serial)",
    )
    connect_ends: bool = Field(
        default=False,
        description="Join consecutive fill rows with connecting strokes",
    )
    renderer: RendererKind = Field(
        default=RendererKind.SKETCH,
        description="Stroke renderer (sketch = hand-drawn, straight = exact lines)",
    )


class OutputConfig(BaseModel):
    """Configuration for SVG output."""

    stroke_color: str = Field(
        default="#000000",
        description="Stroke color of fill lines",
    )
    precision: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Decimal places for coordinates in path data",
    )
    draw_outline: bool = Field(
        default=False,
        description="Also draw the plain shape outline under the fill",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SketchfillSettings(BaseModel):
    """Main application settings."""

    fill: FillConfig = Field(default_factory=FillConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SketchfillSettings:
    """Get default application settings."""
    return SketchfillSettings()
