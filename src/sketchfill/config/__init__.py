"""Configuration management for sketchfill.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, drawing documents or defaults.

Key classes:
- FillConfig: Hachure style parameters (angle, gap, weights, roughness)
- ProcessingConfig: Drawing processing settings
- OutputConfig: SVG output settings
- LoggingConfig: Logging settings
- SketchfillSettings: Main application settings
"""

from sketchfill.config.settings import (
    MIN_HACHURE_GAP,
    FillConfig,
    LoggingConfig,
    OutputConfig,
    ProcessingConfig,
    RendererKind,
    SketchfillSettings,
    get_default_settings,
)

__all__ = [
    "MIN_HACHURE_GAP",
    "FillConfig",
    "LoggingConfig",
    "OutputConfig",
    "ProcessingConfig",
    "RendererKind",
    "SketchfillSettings",
    "get_default_settings",
]
