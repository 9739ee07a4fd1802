"""Utility functions for sketchfill.

This module provides utility functions including:

- Logging setup and configuration
- Progress and statistics tracking for drawing processing
"""

from sketchfill.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
