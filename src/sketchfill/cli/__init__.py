"""Command-line interface for sketchfill.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bar while shapes are filled
- Verbose/quiet output modes
- Reproducible output with --seed
- Detailed error reporting
"""

from sketchfill.cli.app import cli, main

__all__ = ["cli", "main"]
