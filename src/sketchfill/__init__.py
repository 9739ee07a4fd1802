"""Sketchfill - Hand-drawn hachure fills for polygons and ellipses.

Sketchfill generates sets of parallel line strokes clipped to the interior of
closed polygons and ellipses, giving shapes the look of a pen-and-ink
cross-hatch fill. Each stroke is rendered as a slightly wobbly double line.

Example:
    $ sketchfill drawing.json

This will create drawing-hachure.svg with every shape in the drawing filled.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
