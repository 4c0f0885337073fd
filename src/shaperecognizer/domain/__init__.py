"""Domain models for shaperecognizer.

This module contains the core domain models representing pixels, grids,
border points and classification results. All models are:

- Immutable (frozen dataclasses, read-only pixel buffers)
- Independent of the image decoding library

Key classes:
- Pixel: An RGBA color
- PixelGrid: A decoded image
- Point: An integer pixel coordinate
- BorderPoints: The four extreme foreground points
- ShapeResult: Base of Triangle, Circle, Square, Rectangle, Unrecognized
"""

from shaperecognizer.domain.grid import BLACK, WHITE, Pixel, PixelGrid
from shaperecognizer.domain.shape import (
    BorderPoints,
    Circle,
    Point,
    Rectangle,
    ShapeKind,
    ShapeResult,
    Square,
    Triangle,
    Unrecognized,
)

__all__: list[str] = [
    # Constants
    "BLACK",
    "WHITE",
    # Enums
    "ShapeKind",
    # Core types
    "Pixel",
    "PixelGrid",
    "Point",
    "BorderPoints",
    # Results
    "ShapeResult",
    "Triangle",
    "Circle",
    "Square",
    "Rectangle",
    "Unrecognized",
]
