"""Image I/O layer for shaperecognizer.

This module handles decoding image files using Pillow. It provides a clean
abstraction layer between Pillow and the domain models.

Key classes:
- ImageReader: Load an image file into a PixelGrid
"""

from shaperecognizer.io.reader import ImageReader, image_to_grid

__all__ = [
    "ImageReader",
    "image_to_grid",
]
