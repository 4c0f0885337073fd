"""Image reader for loading raster files.

This module provides the ImageReader class for decoding image files
into PixelGrid domain models.
"""

from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from shaperecognizer.domain import PixelGrid
from shaperecognizer.exceptions import ImageLoadError


def image_to_grid(image: Image.Image) -> PixelGrid:
    """Convert a Pillow image to a PixelGrid.

    Every mode is converted to RGBA first, so palette and grayscale images
    map black to (0, 0, 0, 255) like true-color ones.

    Args:
        image: Decoded Pillow image

    Returns:
        PixelGrid holding a private copy of the pixels
    """
    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    return PixelGrid(np.asarray(rgba, dtype=np.uint8))


class ImageReader:
    """Loads an image file into a PixelGrid.

    Example:
        reader = ImageReader(Path("shape.png"))
        grid = reader.load()
        print(grid.width, grid.height)
    """

    def __init__(self, image_path: Path) -> None:
        """Initialize the image reader.

        Args:
            image_path: Path to the image file
        """
        self._image_path = image_path
        self._grid: PixelGrid | None = None

    @property
    def path(self) -> Path:
        """Path of the image file."""
        return self._image_path

    def load(self) -> PixelGrid:
        """Decode the image file.

        Returns:
            Decoded PixelGrid

        Raises:
            ImageLoadError: If the file is missing or cannot be decoded
        """
        if not self._image_path.exists():
            raise ImageLoadError(str(self._image_path), "file not found")
        if not self._image_path.is_file():
            raise ImageLoadError(str(self._image_path), "not a file")

        try:
            with Image.open(self._image_path) as image:
                self._grid = image_to_grid(image)
        except (UnidentifiedImageError, OSError) as e:
            raise ImageLoadError(str(self._image_path), str(e)) from e

        return self._grid

    @property
    def grid(self) -> PixelGrid:
        """Return the decoded grid.

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        if self._grid is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._grid

    @property
    def width(self) -> int:
        """Return image width in pixels."""
        return self.grid.width

    @property
    def height(self) -> int:
        """Return image height in pixels."""
        return self.grid.height
