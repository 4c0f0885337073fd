"""Pixel and pixel grid types.

This module defines the raster side of the domain:
- Pixel: An RGBA color with 8-bit channels
- PixelGrid: An immutable row-major buffer of pixels decoded from an image
- WHITE / BLACK: The background and foreground reference colors
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from shaperecognizer.exceptions import ImageFormatError


@dataclass(frozen=True, slots=True)
class Pixel:
    """An RGBA pixel.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
        a: Alpha channel (0-255)
    """

    r: int
    g: int
    b: int
    a: int

    @classmethod
    def from_uint32(cls, color: int) -> "Pixel":
        """Unpack a 32-bit RGBA word stored little-endian (byte 0 is red).

        Args:
            color: Packed color value

        Returns:
            Pixel instance
        """
        return cls(
            r=color & 0xFF,
            g=(color >> 8) & 0xFF,
            b=(color >> 16) & 0xFF,
            a=(color >> 24) & 0xFF,
        )

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Convert to simple (r, g, b, a) tuple."""
        return (self.r, self.g, self.b, self.a)


WHITE = Pixel(255, 255, 255, 255)
BLACK = Pixel(0, 0, 0, 255)

_BLACK_RGBA = np.array(BLACK.to_tuple(), dtype=np.uint8)
_WHITE_RGBA = np.array(WHITE.to_tuple(), dtype=np.uint8)


class PixelGrid:
    """A read-only rectangular grid of RGBA pixels.

    The grid owns a private copy of its pixel buffer, shaped
    ``(height, width, 4)`` so that ``pixels[y, x]`` is the pixel at
    ``index = y * width + x`` in row-major order. The buffer is flagged
    non-writeable.

    A pixel is foreground only when it is exactly ``BLACK``; every other
    color, including ``WHITE``, is background.

    Example:
        grid = PixelGrid.from_rows(["#..", ".#.", "..#"])
        grid.is_foreground(1, 1)  # True
    """

    __slots__ = ("_pixels", "_mask")

    def __init__(self, pixels: NDArray[np.uint8]) -> None:
        """Initialize the grid from an RGBA array.

        Args:
            pixels: Array of shape (height, width, 4) and dtype uint8

        Raises:
            ImageFormatError: If the array is not an RGBA uint8 array
        """
        array = np.asarray(pixels)
        if array.ndim != 3 or array.shape[2] != 4:
            raise ImageFormatError(
                f"expected an array of shape (height, width, 4), got {array.shape}"
            )
        if array.dtype != np.uint8:
            raise ImageFormatError(f"expected dtype uint8, got {array.dtype}")

        self._pixels = np.array(array, dtype=np.uint8, copy=True, order="C")
        self._pixels.flags.writeable = False
        self._mask: NDArray[np.bool_] | None = None

    @classmethod
    def from_mask(cls, mask: Any) -> "PixelGrid":
        """Build a black-on-white grid from a boolean mask.

        Args:
            mask: 2D array-like, truthy where the pixel is foreground

        Returns:
            PixelGrid with BLACK where mask is set and WHITE elsewhere

        Raises:
            ImageFormatError: If the mask is not two-dimensional
        """
        mask_array = np.asarray(mask, dtype=bool)
        if mask_array.ndim != 2:
            raise ImageFormatError(f"expected a 2D mask, got shape {mask_array.shape}")

        pixels = np.empty((*mask_array.shape, 4), dtype=np.uint8)
        pixels[...] = _WHITE_RGBA
        pixels[mask_array] = _BLACK_RGBA
        return cls(pixels)

    @classmethod
    def from_rows(cls, rows: Iterable[str], foreground: str = "#") -> "PixelGrid":
        """Build a grid from text rows, one character per pixel.

        Args:
            rows: Rows of equal length, top row first
            foreground: Character marking a foreground pixel

        Returns:
            PixelGrid instance

        Raises:
            ImageFormatError: If the rows have different lengths
        """
        row_list = list(rows)
        widths = {len(row) for row in row_list}
        if len(widths) > 1:
            raise ImageFormatError(f"rows have different lengths: {sorted(widths)}")

        width = widths.pop() if widths else 0
        mask = np.zeros((len(row_list), width), dtype=bool)
        for y, row in enumerate(row_list):
            for x, char in enumerate(row):
                mask[y, x] = char == foreground
        return cls.from_mask(mask)

    @property
    def width(self) -> int:
        """Number of pixel columns."""
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        """Number of pixel rows."""
        return int(self._pixels.shape[0])

    @property
    def pixels(self) -> NDArray[np.uint8]:
        """Read-only view of the (height, width, 4) pixel buffer."""
        return self._pixels

    def is_empty(self) -> bool:
        """Check if the grid has zero area."""
        return self.width == 0 or self.height == 0

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if (x, y) addresses a pixel of the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Return the pixel at (x, y).

        Raises:
            IndexError: If (x, y) is outside the grid
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} grid")
        word = self._pixels[y, x].view("<u4")[0]
        return Pixel.from_uint32(int(word))

    def foreground_mask(self) -> NDArray[np.bool_]:
        """Boolean (height, width) array, True on foreground pixels."""
        if self._mask is None:
            mask = np.all(self._pixels == _BLACK_RGBA, axis=-1)
            mask.flags.writeable = False
            self._mask = mask
        return self._mask

    def is_foreground(self, x: int, y: int) -> bool:
        """Check if the pixel at (x, y) is foreground.

        Coordinates outside the grid are background.
        """
        if not self.in_bounds(x, y):
            return False
        return bool(self.foreground_mask()[y, x])

    def is_edge_pixel(self, x: int, y: int) -> bool:
        """Check if (x, y) is a foreground pixel on the silhouette border.

        A border pixel has at least one 4-neighbour that is background or
        lies outside the grid.
        """
        if not self.is_foreground(x, y):
            return False
        return any(
            not self.is_foreground(x + dx, y + dy)
            for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1))
        )

    def foreground_count(self) -> int:
        """Count foreground pixels."""
        return int(np.count_nonzero(self.foreground_mask()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return np.array_equal(self._pixels, other._pixels)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PixelGrid(width={self.width}, height={self.height})"
