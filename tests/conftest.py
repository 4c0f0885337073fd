"""Shared fixtures: synthetic black-on-white shapes."""

from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from shaperecognizer.domain import PixelGrid


def disk_mask(radius: int, margin: int = 2, ring: bool = False) -> np.ndarray:
    """Mask of a disk (or a one-pixel ring) of the given radius."""
    size = 2 * (radius + margin) + 1
    center = radius + margin
    ys, xs = np.mgrid[0:size, 0:size]
    dist_sq = (xs - center) ** 2 + (ys - center) ** 2
    if ring:
        return ((radius - 1) ** 2 < dist_sq) & (dist_sq <= radius**2)
    return dist_sq <= radius**2


def mask_to_image(mask: np.ndarray, mode: str = "RGB") -> Image.Image:
    """Render a mask as a black-on-white Pillow image."""
    values = np.where(mask, 0, 255).astype(np.uint8)
    gray = Image.fromarray(values)
    return gray if mode == "L" else gray.convert(mode)


@pytest.fixture
def square_grid() -> PixelGrid:
    """Filled 5x5 square (side 4)."""
    return PixelGrid.from_mask(np.ones((5, 5), dtype=bool))


@pytest.fixture
def rectangle_grid() -> PixelGrid:
    """Filled rectangle 7 px wide and 5 px tall (sides 6 x 4)."""
    return PixelGrid.from_mask(np.ones((5, 7), dtype=bool))


@pytest.fixture
def outlined_square_grid() -> PixelGrid:
    """Hollow 6x6 square with a one-pixel outline, on a margin."""
    return PixelGrid.from_rows(
        [
            "........",
            ".######.",
            ".#....#.",
            ".#....#.",
            ".#....#.",
            ".#....#.",
            ".######.",
            "........",
        ]
    )


@pytest.fixture
def disk_grid() -> PixelGrid:
    """Filled disk of radius 10."""
    return PixelGrid.from_mask(disk_mask(10))


@pytest.fixture
def ring_grid() -> PixelGrid:
    """One-pixel circle outline of radius 10."""
    return PixelGrid.from_mask(disk_mask(10, ring=True))


@pytest.fixture
def right_triangle_grid() -> PixelGrid:
    """Right triangle with vertices (0, 0), (0, 4) and (4, 4)."""
    return PixelGrid.from_rows(
        [
            "#....",
            "##...",
            "###..",
            "####.",
            "#####",
        ]
    )


@pytest.fixture
def isosceles_grid() -> PixelGrid:
    """Triangle with apex (4, 0) and base from (0, 4) to (8, 4)."""
    return PixelGrid.from_rows(
        [
            "....#....",
            "...###...",
            "..#####..",
            ".#######.",
            "#########",
        ]
    )


@pytest.fixture
def trapezoid_grid() -> PixelGrid:
    """Right trapezoid whose diagonals differ in length."""
    return PixelGrid.from_rows(
        [
            "####..",
            "#####.",
            "######",
            "######",
            "######",
        ]
    )


@pytest.fixture
def blank_grid() -> PixelGrid:
    """All-white 6x4 grid."""
    return PixelGrid.from_mask(np.zeros((4, 6), dtype=bool))


@pytest.fixture
def write_image(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a mask to an image file under tmp_path."""

    def _write(mask: np.ndarray, name: str = "shape.png", mode: str = "RGB") -> Path:
        path = tmp_path / name
        mask_to_image(np.asarray(mask, dtype=bool), mode=mode).save(path)
        return path

    return _write


@pytest.fixture
def make_disk() -> Callable[..., np.ndarray]:
    """Factory for disk and ring masks."""
    return disk_mask
