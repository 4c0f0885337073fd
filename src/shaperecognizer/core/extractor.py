"""Border point extraction.

Finds the four extreme foreground points of a silhouette in a single
row-major pass over the grid.
"""

import numpy as np

from shaperecognizer.domain import BorderPoints, PixelGrid, Point


def initial_border_points(width: int, height: int) -> BorderPoints:
    """Return the scan sentinels for a grid of the given size.

    Every sentinel is placed so that the first foreground pixel of the scan
    replaces all four of them.
    """
    return BorderPoints(
        max_x=Point(0, 0),
        min_x=Point(width, 0),
        max_y=Point(0, 0),
        min_y=Point(0, height),
        pixel_count=0,
    )


def extract_border_points(grid: PixelGrid) -> BorderPoints:
    """Locate the rightmost, leftmost, lowest and highest foreground pixels.

    The grid is visited row by row (y ascending), left to right inside a row
    (x ascending). Ties between pixels sharing an extreme coordinate resolve
    as follows:

    - max_x: updated on ``x > max_x.x``, so the earliest row wins
    - min_x: updated on ``x <= min_x.x``, so the latest row wins
    - max_y: updated on ``y >= max_y.y``, so the rightmost pixel of the last row wins
    - min_y: updated on ``y < min_y.y``, so the leftmost pixel of the first row wins

    Args:
        grid: Pixel grid to scan

    Returns:
        BorderPoints. If the grid has no foreground pixel the sentinels are
        returned unchanged with ``pixel_count == 0``.
    """
    start = initial_border_points(grid.width, grid.height)
    max_x, min_x, max_y, min_y = start.as_tuple()
    count = 0

    # np.nonzero yields coordinates in row-major (C) order, the scan order
    ys, xs = np.nonzero(grid.foreground_mask())
    for y, x in zip(ys.tolist(), xs.tolist(), strict=True):
        count += 1

        # The (0, 0) sentinel would never be replaced by a shape confined to
        # column 0, so the first foreground pixel always seeds max_x
        if count == 1 or x > max_x.x:
            max_x = Point(x, y)

        if x <= min_x.x:
            min_x = Point(x, y)

        if y >= max_y.y:
            max_y = Point(x, y)

        if y < min_y.y:
            min_y = Point(x, y)

    return BorderPoints(
        max_x=max_x,
        min_x=min_x,
        max_y=max_y,
        min_y=min_y,
        pixel_count=count,
    )
