"""Geometric operations on pixel coordinates.

This module provides the mathematical utilities used by the classifier:
- Euclidean distance between two points
- Angle at a vertex via the law of cosines
- Bresenham walk between two points
- Line-occupancy predicate (is the segment a straight filled border?)

All functions are pure and never mutate their inputs.
"""

import math

import pybresenham as bres

from shaperecognizer.domain import PixelGrid, Point
from shaperecognizer.exceptions import GeometryError


def distance_between(p1: Point, p2: Point) -> float:
    """Calculate the Euclidean distance between two points.

    Args:
        p1: First point
        p2: Second point

    Returns:
        Distance in pixels

    Examples:
        >>> distance_between(Point(0, 0), Point(3, 4))
        5.0
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


def dot_product(vertex: Point, p1: Point, p2: Point, signed: bool = False) -> int:
    """Dot product of the edge vectors vertex->p1 and vertex->p2.

    With ``signed=False`` every coordinate difference is replaced by its
    absolute value before multiplying, i.e. ``|dx1|*|dx2| + |dy1|*|dy2|``.
    That variant never goes negative, so it cannot report obtuse angles.

    Args:
        vertex: Shared vertex of both edges
        p1: End of the first edge
        p2: End of the second edge
        signed: Use the true (signed) dot product instead of the absolute-value one

    Returns:
        Integer dot product
    """
    dx1, dy1 = p1.x - vertex.x, p1.y - vertex.y
    dx2, dy2 = p2.x - vertex.x, p2.y - vertex.y
    if signed:
        return dx1 * dx2 + dy1 * dy2
    return abs(dx1) * abs(dx2) + abs(dy1) * abs(dy2)


def angle_between(vertex: Point, p1: Point, p2: Point, signed: bool = False) -> float:
    """Calculate the angle at ``vertex`` using the law of cosines.

    ``angle = acos((u . v) / (|u| |v|))`` where ``u`` and ``v`` are the edge
    vectors from ``vertex`` to ``p1`` and ``p2``.

    Args:
        vertex: Vertex at which the angle is measured
        p1: End of the first edge
        p2: End of the second edge
        signed: Use the signed dot product instead of the absolute-value one

    Returns:
        Angle in radians within [0, pi], or NaN if either edge has zero length

    Examples:
        >>> round(angle_between(Point(0, 0), Point(4, 0), Point(0, 4)), 4)
        1.5708
    """
    u_len = distance_between(vertex, p1)
    v_len = distance_between(vertex, p2)
    if u_len == 0.0 or v_len == 0.0:
        return math.nan

    cosine = dot_product(vertex, p1, p2, signed=signed) / (u_len * v_len)
    return math.acos(max(-1.0, min(1.0, cosine)))


def segment_cells(p1: Point, p2: Point) -> list[Point]:
    """Rasterize the segment p1-p2 with Bresenham's algorithm.

    The endpoints themselves are excluded.

    Args:
        p1: Start point
        p2: End point

    Returns:
        Cells strictly between p1 and p2, ordered from p1 towards p2

    Examples:
        >>> segment_cells(Point(0, 0), Point(3, 3))
        [Point(x=1, y=1), Point(x=2, y=2)]
    """
    endpoints = {p1.to_tuple(), p2.to_tuple()}
    return [
        Point(int(x), int(y))
        for x, y in bres.line(p1.x, p1.y, p2.x, p2.y)
        if (x, y) not in endpoints
    ]


def points_between(grid: PixelGrid, p1: Point, p2: Point) -> bool:
    """Check whether p1 and p2 are joined by a straight filled border.

    Walks the Bresenham segment between the points and requires every
    intermediate cell to be a foreground pixel on the silhouette border.
    A segment that crosses background (an outlined curve) or runs through
    the interior of the shape (a filled curve) does not count. Adjacent or
    equal points have no cells in between and are reported False.

    Args:
        grid: Pixel grid the points belong to
        p1: First endpoint
        p2: Second endpoint

    Returns:
        True if the segment between the points is a straight filled edge

    Raises:
        GeometryError: If an endpoint lies outside the grid
    """
    for point in (p1, p2):
        if not grid.in_bounds(point.x, point.y):
            raise GeometryError(
                f"point ({point.x}, {point.y}) outside {grid.width}x{grid.height} grid"
            )

    cells = segment_cells(p1, p2)
    if not cells:
        return False

    return all(grid.is_edge_pixel(cell.x, cell.y) for cell in cells)
