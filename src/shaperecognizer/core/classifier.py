"""Shape classification from border points.

This module contains the ShapeClassifier, which maps the four extreme points
of a silhouette to a shape category using a fixed decision tree:

1. Two border points coincide -> Triangle
2. The right and bottom points are not joined by a straight edge -> Circle
3. Equal diagonals -> Square (equal sides) or Rectangle
4. Otherwise -> Unrecognized
"""

import logging

from shaperecognizer.config import AngleFormula, ClassifierConfig
from shaperecognizer.core.geometry import angle_between, distance_between, points_between
from shaperecognizer.domain import (
    BorderPoints,
    Circle,
    PixelGrid,
    Rectangle,
    ShapeResult,
    Square,
    Triangle,
    Unrecognized,
)

logger = logging.getLogger(__name__)


class ShapeClassifier:
    """Classifies a silhouette from its border points.

    Example:
        classifier = ShapeClassifier()
        result = classifier.classify(extract_border_points(grid), grid)
    """

    def __init__(self, config: ClassifierConfig | None = None) -> None:
        """Initialize classifier.

        Args:
            config: Decision tree configuration (uses defaults if None)
        """
        self.config = config or ClassifierConfig()

    def classify(self, border: BorderPoints, grid: PixelGrid) -> ShapeResult:
        """Run the decision tree.

        Args:
            border: Border points extracted from ``grid``
            grid: Grid used for the line-occupancy check

        Returns:
            Exactly one ShapeResult; Unrecognized when no rule matched
        """
        if not border.has_foreground():
            return Unrecognized(reason="no foreground pixels")

        if border.has_coincident_points():
            return self._measure_triangle(border)

        if not self._straight_edge(border, grid):
            return Circle(radius=distance_between(border.min_x, border.max_x) / 2)

        diagonal_a = distance_between(border.max_x, border.min_x)
        diagonal_b = distance_between(border.max_y, border.min_y)
        if self.config.same_length(diagonal_a, diagonal_b):
            x_side_len = distance_between(border.min_y, border.max_x)
            y_side_len = distance_between(border.max_y, border.max_x)

            if self.config.same_length(x_side_len, y_side_len):
                return Square(side=x_side_len)
            return Rectangle(side_x=x_side_len, side_y=y_side_len)

        logger.debug(
            "No shape rule matched (diagonals %.3f and %.3f)", diagonal_a, diagonal_b
        )
        return Unrecognized()

    def _straight_edge(self, border: BorderPoints, grid: PixelGrid) -> bool:
        """Check the segment between the rightmost and the lowest point."""
        if not self.config.edge_check:
            return False
        if points_between(grid, border.max_x, border.max_y):
            return True

        # A two-pixel side (e.g. the right side of a 2-pixel-tall bar) has
        # nothing strictly between its ends
        start, end = border.max_x, border.max_y
        return (
            abs(start.x - end.x) + abs(start.y - end.y) == 1
            and grid.is_edge_pixel(start.x, start.y)
            and grid.is_edge_pixel(end.x, end.y)
        )

    def _measure_triangle(self, border: BorderPoints) -> Triangle:
        """Measure a triangle from border points where two points coincide.

        The measured side runs from max_x to min_y, or from max_x to max_y
        when those two coincide. min_x is the opposite vertex. Both angles
        are taken at the ends of the measured side.
        """
        signed = self.config.angle_formula is AngleFormula.SIGNED

        first = border.max_x
        if border.max_x != border.min_y:
            second = border.min_y
        else:
            second = border.max_y
        apex = border.min_x

        return Triangle(
            side_length=distance_between(first, second),
            angle_a=angle_between(first, apex, second, signed=signed),
            angle_b=angle_between(second, apex, first, signed=signed),
        )
