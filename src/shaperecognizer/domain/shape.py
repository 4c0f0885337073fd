"""Geometric types produced by the recognizer.

This module defines:
- Point: An integer pixel coordinate
- BorderPoints: The four extreme foreground points of a silhouette
- ShapeKind: Enum of recognized shape categories
- ShapeResult and its variants: Triangle, Circle, Square, Rectangle, Unrecognized
"""

import math
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar


@dataclass(frozen=True, slots=True)
class Point:
    """An integer pixel coordinate.

    Immutable and hashable. Equality is exact on both components.

    Attributes:
        x: Column index
        y: Row index
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, int]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=int(data["x"]), y=int(data["y"]))


@dataclass(frozen=True, slots=True)
class BorderPoints:
    """The four extreme foreground points found by one grid scan.

    Layout of the points for an axis-aligned rectangle (y grows downward):

        min_y ________ max_x
             |        |
             |________|
        min_x          max_y

    Attributes:
        max_x: Rightmost point (topmost among ties)
        min_x: Leftmost point (bottommost among ties)
        max_y: Lowest point (rightmost among ties)
        min_y: Highest point (leftmost among ties)
        pixel_count: Number of foreground pixels seen by the scan
    """

    max_x: Point
    min_x: Point
    max_y: Point
    min_y: Point
    pixel_count: int = 0

    def has_foreground(self) -> bool:
        """Check if the scan found any foreground pixel.

        When False, the points are the untouched scan sentinels.
        """
        return self.pixel_count > 0

    def as_tuple(self) -> tuple[Point, Point, Point, Point]:
        """Return (max_x, min_x, max_y, min_y)."""
        return (self.max_x, self.min_x, self.max_y, self.min_y)

    def has_coincident_points(self) -> bool:
        """Check if any two of the four points are equal."""
        return len(set(self.as_tuple())) < 4

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "max_x": self.max_x.to_dict(),
            "min_x": self.min_x.to_dict(),
            "max_y": self.max_y.to_dict(),
            "min_y": self.min_y.to_dict(),
            "pixel_count": self.pixel_count,
        }


class ShapeKind(str, Enum):
    """Recognized shape category."""

    TRIANGLE = "triangle"
    CIRCLE = "circle"
    SQUARE = "square"
    RECTANGLE = "rectangle"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ShapeResult:
    """Base class for classification outcomes."""

    kind: ClassVar[ShapeKind]

    @property
    def recognized(self) -> bool:
        """Check if a shape rule matched."""
        return self.kind is not ShapeKind.UNRECOGNIZED

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary with a ``shape`` tag."""
        data: dict[str, Any] = {"shape": self.kind.value}
        data.update((field.name, getattr(self, field.name)) for field in fields(self))
        return data


@dataclass(frozen=True)
class Triangle(ShapeResult):
    """A triangle measured from one side and its two adjacent angles.

    Attributes:
        side_length: Length of the measured side
        angle_a: Angle (radians) at the first end of the measured side
        angle_b: Angle (radians) at the second end of the measured side
    """

    kind: ClassVar[ShapeKind] = ShapeKind.TRIANGLE

    side_length: float
    angle_a: float
    angle_b: float

    @property
    def is_degenerate(self) -> bool:
        """True when an angle could not be computed (zero-length edge)."""
        return math.isnan(self.angle_a) or math.isnan(self.angle_b)


@dataclass(frozen=True)
class Circle(ShapeResult):
    """A circle."""

    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    radius: float


@dataclass(frozen=True)
class Square(ShapeResult):
    """An axis-aligned square."""

    kind: ClassVar[ShapeKind] = ShapeKind.SQUARE

    side: float


@dataclass(frozen=True)
class Rectangle(ShapeResult):
    """An axis-aligned rectangle.

    Attributes:
        side_x: Length of the top side
        side_y: Length of the right side
    """

    kind: ClassVar[ShapeKind] = ShapeKind.RECTANGLE

    side_x: float
    side_y: float


@dataclass(frozen=True)
class Unrecognized(ShapeResult):
    """No shape rule matched."""

    kind: ClassVar[ShapeKind] = ShapeKind.UNRECOGNIZED

    reason: str = "no shape rule matched"
