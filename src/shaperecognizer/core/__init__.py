"""Core recognition algorithms for shaperecognizer.

This module contains the core algorithms for:

- Geometry operations (distance, law of cosines, Bresenham walk)
- Border point extraction (one row-major scan of the grid)
- Shape classification (decision tree over the border points)
- Recognition orchestration (load, extract, classify, log)

Key functions:
- distance_between: Euclidean distance between two points
- angle_between: Angle at a vertex via the law of cosines
- segment_cells: Cells strictly between two points
- points_between: Test if two points are joined by a straight filled edge
- extract_border_points: Find the four extreme foreground points

Key classes:
- ShapeClassifier: Maps border points to a ShapeResult
- ShapeRecognizer: Runs the full workflow for one image
"""

from shaperecognizer.core.classifier import ShapeClassifier
from shaperecognizer.core.extractor import extract_border_points, initial_border_points
from shaperecognizer.core.geometry import (
    angle_between,
    distance_between,
    dot_product,
    points_between,
    segment_cells,
)
from shaperecognizer.core.recognizer import RecognitionReport, ShapeRecognizer

__all__ = [
    # Recognizer classes
    "RecognitionReport",
    # Classifier classes
    "ShapeClassifier",
    "ShapeRecognizer",
    # Geometry functions
    "angle_between",
    "distance_between",
    "dot_product",
    # Extraction functions
    "extract_border_points",
    "initial_border_points",
    "points_between",
    "segment_cells",
]
