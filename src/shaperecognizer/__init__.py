"""Shape Recognizer - Classify a black-on-white raster image as a simple shape.

Shape Recognizer is a CLI tool that reads a binary image, locates the four
extreme points of the black silhouette and decides whether the silhouette is a
triangle, circle, square or rectangle.

Example:
    $ shaperecognizer square.png
    Square with side 4.00
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
