"""Exception hierarchy for Shape Recognizer."""


class ShapeRecognizerError(Exception):
    """Base exception for all Shape Recognizer errors."""

    pass


class ImageError(ShapeRecognizerError):
    """Errors related to image loading or pixel data."""

    pass


class ImageLoadError(ImageError):
    """Error loading an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class ImageFormatError(ImageError):
    """Pixel data with an unsupported layout."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid pixel data: {details}")


class GeometryError(ShapeRecognizerError):
    """Errors in geometric calculations."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
