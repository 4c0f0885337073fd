"""Recognition orchestration.

This module coordinates the full workflow for one image:
load -> extract border points -> classify.

Key components:
- RecognitionReport: Everything produced by one run
- ShapeRecognizer: Main orchestrator class
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

from shaperecognizer.config import RecognizerSettings
from shaperecognizer.core.classifier import ShapeClassifier
from shaperecognizer.core.extractor import extract_border_points
from shaperecognizer.domain import BorderPoints, PixelGrid, ShapeResult
from shaperecognizer.exceptions import ImageLoadError
from shaperecognizer.io import ImageReader
from shaperecognizer.utils import RecognitionLogger, RecognitionStats, configure_logging


@dataclass(frozen=True)
class RecognitionReport:
    """Result of recognizing one image.

    Attributes:
        border: Border points found by the scan
        result: Classification outcome
        stats: Image size, foreground pixel count and timing
        path: Source image, if the grid was loaded from a file
    """

    border: BorderPoints
    result: ShapeResult
    stats: RecognitionStats
    path: Path | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "path": str(self.path) if self.path is not None else None,
            "width": self.stats.width,
            "height": self.stats.height,
            "result": self.result.to_dict(),
            "border_points": self.border.to_dict(),
        }


class ShapeRecognizer:
    """Recognizes the shape drawn in an image.

    Example:
        recognizer = ShapeRecognizer(RecognizerSettings())
        report = recognizer.recognize(Path("square.png"))
        print(report.result)
    """

    def __init__(
        self,
        config: RecognizerSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the recognizer.

        Args:
            config: Recognizer settings (uses defaults if None)
            logger: Bound logger to use; configured from ``config.logging`` if None
        """
        self.config = config or RecognizerSettings()
        if logger is None:
            logger = configure_logging(
                log_file=self.config.logging.log_file,
                console_level=self.config.logging.log_level,
                file_level=self.config.logging.file_log_level,
            )
        self.logger = logger
        self.classifier = ShapeClassifier(self.config.classifier)

    def recognize(self, image_path: Path) -> RecognitionReport:
        """Load an image file and classify its shape.

        Args:
            image_path: Path to the image

        Returns:
            RecognitionReport for the image

        Raises:
            ImageLoadError: If the image cannot be decoded
        """
        recognition_logger = RecognitionLogger(self.logger)

        start = time.time()
        try:
            grid = ImageReader(image_path).load()
        except ImageLoadError as e:
            recognition_logger.log_error(str(image_path), e)
            raise

        recognition_logger.log_image_loaded(
            str(image_path),
            width=grid.width,
            height=grid.height,
            duration_ms=(time.time() - start) * 1000,
        )
        return self._run(grid, recognition_logger, path=image_path)

    def recognize_grid(self, grid: PixelGrid) -> RecognitionReport:
        """Classify the shape in an already decoded grid.

        Args:
            grid: Pixel grid to analyze

        Returns:
            RecognitionReport for the grid
        """
        recognition_logger = RecognitionLogger(self.logger)
        recognition_logger.stats.width = grid.width
        recognition_logger.stats.height = grid.height
        return self._run(grid, recognition_logger)

    def _run(
        self,
        grid: PixelGrid,
        recognition_logger: RecognitionLogger,
        path: Path | None = None,
    ) -> RecognitionReport:
        stats = recognition_logger.stats
        stats.start_time = time.time()

        border = extract_border_points(grid)
        recognition_logger.log_border_points(border)

        result = self.classifier.classify(border, grid)
        recognition_logger.log_shape(result)

        stats.end_time = time.time()
        return RecognitionReport(border=border, result=result, stats=stats, path=path)
