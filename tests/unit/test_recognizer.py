"""Unit tests for the recognition orchestrator."""

import math

import numpy as np
import pytest

from shaperecognizer.config import ClassifierConfig, LoggingConfig, RecognizerSettings
from shaperecognizer.core.recognizer import ShapeRecognizer
from shaperecognizer.domain import Circle, PixelGrid, Point, ShapeKind, Square, Triangle
from shaperecognizer.exceptions import ImageLoadError


class TestShapeRecognizer:
    """Tests for ShapeRecognizer."""

    def test_default_settings(self):
        recognizer = ShapeRecognizer()
        assert recognizer.config.classifier.tolerance == 0.0

    def test_recognize_grid(self, square_grid):
        report = ShapeRecognizer().recognize_grid(square_grid)

        assert report.result == Square(side=4.0)
        assert report.border.max_x == Point(4, 0)
        assert report.stats.width == 5
        assert report.stats.height == 5
        assert report.stats.foreground_pixels == 25
        assert report.stats.shape == "square"
        assert report.path is None

    def test_recognize_file(self, write_image, make_disk):
        path = write_image(make_disk(8))
        report = ShapeRecognizer().recognize(path)

        assert isinstance(report.result, Circle)
        assert report.result.radius == pytest.approx(8.0, abs=1.0)
        assert report.path == path
        assert report.stats.duration_seconds >= 0.0

    def test_recognize_same_file_twice(self, write_image):
        path = write_image(np.ones((3, 5), dtype=bool))
        recognizer = ShapeRecognizer()

        assert recognizer.recognize(path).result == recognizer.recognize(path).result

    def test_missing_file(self, tmp_path):
        with pytest.raises(ImageLoadError):
            ShapeRecognizer().recognize(tmp_path / "missing.png")

    def test_settings_forwarded_to_classifier(self, square_grid):
        settings = RecognizerSettings(classifier=ClassifierConfig(edge_check=False))
        report = ShapeRecognizer(settings).recognize_grid(square_grid)

        assert report.result.kind is ShapeKind.CIRCLE

    def test_degenerate_triangle(self):
        report = ShapeRecognizer().recognize_grid(PixelGrid.from_rows(["#"]))

        assert isinstance(report.result, Triangle)
        assert math.isnan(report.result.angle_a)

    def test_report_to_dict(self, rectangle_grid):
        data = ShapeRecognizer().recognize_grid(rectangle_grid).to_dict()

        assert data["result"] == {"shape": "rectangle", "side_x": 6.0, "side_y": 4.0}
        assert data["border_points"]["max_y"] == {"x": 6, "y": 4}
        assert data["width"] == 7

    def test_log_file(self, tmp_path, square_grid):
        log_file = tmp_path / "run.log"
        settings = RecognizerSettings(
            logging=LoggingConfig(log_file=log_file, log_level="ERROR")
        )
        ShapeRecognizer(settings).recognize_grid(square_grid)

        contents = log_file.read_text(encoding="utf-8")
        assert "Border points" in contents
        assert "Shape recognized" in contents
