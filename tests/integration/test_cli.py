"""End-to-end tests that write images and run the CLI on them."""

import json

import numpy as np
import pytest
from typer.testing import CliRunner

from shaperecognizer import __version__
from shaperecognizer.cli.app import app

runner = CliRunner()


@pytest.fixture
def triangle_mask() -> np.ndarray:
    """Right triangle with vertices (0, 0), (0, 4) and (4, 4)."""
    return np.tril(np.ones((5, 5), dtype=bool))


@pytest.fixture
def isosceles_mask() -> np.ndarray:
    """Triangle with apex (4, 0) and base from (0, 4) to (8, 4)."""
    ys, xs = np.mgrid[0:5, 0:9]
    return np.abs(xs - 4) <= ys


class TestRecognizedShapes:
    """Each shape prints its one-line description."""

    def test_square(self, write_image):
        path = write_image(np.ones((5, 5), dtype=bool))
        result = runner.invoke(app, [str(path)])

        assert result.exit_code == 0
        assert "Square with side 4.00" in result.output

    def test_rectangle(self, write_image):
        path = write_image(np.ones((5, 7), dtype=bool))
        result = runner.invoke(app, [str(path)])

        assert result.exit_code == 0
        assert "Rectangle with sides 6.00 x 4.00" in result.output

    def test_circle(self, write_image, make_disk):
        path = write_image(make_disk(10))
        result = runner.invoke(app, [str(path)])

        assert result.exit_code == 0
        assert "Circle with radius 10.00" in result.output

    def test_outlined_circle_on_grayscale_image(self, write_image, make_disk):
        path = write_image(make_disk(12, ring=True), mode="L")
        result = runner.invoke(app, [str(path)])

        assert result.exit_code == 0
        assert "Circle with radius 12.00" in result.output

    def test_triangle(self, write_image, triangle_mask):
        path = write_image(triangle_mask)
        result = runner.invoke(app, [str(path)])

        assert result.exit_code == 0
        assert "Triangle with side 5.66 and angles 0.79, 0.79" in result.output


class TestClassifierOptions:
    """Options that change the decision tree."""

    def test_signed_angles(self, write_image, isosceles_mask):
        path = write_image(isosceles_mask)

        classic = runner.invoke(app, [str(path)])
        signed = runner.invoke(app, [str(path), "--signed-angles"])

        assert "Triangle with side 5.66 and angles 0.79, 0.00" in classic.output
        assert "Triangle with side 5.66 and angles 0.79, 1.57" in signed.output

    def test_no_edge_check(self, write_image):
        path = write_image(np.ones((5, 5), dtype=bool))
        result = runner.invoke(app, [str(path), "--no-edge-check"])

        assert result.exit_code == 0
        assert "Circle with radius 2.83" in result.output

    def test_tolerance(self, write_image):
        mask = np.ones((5, 6), dtype=bool)
        mask[0, 4:] = False
        mask[1, 5] = False
        path = write_image(mask)

        strict = runner.invoke(app, [str(path)])
        tolerant = runner.invoke(app, [str(path), "--tolerance", "2"])

        assert strict.exit_code == 1
        assert tolerant.exit_code == 0
        assert "Rectangle with sides 5.39 x 2.00" in tolerant.output


class TestFailures:
    """Failures print a message and exit with code 1."""

    def test_blank_image(self, write_image):
        path = write_image(np.zeros((6, 6), dtype=bool))
        result = runner.invoke(app, [str(path)])

        assert result.exit_code == 1
        assert "Recognition error" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "missing.png")])

        assert result.exit_code == 1
        assert "Unable to open" in result.output

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello", encoding="utf-8")
        result = runner.invoke(app, [str(path)])

        assert result.exit_code == 1
        assert "Unable to open" in result.output

    def test_verbose_and_quiet(self, write_image):
        path = write_image(np.ones((5, 5), dtype=bool))
        result = runner.invoke(app, [str(path), "--verbose", "--quiet"])

        assert result.exit_code == 1
        assert "Cannot use --verbose and --quiet together" in result.output

    def test_invalid_log_level(self, write_image):
        path = write_image(np.ones((5, 5), dtype=bool))
        result = runner.invoke(app, [str(path), "--log-level", "LOUD"])

        assert result.exit_code == 1
        assert "Invalid log level" in result.output


class TestOutputModes:
    """Verbose, JSON and version output."""

    def test_verbose(self, write_image):
        path = write_image(np.ones((5, 7), dtype=bool))
        result = runner.invoke(app, [str(path), "--verbose"])

        assert result.exit_code == 0
        assert "7 x 5 px" in result.output
        assert "max_x" in result.output
        assert "Rectangle with sides 6.00 x 4.00" in result.output

    def test_json(self, write_image):
        path = write_image(np.ones((5, 5), dtype=bool))
        result = runner.invoke(app, [str(path), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["result"] == {"shape": "square", "side": 4.0}
        assert data["border_points"]["max_x"] == {"x": 4, "y": 0}
        assert data["border_points"]["pixel_count"] == 25

    def test_json_unrecognized(self, write_image):
        path = write_image(np.zeros((3, 3), dtype=bool))
        result = runner.invoke(app, [str(path), "--json"])

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["result"]["shape"] == "unrecognized"

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_log_file(self, write_image, tmp_path):
        path = write_image(np.ones((5, 5), dtype=bool))
        log_file = tmp_path / "recognize.log"
        result = runner.invoke(app, [str(path), "--log-file", str(log_file)])

        assert result.exit_code == 0
        assert "Shape recognized" in log_file.read_text(encoding="utf-8")
