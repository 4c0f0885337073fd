"""CLI application entry point for shaperecognizer.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from shaperecognizer import __version__
from shaperecognizer.cli.output import (
    console,
    print_border_points,
    print_error,
    print_header,
    print_image_info,
    print_json,
    print_result,
    print_step,
)
from shaperecognizer.config import (
    AngleFormula,
    ClassifierConfig,
    LoggingConfig,
    RecognizerSettings,
)
from shaperecognizer.core import ShapeRecognizer
from shaperecognizer.exceptions import ImageLoadError, ShapeRecognizerError
from shaperecognizer.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="shaperecognizer",
    help="Recognize the triangle, circle, square or rectangle drawn in a black-on-white image.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Shape Recognizer[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def recognize(
    image: Annotated[
        Path,
        typer.Argument(
            help="Path to a black-on-white image (PNG, BMP, GIF, ...)",
            show_default=False,
        ),
    ],
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Allowed difference between diagonals/sides in pixels (0 = exact)",
            min=0.0,
            max=10.0,
        ),
    ] = 0.0,
    signed_angles: Annotated[
        bool,
        typer.Option(
            "--signed-angles",
            help="Use the signed dot product for triangle angles",
        ),
    ] = False,
    no_edge_check: Annotated[
        bool,
        typer.Option(
            "--no-edge-check",
            help="Skip tracing the right-to-bottom edge (treat it as empty)",
        ),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the result and border points as JSON",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show image details and border points",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Recognize the shape drawn in an image.

    The image must contain a single pure black (0, 0, 0) shape on a
    background of any other color.

    Example:
        shaperecognizer square.png

    This prints a line such as "Square with side 4.00".
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    # Create settings from CLI arguments
    settings = RecognizerSettings(
        classifier=ClassifierConfig(
            tolerance=tolerance,
            angle_formula=AngleFormula.SIGNED if signed_angles else AngleFormula.ABSOLUTE,
            edge_check=not no_edge_check,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level,
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if verbose:
        print_header(__version__)
        print_step("Loading image")

    try:
        recognizer = ShapeRecognizer(settings, logger=logger)
        report = recognizer.recognize(image)
    except ImageLoadError as e:
        print_error(f'Unable to open "{e.path}"', details=e.reason if verbose else None)
        raise typer.Exit(code=1) from None
    except ShapeRecognizerError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if as_json:
        print_json(report.to_dict())
        raise typer.Exit(code=0 if report.result.recognized else 1)

    if verbose:
        print_image_info(
            str(image),
            width=report.stats.width,
            height=report.stats.height,
            foreground=report.border.pixel_count,
        )
        print_step("Border points")
        print_border_points(report.border)
        print_step("Result")

    if not report.result.recognized:
        print_error("Recognition error")
        raise typer.Exit(code=1)

    print_result(report.result)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
