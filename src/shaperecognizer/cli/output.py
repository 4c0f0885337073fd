"""Rich console output helpers for the CLI.

This module renders recognition results and diagnostics on the console
using the Rich library.
"""

from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from shaperecognizer.domain import (
    BorderPoints,
    Circle,
    Rectangle,
    ShapeResult,
    Square,
    Triangle,
)

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def format_result(result: ShapeResult) -> str | None:
    """Render a recognized shape as its one-line description.

    Args:
        result: Classification outcome

    Returns:
        Description line, or None for an unrecognized shape
    """
    if isinstance(result, Triangle):
        return (
            f"Triangle with side {result.side_length:.2f} "
            f"and angles {result.angle_a:.2f}, {result.angle_b:.2f}"
        )
    if isinstance(result, Circle):
        return f"Circle with radius {result.radius:.2f}"
    if isinstance(result, Square):
        return f"Square with side {result.side:.2f}"
    if isinstance(result, Rectangle):
        return f"Rectangle with sides {result.side_x:.2f} x {result.side_y:.2f}"
    return None


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Shape Recognizer[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_image_info(image_path: str, width: int, height: int, foreground: int) -> None:
    """Print image information.

    Args:
        image_path: Path to the image file
        width: Image width in pixels
        height: Image height in pixels
        foreground: Number of foreground pixels
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(image_path)
    console.print(line, soft_wrap=True)
    console.print(f"  {width} x {height} px {SYM_DOT} {foreground:,} foreground pixels")


def print_border_points(border: BorderPoints) -> None:
    """Print the four border points as a table."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Point")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")

    for name, point in (
        ("max_x", border.max_x),
        ("min_x", border.min_x),
        ("max_y", border.max_y),
        ("min_y", border.min_y),
    ):
        table.add_row(name, str(point.x), str(point.y))

    console.print(table)


def print_result(result: ShapeResult) -> None:
    """Print the description of a recognized shape."""
    description = format_result(result)
    if description is not None:
        console.print(description, highlight=False, soft_wrap=True)
    if isinstance(result, Triangle) and result.is_degenerate:
        console.print(f"  {SYM_DOT} degenerate triangle (zero-length edge)", style="yellow")


def print_json(data: dict[str, Any]) -> None:
    """Print a dictionary as JSON."""
    console.print_json(data=data)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"[bold red]{SYM_ERR}[/bold red] ", end="")
    console.print(message, highlight=False, soft_wrap=True, markup=False)
    if details:
        console.print(f"  {details}", highlight=False, soft_wrap=True, markup=False)
