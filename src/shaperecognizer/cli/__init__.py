"""Command-line interface for shaperecognizer.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- One-line shape description
- Verbose mode with border points
- JSON output for scripting
"""

from shaperecognizer.cli.app import cli, main

__all__ = ["cli", "main"]
