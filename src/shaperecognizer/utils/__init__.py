"""Utility functions for shaperecognizer.

This module provides utility functions including:

- Logging setup and configuration
- Recognition statistics
"""

from shaperecognizer.utils.logging import (
    RecognitionLogger,
    RecognitionStats,
    configure_logging,
)

__all__ = [
    "RecognitionLogger",
    "RecognitionStats",
    "configure_logging",
]
