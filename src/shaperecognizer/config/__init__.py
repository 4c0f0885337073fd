"""Configuration management for shaperecognizer.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ClassifierConfig: Decision tree settings
- LoggingConfig: Logging settings
- RecognizerSettings: Main application settings
"""

from shaperecognizer.config.settings import (
    AngleFormula,
    ClassifierConfig,
    LoggingConfig,
    RecognizerSettings,
    get_default_settings,
)

__all__ = [
    "AngleFormula",
    "ClassifierConfig",
    "LoggingConfig",
    "RecognizerSettings",
    "get_default_settings",
]
