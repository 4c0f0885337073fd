"""Configuration settings for Shape Recognizer."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class AngleFormula(str, Enum):
    """Dot product used for triangle angles."""

    ABSOLUTE = "absolute"
    SIGNED = "signed"


class ClassifierConfig(BaseModel):
    """Configuration for the shape decision tree.

    The defaults reproduce the classic recognizer output: exact float
    comparisons and the absolute-value dot product for triangle angles.
    """

    tolerance: float = Field(
        default=0.0,
        ge=0.0,
        le=10.0,
        description="Allowed difference between diagonals/sides (0 = exact equality)",
    )
    angle_formula: AngleFormula = Field(
        default=AngleFormula.ABSOLUTE,
        description="Dot product used by the law of cosines for triangle angles",
    )
    edge_check: bool = Field(
        default=True,
        description="Trace the segment between the right and bottom points; "
        "when disabled the segment is always treated as empty",
    )

    def same_length(self, first: float, second: float) -> bool:
        """Compare two lengths using the configured tolerance.

        Args:
            first: First length
            second: Second length

        Returns:
            True if the lengths differ by no more than the tolerance
        """
        if self.tolerance == 0.0:
            return first == second
        return abs(first - second) <= self.tolerance


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class RecognizerSettings(BaseModel):
    """Main application settings."""

    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RecognizerSettings:
    """Get default application settings."""
    return RecognizerSettings()
