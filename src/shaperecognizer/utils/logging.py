"""Logging utilities for Shape Recognizer."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

from shaperecognizer.domain import BorderPoints, ShapeResult, Triangle

# Handlers added by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


@dataclass
class RecognitionStats:
    """Statistics from one recognition run."""

    width: int = 0
    height: int = 0
    foreground_pixels: int = 0
    shape: str | None = None
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate extraction and classification duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("shaperecognizer")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RecognitionLogger:
    """Logger for tracking a recognition run and its statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RecognitionStats()

    def log_image_loaded(self, path: str, width: int, height: int, duration_ms: float) -> None:
        """Log a decoded image."""
        self._logger.info(
            "Image loaded",
            path=path,
            width=width,
            height=height,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.width = width
        self._stats.height = height

    def log_border_points(self, border: BorderPoints) -> None:
        """Log extracted border points."""
        self._logger.debug(
            "Border points",
            max_x=border.max_x.to_tuple(),
            min_x=border.min_x.to_tuple(),
            max_y=border.max_y.to_tuple(),
            min_y=border.min_y.to_tuple(),
            pixels=border.pixel_count,
        )
        self._stats.foreground_pixels = border.pixel_count

    def log_shape(self, result: ShapeResult) -> None:
        """Log a classification result."""
        self._stats.shape = result.kind.value
        if not result.recognized:
            self.log_unrecognized(getattr(result, "reason", "unknown"))
            return

        self._logger.info("Shape recognized", **result.to_dict())
        if isinstance(result, Triangle) and result.is_degenerate:
            self._logger.warning(
                "Degenerate triangle",
                side_length=result.side_length,
            )

    def log_unrecognized(self, reason: str) -> None:
        """Log a failed classification."""
        self._logger.info("Shape not recognized", reason=reason)

    def log_error(self, path: str, error: Exception) -> None:
        """Log a recognition error."""
        self._logger.error(
            "Recognition failed",
            path=path,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> RecognitionStats:
        """Get current recognition statistics."""
        return self._stats
