"""Logging utilities for pointkit."""

import logging
from pathlib import Path
from typing import Any

import structlog

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_handlers: list[logging.Handler] = []


def _level(name: str) -> int:
    """Map a level name to its numeric value, raising ValueError if unknown."""
    if name.upper() not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {name}")
    return getattr(logging, name.upper())


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger

    Raises:
        ValueError: If a level is not one of LOG_LEVELS
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Handlers from a previous call are replaced, not stacked
    while _handlers:
        handler = _handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(_level(file_level))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level(console_level))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _handlers.append(console_handler)

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

    logger = structlog.get_logger("pointkit")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class OperationLogger:
    """Logger for the events of one command-line operation."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, operation: str) -> None:
        self._logger = logger
        self.operation = operation

    def log_points_loaded(self, path: Path, point_count: int, is_integer: bool) -> None:
        """Log a loaded point file."""
        self._logger.info(
            "Points loaded",
            operation=self.operation,
            path=str(path),
            point_count=point_count,
            coordinates="integer" if is_integer else "float",
        )

    def log_operation_complete(self, point_count: int, result_size: int, **details: Any) -> None:
        """Log a successful operation."""
        self._logger.info(
            "Operation complete",
            operation=self.operation,
            point_count=point_count,
            result_size=result_size,
            **details,
        )

    def log_result_saved(self, path: Path) -> None:
        """Log a written result file."""
        self._logger.debug("Result saved", operation=self.operation, path=str(path))

    def log_operation_error(self, error: Exception) -> None:
        """Log a failed operation."""
        self._logger.error(
            "Operation failed",
            operation=self.operation,
            error=str(error),
            error_type=type(error).__name__,
        )
