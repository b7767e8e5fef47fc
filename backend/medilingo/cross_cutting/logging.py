"""
Logging Configuration

Structured logging for the MediLingo+ backend.
"""

import logging
import sys
from typing import Optional, Union
from datetime import datetime


ROOT_LOGGER_NAME = "medilingo"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> None:
    """
    Configure logging for the application.

    Args:
        level: Logging level (default: INFO)
        log_file: Optional file path for log output
        format_string: Custom format string
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if format_string is None:
        format_string = (
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        )

    formatter = logging.Formatter(format_string)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    # Clear existing handlers
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the application namespace.

    Args:
        name: Short component name

    Returns:
        Configured logger instance
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class FlowLogger:
    """
    Logger for one user action passing through the lookup flow.

    Records step start/end with durations, keyed by the action's token.
    """

    def __init__(self, token: int, action: str):
        self.token = token
        self.action = action
        self.logger = get_logger(f"flow.{action}.{token}")
        self._step_start_times = {}

    def step_start(self, step_name: str) -> None:
        """Log step start."""
        self._step_start_times[step_name] = datetime.now()
        self.logger.info(f"Step '{step_name}' started")

    def step_end(self, step_name: str, success: bool = True) -> float:
        """Log step completion and return its duration in milliseconds."""
        duration = 0.0
        if step_name in self._step_start_times:
            delta = datetime.now() - self._step_start_times[step_name]
            duration = delta.total_seconds() * 1000

        status = "completed" if success else "failed"
        self.logger.info(f"Step '{step_name}' {status} in {duration:.2f}ms")
        return duration

    def stale(self, step_name: str) -> None:
        """Log a result discarded because a newer action superseded it."""
        self.logger.debug(f"Step '{step_name}' result discarded (stale token {self.token})")
