"""
Logging for the coastal monitoring system.

Log records go to stderr so that CLI output on stdout stays valid JSON.
A file handler with source locations is added when a log file is set.
"""

import logging
import os
import sys
import time
from pathlib import Path
from typing import Any, Optional

DEFAULT_LOG_FILE = "logs/coastal_monitor.log"

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(threadName)s - %(filename)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(log_file: str) -> logging.Handler:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
    return handler


def setup_logger(
    name: str = "coastal_monitor",
    log_file: Optional[str] = None,
    log_level: str = "INFO"
) -> logging.Logger:
    """
    Configure the application logger.

    Calling this again replaces the handlers of an earlier call.

    Args:
        name: Logger name
        log_file: Log file path. None reads COASTAL_LOG_FILE, falling back
                  to logs/coastal_monitor.log; an empty string logs to
                  stderr only.
        log_level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger
    """
    if log_file is None:
        log_file = os.getenv("COASTAL_LOG_FILE", DEFAULT_LOG_FILE)

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if log_file else level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))
    logger.addHandler(console)

    if log_file:
        logger.addHandler(_file_handler(log_file))

    logger.propagate = False
    return logger


class LoggerContext:
    """
    Time one monitoring operation and log how it ended.

    Keyword context (a region, a parameter) is appended to every message.
    The elapsed time is kept on ``duration`` after the block exits.
    Exceptions are logged and re-raised.
    """

    def __init__(self, logger: logging.Logger, operation: str, **context: Any):
        self.logger = logger
        self.operation = operation
        self.context = context
        self.duration: Optional[float] = None
        self._started = 0.0

    @property
    def label(self) -> str:
        if not self.context:
            return self.operation
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.operation} [{details}]"

    def __enter__(self):
        self._started = time.monotonic()
        self.logger.info(f"Starting {self.label}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.monotonic() - self._started

        if exc_type is None:
            self.logger.info(f"Finished {self.label} in {self.duration:.2f}s")
        else:
            self.logger.error(
                f"{self.label} failed after {self.duration:.2f}s: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb)
            )
        return False
