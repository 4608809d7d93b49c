"""Logging setup for tracing matcher evaluations."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] %(name)s %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    logger_name: str = "matchkit",
    level: int = logging.DEBUG,
) -> logging.Logger:
    """Route matchkit log records to a file and/or stderr.

    Combinators log each child outcome and the exception matchers log what
    they captured, all through child loggers of ``matchkit``. Calling this
    again replaces the handlers installed by the previous call.

    Args:
        debug_file: File that receives every record at *level* or above.
            Parent directories are created. Skipped when None.
        verbose: Also echo records to stderr.
        logger_name: Logger to configure; narrow it (e.g.
            "matchkit.matchers.combinators") to trace a single module.
        level: Threshold for the logger and its handlers.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    logger.disabled = False
    logger.setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = []

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(debug_file, mode="a"))
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))
    if not handlers:
        handlers.append(logging.NullHandler())

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
