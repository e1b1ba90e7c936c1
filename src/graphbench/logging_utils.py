"""
graphbench.logging_utils - Console logging setup for the CLI and server.

Library modules only create module-level loggers; handlers are attached
here, once, by the entry points.
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the "graphbench" logger to write to stderr.

    Calling it again replaces the previous handler instead of stacking a
    second one.

    Args:
        level: The logging level to use. Defaults to "WARNING".
        log_format: Custom log format string. If None, uses default format.
        date_format: Custom date format string. If None, uses default format.

    Returns:
        The configured package logger.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt=log_format or DEFAULT_FORMAT,
            datefmt=date_format or DEFAULT_DATE_FORMAT,
        )
    )

    logger = logging.getLogger("graphbench")
    for existing in list(logger.handlers):
        if getattr(existing, "_graphbench_handler", False):
            logger.removeHandler(existing)
    handler._graphbench_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level.upper())

    # Keep package output off the root logger
    logger.propagate = False
    return logger


def level_for(verbose: bool = False, quiet: bool = False) -> str:
    """Map the CLI -v/-q flags to a level name."""
    if verbose:
        return "DEBUG"
    if quiet:
        return "ERROR"
    return "WARNING"
