"""Logging configuration for chromregion.

The library itself only emits records through ``logging.getLogger(__name__)``;
it never installs handlers on import. Host applications (or tests) call
:func:`setup_logging` to route those records to the console and/or a file.

Example:
    >>> from chromregion.utils.logging import setup_logging, get_logger
    >>> setup_logging(verbosity=2)
    >>> logger = get_logger(__name__)
    >>> logger.info("Processing started")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rich.logging import RichHandler

if TYPE_CHECKING:
    from chromregion.config import LoggingConfig

# =============================================================================
# Constants
# =============================================================================

# Name of the package root logger
ROOT_LOGGER_NAME = "chromregion"

# Default log format
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Rich console format (when using rich handler)
RICH_FORMAT = "%(message)s"

# Log levels by verbosity
VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


# =============================================================================
# Setup Functions
# =============================================================================


def _console_handler(use_rich: bool) -> logging.Handler:
    if use_rich:
        handler: logging.Handler = RichHandler(
            rich_tracebacks=True,
            show_time=False,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter(RICH_FORMAT))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    return handler


def setup_logging(
    verbosity: int = 1,
    log_file: Path | str | None = None,
    use_rich: bool = True,
) -> logging.Logger:
    """Route chromregion log records to the console and optionally a file.

    Calling this again replaces the handlers installed by the previous call.
    Clipping corrections are logged at INFO and construction failures at
    WARNING, so ``verbosity=0`` keeps only the failures.

    Args:
        verbosity: Verbosity level (0=warning, 1=info, 2=debug).
        log_file: Optional file that receives the same records as the console.
        use_rich: Use rich for console output.

    Returns:
        The configured package logger.
    """
    level = VERBOSITY_LEVELS.get(verbosity, logging.DEBUG)
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [_console_handler(use_rich)]
    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        handlers.append(file_handler)

    for handler in handlers:
        logger.addHandler(handler)
    return logger


def setup_logging_from_config(config: LoggingConfig) -> logging.Logger:
    """Configure logging from a :class:`~chromregion.config.LoggingConfig`."""
    return setup_logging(
        verbosity=config.verbosity,
        log_file=config.log_file,
        use_rich=config.use_rich,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module.

    Args:
        name: Module name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
