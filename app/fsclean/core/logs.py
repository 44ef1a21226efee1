"""Logging setup for the fsclean command.

Deletion attempts are reported through the ``fsclean`` logger
hierarchy. Nothing is emitted unless a log directory is configured
(dated file) or verbose console output is requested.
"""

import logging
from pathlib import Path

from rich.logging import RichHandler

from fsclean.core.paths import get_log_path
from fsclean.utils.formatting import err_console

LOGGER_NAME = "fsclean"
FILE_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

# Levels to restore, one per configure_logging() call that attached handlers
_saved_levels: list[int] = []


class LogSetupError(Exception):
    """Raised when the log file cannot be opened."""


def configure_logging(log_dir: Path | None = None, verbose: bool = False) -> list[logging.Handler]:
    """Attach file and console handlers to the fsclean logger.

    Args:
        log_dir: Directory for the dated log file. No file is written
            if None.
        verbose: If True, echo log records to stderr through Rich.

    Returns:
        Handlers that were attached, for release_logging().

    Raises:
        LogSetupError: If the log file cannot be opened.
    """
    logger = logging.getLogger(LOGGER_NAME)
    handlers: list[logging.Handler] = []

    if log_dir is not None:
        log_path = get_log_path(log_dir)
        try:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError as e:
            raise LogSetupError(f"Cannot open log file {log_path}: {e}") from e
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        handlers.append(file_handler)

    if verbose:
        handlers.append(RichHandler(console=err_console, show_path=False, markup=False))

    for handler in handlers:
        logger.addHandler(handler)

    if handlers:
        _saved_levels.append(logger.level)
        logger.setLevel(logging.INFO)

    return handlers


def release_logging(handlers: list[logging.Handler]) -> None:
    """Flush, close, and detach handlers added by configure_logging().

    The logger level is put back to what it was before configuration.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in handlers:
        handler.flush()
        handler.close()
        logger.removeHandler(handler)

    if handlers and _saved_levels:
        logger.setLevel(_saved_levels.pop())
