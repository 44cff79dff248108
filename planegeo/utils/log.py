"""Logging setup for applications embedding planegeo."""

import logging
import sys

from ..config import LOG_FORMAT, LOG_DATE_FORMAT

PACKAGE_LOGGER = "planegeo"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """Attach console and file handlers to the planegeo logger.

    Only the package logger is touched; the root logger keeps whatever the
    application configured. Calling again replaces the handlers installed
    by the previous call.

    Args:
        level: Level for the package logger
        log_file: Also append records to this file (None for console only)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)
    logger.setLevel(level)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        except OSError as e:
            logger.warning(f"Could not open log file '{log_file}', console only: {e}")
        else:
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
