"""
Logging Configuration
=====================

Library modules only call logging.getLogger(__name__). The package logger
carries a NullHandler (installed in disk_region/__init__.py) so nothing is
printed unless an application calls setup_logging().

Levels used by the package:
    DEBUG   - every growth step and shrink commit
    INFO    - phase summaries
    WARNING - results whose boundary is not a single loop
"""
import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "disk_region"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO,
                  log_file: Optional[str] = None,
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Route the package logger to a console stream and, optionally, a file.

    Replaces any handlers already on the package logger, including the
    default NullHandler, so repeated calls do not duplicate output.

    Args:
        level: threshold for the logger and its handlers
        log_file: also write the log here (overwritten)
        stream: console stream, sys.stdout when None

    Returns:
        the configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(stream if stream is not None else sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging initialized at level {logging.getLevelName(level)}")
    return logger
