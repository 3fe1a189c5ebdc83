"""
Logging Configuration
Sets up the logger for the 'joggerload' namespace.
"""
import logging
import sys


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Configures the package logger to write to stderr.

    stdout carries the report, so log records never mix into it.
    Calling it again replaces the handler instead of adding a second one.
    """
    logger = logging.getLogger("joggerload")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
