"""Logging configuration for legalchunk.

Library modules obtain loggers through get_logger(__name__) and never
configure handlers themselves. The CLI calls setup_logging() once per
invocation to attach a stderr handler to the package logger.
"""

import logging
import sys

PACKAGE_LOGGER = "legalchunk"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the legalchunk package logger.

    Replaces any handler installed by a previous call so repeated CLI
    invocations in the same process do not duplicate output. Logs go to
    stderr to keep stdout free for chunk output.

    Args:
        verbose: Enable DEBUG level output.
        quiet: Only report errors. Ignored when verbose is set.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    package_logger.setLevel(level)
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a legalchunk module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        logging.Logger instance
    """
    return logging.getLogger(name)
