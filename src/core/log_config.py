"""
Logging setup.

Demonstration output is written to stdout with print (it *is* the observable behavior of the examples).
Diagnostics go through the logging module to stderr, so the two never interleave in captured output.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# All modules log through logging.getLogger(__name__), so they all hang below the package root "src"
ROOT_LOGGER_NAME = "src"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the project's root logger (only once) and set its level."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
