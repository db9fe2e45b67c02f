"""
Logging setup for the API server and CLI.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger with a single stream handler.

    Safe to call more than once; existing handlers are replaced.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("astral_draft")
    logger.setLevel(log_level)

    # Clear existing handlers to avoid duplicate logs in repeated invocations
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    logger.propagate = False
    return logger
