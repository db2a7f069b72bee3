"""Structured JSON logging configuration."""

import logging
import sys
from pythonjsonlogger.json import JsonFormatter


def setup_logger(name: str = "check_graylog", level: str = "CRITICAL") -> logging.Logger:
    """
    Configure structured JSON logging.

    Output goes to stderr: stdout is reserved for the plugin status line.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    formatter = JsonFormatter(
        '%(asctime)s %(name)s %(levelname)s %(message)s',
        timestamp=True
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Don't propagate to root logger
    logger.propagate = False

    return logger
