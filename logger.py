"""
Logging setup for admatch.

Diagnostics go to stderr so that the matching printed on stdout stays clean.
Modules log through children of the "admatch" logger.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured: Optional[logging.Logger] = None


def get_logger(name: str = "admatch", level: str = "INFO") -> logging.Logger:
    """
    Get or create the root admatch logger.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logging.Logger, handlers are only attached once
    """
    global _configured

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if _configured is None or _configured is not logger:
        logger.handlers.clear()
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = logger

    return logger


def reset_logger():
    """Detach handlers from the configured logger (useful for testing)."""
    global _configured

    if _configured is not None:
        _configured.handlers.clear()
        _configured.propagate = True
    _configured = None
