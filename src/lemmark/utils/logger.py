"""Minimal logging utilities for Lemmark.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from lemmark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Spoiler fence left open")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "lemmark." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("plugins")
        >>> logger.name
        'lemmark.plugins'
    """
    if not (name == "lemmark" or name.startswith("lemmark.")):
        name = f"lemmark.{name}"
    return logging.getLogger(name)
