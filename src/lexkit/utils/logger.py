"""Minimal logging utilities for lexkit.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from lexkit.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning source")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "lexkit." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'lexkit.mymodule'
    """
    if not (name == "lexkit" or name.startswith("lexkit.")):
        name = f"lexkit.{name}"
    return logging.getLogger(name)
