"""Minimal logging utilities for lexenc.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from lexenc.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Building encoding registry")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "lexenc." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("registry")
        >>> logger.name
        'lexenc.registry'
    """
    if not (name == "lexenc" or name.startswith("lexenc.")):
        name = f"lexenc.{name}"
    return logging.getLogger(name)
