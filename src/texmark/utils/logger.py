"""Minimal logging utilities for texmark.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications decide where records go.

Example:
    >>> from texmark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Converting formula")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "texmark." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("document")
        >>> logger.name
        'texmark.document'
    """
    if not (name == "texmark" or name.startswith("texmark.")):
        name = f"texmark.{name}"
    return logging.getLogger(name)
