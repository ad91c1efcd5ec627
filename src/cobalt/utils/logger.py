"""Minimal logging utilities for Cobalt.

Example:
    >>> from cobalt.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Compiling index.cb")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``cobalt``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("site").name
        'cobalt.site'
    """
    if not (name == "cobalt" or name.startswith("cobalt.")):
        name = f"cobalt.{name}"
    return logging.getLogger(name)
