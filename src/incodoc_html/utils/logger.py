"""Minimal logging utilities for incodoc-html.

Wraps the standard library logging so every logger lives under the
``incodoc_html`` namespace. The library never installs handlers.

Example:
    >>> from incodoc_html.utils.logger import get_logger
    >>> logger = get_logger("examples")
    >>> logger.name
    'incodoc_html.examples'
"""

from __future__ import annotations

import logging

_ROOT = "incodoc_html"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name, prefixed with ``incodoc_html.``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
