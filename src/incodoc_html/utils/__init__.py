"""Utility modules for incodoc-html.

Provides:
- logger: get_logger for namespaced logging
"""

from incodoc_html.utils.logger import get_logger

__all__ = ["get_logger"]
