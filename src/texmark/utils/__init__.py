"""Utility modules for texmark.

Provides:
- logger: get_logger for logging
- text: escape_xml for markup output
"""

from texmark.utils.logger import get_logger
from texmark.utils.text import escape_xml

__all__ = [
    "escape_xml",
    "get_logger",
]
