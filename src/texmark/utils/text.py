"""Text processing utilities for texmark.

Example:
    >>> from texmark.utils.text import escape_xml
    >>> escape_xml("a < b")
    'a &lt; b'
"""

from __future__ import annotations

import html as html_module
import re

# C0 controls that XML 1.0 forbids in character data (tab, LF and CR are allowed)
_XML_ILLEGAL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")

REPLACEMENT_CHARACTER = "\ufffd"


def escape_xml(text: str) -> str:
    """Escape XML special characters in element content.

    Only ``&``, ``<`` and ``>`` are replaced. Quotes are left alone because
    leaf content never lands inside an attribute value. Control characters
    that XML cannot carry become U+FFFD.

    Args:
        text: Raw glyph or text content

    Returns:
        Text safe to place between MathML tags
    """
    return _XML_ILLEGAL.sub(REPLACEMENT_CHARACTER, html_module.escape(text, quote=False))
