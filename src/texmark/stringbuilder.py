"""StringBuilder for O(n) markup accumulation.

Appends to a list, joins once at the end. On top of raw appends it knows
the three shapes MathML output is made of: an opening tag, a closing tag,
and a text leaf such as ``<mi>x</mi>``. Leaf text is XML-escaped here so
renderer code never writes an unescaped glyph.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations

from texmark.utils.text import escape_xml


class StringBuilder:
    """Markup accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.open("msup").leaf("mi", "x").leaf("mn", "2").close("msup")
            >>> sb.build()
            '<msup><mi>x</mi><mn>2</mn></msup>'

    Attribute text passed to ``open``/``leaf`` is written verbatim and must
    start with a space (``' mathvariant="bold"'``).

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append raw markup; empty strings are skipped."""
        if s:
            self._parts.append(s)
        return self

    def open(self, tag: str, attrs: str = "") -> StringBuilder:
        self._parts.append(f"<{tag}{attrs}>")
        return self

    def close(self, tag: str) -> StringBuilder:
        self._parts.append(f"</{tag}>")
        return self

    def leaf(self, tag: str, text: str, attrs: str = "", *, suffix: str = "") -> StringBuilder:
        """Append ``<tag attrs>text</tag>`` with ``text`` escaped.

        Args:
            tag: Element name
            text: Character content, escaped for XML
            attrs: Attribute text, written verbatim
            suffix: Raw markup (an entity reference) written after the text
        """
        self._parts.append(f"<{tag}{attrs}>{escape_xml(text)}{suffix}</{tag}>")
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
