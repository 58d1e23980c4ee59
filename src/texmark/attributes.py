"""Presentation attributes carried by tokens and AST nodes.

Each enum renders to the exact MathML attribute text it stands for, so the
renderer can interpolate members directly.

Thread Safety:
All members are immutable enum values and safe to share across threads.

"""

from __future__ import annotations

from enum import Enum


class _AttributeEnum(Enum):
    def __str__(self) -> str:
        return self.value


class Variant(_AttributeEnum):
    """``mathvariant`` attribute of ``<mi>`` elements."""

    NORMAL = "normal"
    ITALIC = "italic"
    BOLD = "bold"
    BOLD_ITALIC = "bold-italic"
    DOUBLE_STRUCK = "double-struck"
    BOLD_FRAKTUR = "bold-fraktur"
    SCRIPT = "script"
    BOLD_SCRIPT = "bold-script"
    FRAKTUR = "fraktur"
    SANS_SERIF = "sans-serif"
    BOLD_SANS_SERIF = "bold-sans-serif"
    SANS_SERIF_ITALIC = "sans-serif-italic"
    SANS_SERIF_BOLD_ITALIC = "sans-serif-bold-italic"
    MONOSPACE = "monospace"


class Accent(_AttributeEnum):
    """``accent`` attribute of an over/under ``<mo>``."""

    TRUE = "true"
    FALSE = "false"


class LineThickness(_AttributeEnum):
    """``linethickness`` of ``<mfrac>``; MEDIUM is the MathML default."""

    MEDIUM = ""
    ZERO = ' linethickness="0"'


class ColumnAlign(_AttributeEnum):
    """``columnalign`` of ``<mtable>``; CENTER is the MathML default."""

    CENTER = ""
    LEFT = ' columnalign="left"'


class DisplayStyle(_AttributeEnum):
    """Block (display) or inline formula.

    Controls the ``display`` attribute of the root ``<math>`` element and the
    ``displaystyle`` of ``<mstyle>`` wrappers.
    """

    BLOCK = "block"
    INLINE = "inline"

    @property
    def displaystyle(self) -> str:
        """Value for ``<mstyle displaystyle="...">``."""
        return "true" if self is DisplayStyle.BLOCK else "false"
