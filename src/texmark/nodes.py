"""Typed AST nodes for texmark.

All AST nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: trees are value objects, rewritten by rebuilding
- Pattern matching: the parser and renderer dispatch with match statements

Node Hierarchy:
Node (base)
├── Leaves
│   ├── Number, Letter, Operator, OtherOperator, Function
│   ├── Space, Text, SizedParen, StretchedOp
│   └── Undefined
├── Wrappers
│   ├── Sqrt, Slashed, Style
│   └── Fenced
├── Layout relations
│   ├── Subscript, Superscript, SubSup
│   ├── Frac
│   ├── OverOp, UnderOp, Overset, Underset
│   └── Under, UnderOver
└── Sequences
    ├── Row
    ├── Matrix
    └── Ampersand, NewLine (matrix markers)

Every interior node exclusively owns its children; there is no sharing and
no cycles. Matrix bodies stay flat: cell contents interleaved with Ampersand
and NewLine markers. Only the renderer regroups them into rows and cells.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from texmark.attributes import Accent, ColumnAlign, DisplayStyle, LineThickness, Variant

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""


# =============================================================================
# Leaves
# =============================================================================


@dataclass(frozen=True, slots=True)
class Number(Node):
    """Numeric literal, text kept verbatim (``3.14``)."""

    value: str


@dataclass(frozen=True, slots=True)
class Letter(Node):
    """Single identifier glyph with its font variant.

    LaTeX: ``x``, ``\\alpha``, ``\\mathbb{R}``
    MathML: ``<mi>x</mi>``

    """

    char: str
    variant: Variant = Variant.ITALIC


@dataclass(frozen=True, slots=True)
class Operator(Node):
    """Operator glyph: ``<mo>+</mo>``."""

    op: str


@dataclass(frozen=True, slots=True)
class OtherOperator(Node):
    """Bare delimiter used outside ``\\left``/``\\right``: ``<mo>(</mo>``."""

    op: str


@dataclass(frozen=True, slots=True)
class Function(Node):
    """Named function such as ``sin`` or an ``\\operatorname``."""

    name: str


@dataclass(frozen=True, slots=True)
class Space(Node):
    """Fixed-width horizontal space in em."""

    width: float


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text from ``\\text{...}``."""

    content: str


@dataclass(frozen=True, slots=True)
class SizedParen(Node):
    """Delimiter with a fixed size (``\\big(``)."""

    size: str
    paren: str


@dataclass(frozen=True, slots=True)
class StretchedOp(Node):
    """Operator with explicit stretchiness (``\\middle|``)."""

    stretchy: bool
    op: str


@dataclass(frozen=True, slots=True)
class Undefined(Node):
    """Placeholder for a construct that could not be parsed.

    Keeps bad input visible in the output instead of dropping it.

    """

    description: str


# =============================================================================
# Wrappers
# =============================================================================


@dataclass(frozen=True, slots=True)
class Sqrt(Node):
    """Square root, or n-th root when degree is set."""

    degree: Node | None
    content: Node


@dataclass(frozen=True, slots=True)
class Slashed(Node):
    """Feynman slash through a letter or operator (``\\slashed{\\partial}``).

    Any other child renders unchanged.

    """

    content: Node


@dataclass(frozen=True, slots=True)
class Style(Node):
    """``<mstyle>`` wrapper, optionally forcing display or inline size."""

    display: DisplayStyle | None
    content: Node


@dataclass(frozen=True, slots=True)
class Fenced(Node):
    """Content between stretchy delimiters (``\\left( ... \\right)``).

    An empty open or close string is an invisible delimiter (``\\right.``).

    """

    open: str
    close: str
    content: Node


# =============================================================================
# Layout relations
# =============================================================================


@dataclass(frozen=True, slots=True)
class Subscript(Node):
    target: Node
    sub: Node


@dataclass(frozen=True, slots=True)
class Superscript(Node):
    target: Node
    sup: Node


@dataclass(frozen=True, slots=True)
class SubSup(Node):
    """Both-sided script, used for integrals (``\\int_0^1``)."""

    target: Node
    sub: Node
    sup: Node


@dataclass(frozen=True, slots=True)
class Frac(Node):
    numerator: Node
    denominator: Node
    line_thickness: LineThickness = LineThickness.MEDIUM


@dataclass(frozen=True, slots=True)
class OverOp(Node):
    """Accent operator above a target (``\\hat{x}``)."""

    op: str
    accent: Accent
    target: Node


@dataclass(frozen=True, slots=True)
class UnderOp(Node):
    """Accent operator below a target (``\\underline{x}``)."""

    op: str
    accent: Accent
    target: Node


@dataclass(frozen=True, slots=True)
class Overset(Node):
    over: Node
    target: Node


@dataclass(frozen=True, slots=True)
class Underset(Node):
    under: Node
    target: Node


@dataclass(frozen=True, slots=True)
class Under(Node):
    """Limit annotation below an operator (``\\lim_{x \\to 0}``)."""

    target: Node
    under: Node


@dataclass(frozen=True, slots=True)
class UnderOver(Node):
    """Limits below and above a big operator (``\\sum_{i=0}^n``)."""

    target: Node
    under: Node
    over: Node


# =============================================================================
# Sequences
# =============================================================================


@dataclass(frozen=True, slots=True)
class Row(Node):
    """Horizontal group of siblings: ``<mrow>...</mrow>``."""

    children: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class Matrix(Node):
    """Table body from ``\\begin{matrix}`` and friends.

    children is flat: cell contents interleaved with Ampersand (next cell)
    and NewLine (next row) markers.

    """

    children: tuple[Node, ...]
    column_align: ColumnAlign = ColumnAlign.CENTER


@dataclass(frozen=True, slots=True)
class Ampersand(Node):
    """Cell separator inside a Matrix."""


@dataclass(frozen=True, slots=True)
class NewLine(Node):
    """Row separator inside a Matrix."""
