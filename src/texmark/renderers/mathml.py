"""MathML renderer using StringBuilder pattern.

Renders typed AST to presentation MathML with O(n) performance using
StringBuilder. Rendering never fails: a node kind without a rule is written
as a visible ``[PARSE ERROR: ...]`` text element so the rest of the formula
still comes out.

Matrix bodies arrive flat (cells interleaved with Ampersand/NewLine
markers); this module is the only place they are regrouped into nested
``<mtr>``/``<mtd>`` elements.

Thread Safety:
All per-render state lives in the StringBuilder created for each render()
call. Multiple threads can safely share a single MathMLRenderer instance.
"""

from collections.abc import Sequence

from texmark.attributes import DisplayStyle, Variant
from texmark.nodes import (
    Ampersand,
    Fenced,
    Frac,
    Function,
    Letter,
    Matrix,
    NewLine,
    Node,
    Number,
    Operator,
    OtherOperator,
    Overset,
    OverOp,
    Row,
    SizedParen,
    Slashed,
    Space,
    Sqrt,
    StretchedOp,
    Style,
    SubSup,
    Subscript,
    Superscript,
    Text,
    Under,
    UnderOp,
    UnderOver,
    Underset,
    Undefined,
)
from texmark.stringbuilder import StringBuilder
from texmark.utils.logger import get_logger

logger = get_logger(__name__)

MATHML_NAMESPACE = "http://www.w3.org/1998/Math/MathML"

# Combining long solidus overlay for \slashed
SLASH_OVERLAY = "&#x0338;"


class MathMLRenderer:
    """Render texmark AST nodes to presentation MathML.

    Usage:
        >>> from texmark.nodes import Letter, Number, Superscript
        >>> MathMLRenderer().render([Superscript(Letter("x"), Number("2"))])
        '<msup><mi>x</mi><mn>2</mn></msup>'

    """

    __slots__ = ("_namespace",)

    def __init__(self, *, namespace: str = MATHML_NAMESPACE) -> None:
        """Initialize renderer.

        Args:
            namespace: ``xmlns`` written on the root ``<math>`` element
        """
        self._namespace = namespace

    def render(self, nodes: Sequence[Node]) -> str:
        """Render top-level nodes to a MathML fragment (no ``<math>`` root).

        Args:
            nodes: Parsed formula nodes in source order

        Returns:
            Concatenated markup of every node
        """
        sb = StringBuilder()
        for node in nodes:
            self._render_node(node, sb)
        return sb.build()

    def render_math(self, nodes: Sequence[Node], display: DisplayStyle) -> str:
        """Render nodes wrapped in a ``<math>`` root element.

        Args:
            nodes: Parsed formula nodes in source order
            display: Block or inline formula

        Returns:
            Complete ``<math ...>...</math>`` element
        """
        sb = StringBuilder()
        sb.open("math", f' xmlns="{self._namespace}" display="{display}"')
        for node in nodes:
            self._render_node(node, sb)
        sb.close("math")
        return sb.build()

    # =========================================================================
    # Node dispatch
    # =========================================================================

    def _render_node(self, node: Node, sb: StringBuilder) -> None:
        """Render a single node."""
        match node:
            case Number(value=value):
                sb.leaf("mn", value)
            case Letter():
                self._render_letter(node, sb)
            case Operator(op="∂"):
                sb.leaf("mo", "∂", ' mathvariant="italic"')
            case Operator(op=op) | OtherOperator(op=op):
                sb.leaf("mo", op)
            case Function(name=name):
                sb.leaf("mi", name)
            case Space(width=width):
                sb.append(f'<mspace width="{width:g}em"/>')
            case Subscript(target=target, sub=sub):
                self._render_element("msub", (target, sub), sb)
            case Superscript(target=target, sup=sup):
                self._render_element("msup", (target, sup), sb)
            case SubSup(target=target, sub=sub, sup=sup):
                self._render_element("msubsup", (target, sub, sup), sb)
            case OverOp(op=op, accent=accent, target=target):
                sb.open("mover")
                self._render_node(target, sb)
                sb.leaf("mo", op, f' accent="{accent}"').close("mover")
            case UnderOp(op=op, accent=accent, target=target):
                sb.open("munder")
                self._render_node(target, sb)
                sb.leaf("mo", op, f' accent="{accent}"').close("munder")
            case Overset(over=over, target=target):
                self._render_element("mover", (target, over), sb)
            case Underset(under=under, target=target) | Under(target=target, under=under):
                self._render_element("munder", (target, under), sb)
            case UnderOver(target=target, under=under, over=over):
                self._render_element("munderover", (target, under, over), sb)
            case Sqrt(degree=None, content=content):
                self._render_element("msqrt", (content,), sb)
            case Sqrt(degree=degree, content=content):
                self._render_element("mroot", (content, degree), sb)
            case Frac(numerator=num, denominator=den, line_thickness=lt):
                self._render_element("mfrac", (num, den), sb, str(lt))
            case Row(children=children):
                self._render_element("mrow", children, sb)
            case Fenced():
                self._render_fenced(node, sb)
            case StretchedOp(stretchy=stretchy, op=op):
                sb.leaf("mo", op, f' stretchy="{str(stretchy).lower()}"')
            case SizedParen(size=size, paren=paren):
                sb.open("mrow").leaf("mo", paren, f' maxsize="{size}" minsize="{size}"')
                sb.close("mrow")
            case Slashed():
                self._render_slashed(node, sb)
            case Matrix():
                self._render_matrix(node, sb)
            case Text(content=content):
                sb.leaf("mtext", content)
            case Style(display=None, content=content):
                self._render_element("mstyle", (content,), sb)
            case Style(display=display, content=content):
                attrs = f' displaystyle="{display.displaystyle}"'
                self._render_element("mstyle", (content,), sb, attrs)
            case Undefined(description=description):
                self._render_error(description, sb)
            case _:
                logger.debug("No MathML rule for %r; writing error placeholder", node)
                self._render_error(repr(node), sb)

    def _render_element(
        self, tag: str, children: Sequence[Node], sb: StringBuilder, attrs: str = ""
    ) -> None:
        sb.open(tag, attrs)
        for child in children:
            self._render_node(child, sb)
        sb.close(tag)

    # =========================================================================
    # Leaves
    # =========================================================================

    def _render_letter(self, letter: Letter, sb: StringBuilder) -> None:
        if letter.variant is Variant.ITALIC:
            sb.leaf("mi", letter.char)
        else:
            sb.leaf("mi", letter.char, f' mathvariant="{letter.variant}"')

    def _render_slashed(self, slashed: Slashed, sb: StringBuilder) -> None:
        """Overlay a slash on a letter or operator; render anything else unchanged."""
        match slashed.content:
            case Letter(char=char, variant=variant):
                sb.leaf("mi", char, f' mathvariant="{variant}"', suffix=SLASH_OVERLAY)
            case Operator(op=op):
                sb.leaf("mo", op, suffix=SLASH_OVERLAY)
            case content:
                self._render_node(content, sb)

    def _render_error(self, description: str, sb: StringBuilder) -> None:
        sb.leaf("mtext", f"[PARSE ERROR: {description}]")

    # =========================================================================
    # Containers
    # =========================================================================

    def _render_fenced(self, fenced: Fenced, sb: StringBuilder) -> None:
        sb.open("mrow").leaf("mo", fenced.open, ' stretchy="true" form="prefix"')
        self._render_node(fenced.content, sb)
        sb.leaf("mo", fenced.close, ' stretchy="true" form="postfix"').close("mrow")

    def _render_matrix(self, matrix: Matrix, sb: StringBuilder) -> None:
        """Regroup the flat marker list into rows and cells.

        Ampersand closes the current cell and opens the next one; NewLine
        closes the current row and, unless it is the last child, opens the
        next one. The open cell and row are closed at the end.
        """
        sb.open("mtable", str(matrix.column_align)).open("mtr").open("mtd")
        last = len(matrix.children) - 1
        row_open = True
        for i, child in enumerate(matrix.children):
            match child:
                case NewLine():
                    sb.close("mtd").close("mtr")
                    row_open = i < last
                    if row_open:
                        sb.open("mtr").open("mtd")
                case Ampersand():
                    sb.close("mtd").open("mtd")
                case _:
                    self._render_node(child, sb)
        if row_open:
            sb.close("mtd").close("mtr")
        sb.close("mtable")
