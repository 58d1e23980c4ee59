"""
texmark — LaTeX-style formulas to presentation MathML

Converts the formula notation used in technical writing (``\\frac``,
``\\sum_{i=0}^n``, ``\\begin{pmatrix}``, ...) into MathML markup that browsers
and document pipelines can display without a typesetting engine. Pure Python,
zero runtime dependencies.

Quick Start:
    >>> from texmark import convert, DisplayStyle
    >>> convert("x^2", DisplayStyle.INLINE)
    '<math xmlns="http://www.w3.org/1998/Math/MathML" display="inline"><msup><mi>x</mi><mn>2</mn></msup></math>'

    >>> # Convert every $...$ and $$...$$ span in a document
    >>> from texmark import replace
    >>> html = replace("The famous $E = m c^2$.")

Pipeline:
    text -> Lexer -> tokens -> Parser -> AST (texmark.nodes) -> MathMLRenderer
"""

from collections.abc import Sequence

from texmark.attributes import Accent, ColumnAlign, DisplayStyle, LineThickness, Variant
from texmark.config import (
    ConvertConfig,
    convert_config_context,
    get_convert_config,
    reset_convert_config,
    set_convert_config,
)
from texmark.document import convert_html, replace
from texmark.errors import (
    InvalidDelimiterCountError,
    LatexError,
    MissingDelimiterError,
    TexmarkError,
    UnexpectedTokenError,
    UnknownCommandError,
    UnknownEnvironmentError,
)
from texmark.lexer import Lexer, classify_command
from texmark.nodes import Node
from texmark.parser import Parser
from texmark.renderers.mathml import MATHML_NAMESPACE, MathMLRenderer
from texmark.renderers.protocol import ASTRenderer
from texmark.tokens import Token, TokenType
from texmark.visitor import BaseVisitor, set_variant, transform

__version__ = "0.1.0"


def parse(latex: str) -> tuple[Node, ...]:
    """Parse formula source into a typed AST.

    Args:
        latex: Formula text without ``$`` delimiters

    Returns:
        Top-level nodes in source order

    Raises:
        LatexError: On unrecoverable structural errors

    Example:
        >>> parse(r"\\frac12")
        (Frac(numerator=Number(value='1'), denominator=Number(value='2'), ...),)
    """
    return Parser(latex).parse()


def render(nodes: Sequence[Node]) -> str:
    """Render parsed nodes to a MathML fragment (no ``<math>`` root)."""
    return MathMLRenderer().render(nodes)


def convert(latex: str, display: DisplayStyle = DisplayStyle.INLINE) -> str:
    """Convert formula source to a complete ``<math>`` element.

    Args:
        latex: Formula text without ``$`` delimiters
        display: Block or inline formula; only affects the root element

    Returns:
        MathML string

    Raises:
        LatexError: On unrecoverable structural errors; nothing is returned
        for a formula that fails

    Example:
        >>> convert(r"\\alpha", DisplayStyle.BLOCK)
        '<math xmlns="http://www.w3.org/1998/Math/MathML" display="block"><mi>α</mi></math>'
    """
    config = get_convert_config()
    nodes = Parser(latex).parse()
    return MathMLRenderer(namespace=config.namespace).render_math(nodes, display)


latex_to_mathml = convert


__all__ = [
    # Main API
    "convert",
    "convert_html",
    "latex_to_mathml",
    "parse",
    "render",
    "replace",
    # Configuration
    "ConvertConfig",
    "convert_config_context",
    "get_convert_config",
    "reset_convert_config",
    "set_convert_config",
    # Attributes
    "Accent",
    "ColumnAlign",
    "DisplayStyle",
    "LineThickness",
    "Variant",
    # Errors
    "InvalidDelimiterCountError",
    "LatexError",
    "MissingDelimiterError",
    "TexmarkError",
    "UnexpectedTokenError",
    "UnknownCommandError",
    "UnknownEnvironmentError",
    # Pipeline
    "ASTRenderer",
    "BaseVisitor",
    "Lexer",
    "MATHML_NAMESPACE",
    "MathMLRenderer",
    "Node",
    "Parser",
    "Token",
    "TokenType",
    "classify_command",
    "set_variant",
    "transform",
    # Version
    "__version__",
]
