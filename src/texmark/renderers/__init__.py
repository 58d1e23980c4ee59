"""texmark renderers.

Renderers convert typed AST nodes into output formats.

Available Renderers:
- MathMLRenderer: Renders AST to presentation MathML using StringBuilder

Thread Safety:
All renderers use StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from texmark.renderers.mathml import MathMLRenderer
from texmark.renderers.protocol import ASTRenderer

__all__ = ["ASTRenderer", "MathMLRenderer"]
