"""ASTRenderer protocol — stable interface for AST renderers.

Any renderer that implements ``render(nodes) -> str`` conforms to this protocol.
The built-in ``MathMLRenderer`` is the reference implementation.

Example:
    from texmark.renderers.protocol import ASTRenderer

    def render_formula(renderer: ASTRenderer, nodes: Sequence[Node]) -> str:
        return renderer.render(nodes)

"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from texmark.nodes import Node


@runtime_checkable
class ASTRenderer(Protocol):
    """Protocol for AST renderers.

    Implementations must accept a sequence of top-level nodes and return a
    rendered string. The built-in ``MathMLRenderer`` conforms to this protocol.

    """

    def render(self, nodes: Sequence[Node]) -> str:
        """Render top-level formula nodes to a string.

        Args:
            nodes: The parsed formula, in source order.

        Returns:
            Rendered string output.

        """
        ...
