"""AST Visitor and Transformer for texmark.

Provides a base visitor class with name-based dispatch and an immutable
transform function for rewriting frozen ASTs.

Example — collect all identifiers:

    class LetterCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.letters: list[str] = []

        def visit_letter(self, node: Letter) -> None:
            self.letters.append(node.char)

    collector = LetterCollector()
    collector.visit(tree)

Example — upright every identifier:

    def upright(node: Node) -> Node:
        if isinstance(node, Letter):
            return dataclasses.replace(node, variant=Variant.NORMAL)
        return node

    new_tree = transform(tree, upright)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. The transform function
    is pure — safe to call from any thread.

"""

import dataclasses
import re
from collections.abc import Callable, Iterator

from texmark.attributes import Variant
from texmark.nodes import Letter, Node

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _method_name(node_type: type[Node]) -> str:
    return "visit_" + _CAMEL_BOUNDARY.sub("_", node_type.__name__).lower()


def iter_children(node: Node) -> Iterator[Node]:
    """Yield the direct children of a node in field order."""
    for f in dataclasses.fields(node):
        value = getattr(node, f.name)
        if isinstance(value, Node):
            yield value
        elif isinstance(value, tuple):
            yield from value


class BaseVisitor[T]:
    """Base AST visitor.

    Subclass and define ``visit_<snake_case_node_name>`` methods for the node
    types you care about (``visit_letter``, ``visit_sub_sup``, ...).
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the matching ``visit_*`` method, then walk children."""
        method = getattr(self, _method_name(type(node)), self.visit_default)
        result = method(node)
        for child in iter_children(node):
            self.visit(child)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method.

        Override this for catch-all behavior. Default returns None
        (suitable for ``BaseVisitor[None]``).

        """
        return None  # type: ignore[return-value]


def transform(node: Node, fn: Callable[[Node], Node]) -> Node:
    """Apply a function to every node in a subtree, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children.

    Since all nodes are frozen dataclasses, this produces a new immutable tree.
    The original tree is untouched, and unchanged subtrees are reused as-is.

    Args:
        node: Root of the subtree to transform.
        fn: Function that receives a node and returns a (possibly new) node.

    Returns:
        The transformed subtree.

    """
    return fn(_transform_children(node, fn))


def _transform_children(node: Node, fn: Callable[[Node], Node]) -> Node:
    """Produce a new node with children transformed."""
    changes: dict[str, object] = {}
    for f in dataclasses.fields(node):
        value = getattr(node, f.name)
        if isinstance(value, Node):
            new_value = transform(value, fn)
            if new_value is not value:
                changes[f.name] = new_value
        elif isinstance(value, tuple) and value and isinstance(value[0], Node):
            new_children = tuple(transform(child, fn) for child in value)
            if new_children != value:
                changes[f.name] = new_children
    if changes:
        return dataclasses.replace(node, **changes)
    return node


def set_variant(node: Node, variant: Variant) -> Node:
    """Replace the font variant of every letter in a subtree.

    Shape-preserving: only Letter leaves change; every other node is
    rebuilt with the same kind and attributes.

    Example:
        >>> set_variant(Row((Letter("x"), Number("1"))), Variant.BOLD)
        Row(children=(Letter(char='x', variant=<Variant.BOLD: 'bold'>), Number(value='1')))

    """

    def _restyle(n: Node) -> Node:
        if isinstance(n, Letter) and n.variant is not variant:
            return dataclasses.replace(n, variant=variant)
        return n

    return transform(node, _restyle)
