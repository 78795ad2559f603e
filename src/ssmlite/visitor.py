"""Tree visitor and transformer for ssmlite.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen trees. Entity decoding of a parsed
document is itself a transform (see decode_tree).

Example, collect all <break> elements:

    class BreakCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.breaks: list[Element] = []

        def visit_element(self, node: Element) -> None:
            if node.name == "break":
                self.breaks.append(node)

    collector = BreakCollector()
    collector.visit(doc)

Example, drop every <audio> element:

    def drop_audio(node: Node) -> Node | None:
        if isinstance(node, Element) and node.name == "audio":
            return None
        return node

    new_doc = transform(doc, drop_audio)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. The transform function
    is pure and safe to call from any thread.

"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable

from ssmlite.entities import decode_entities
from ssmlite.nodes import Element, Node, Text


class BaseVisitor[T]:
    """Base tree visitor with match-based dispatch.

    Subclass and override ``visit_text`` / ``visit_element``. Unhandled node
    types fall through to ``visit_default``. Children are walked
    automatically after the ``visit_*`` call.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method.

        Walks children automatically after the visit method returns.

        """
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method.

        Default returns None (suitable for ``BaseVisitor[None]``).

        """
        return None  # type: ignore[return-value]

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_element(self, node: Element) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Node) -> T:
        match node:
            case Text():
                return self.visit_text(node)
            case Element():
                return self.visit_element(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        match node:
            case Element(children=children):
                for child in children:
                    self.visit(child)
            case _:
                pass  # Text is a leaf


def transform(root: Node, fn: Callable[[Node], Node | None]) -> Node:
    """Apply a function to every node in the tree, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children.

    Return ``None`` from ``fn`` to remove a node from the tree. The root
    cannot be removed; returning None for it raises TypeError.

    Since all nodes are frozen dataclasses, this produces a new immutable tree.
    The original tree is untouched.

    Args:
        root: The node to transform (usually the document root).
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        The transformed root.

    """
    result = _transform_node(root, fn)
    if result is None:
        msg = "transform fn must return a node for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    match node:
        case Element(children=children):
            # Plain loop: one stack frame per nesting level
            new_children_list: list[Node] = []
            for c in children:
                result = _transform_node(c, fn)
                if result is not None:
                    new_children_list.append(result)
            new_children = tuple(new_children_list)
            if len(new_children) != len(children) or any(
                new is not old for new, old in zip(new_children, children)
            ):
                node = dataclasses.replace(node, children=new_children)
        case _:
            pass
    return fn(node)


def _decode_text(node: Node) -> Node:
    match node:
        case Text(content=content):
            return Text(decode_entities(content))
        case _:
            return node


def decode_tree[N: (Text, Element)](root: N) -> N:
    """Return a copy of ``root`` with entities decoded in every Text node.

    Element names and attribute values are never touched.
    """
    return transform(root, _decode_text)  # type: ignore[return-value]
