"""Pre-order tree walker driving enter callbacks on listeners."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from lengthlint.domain.model.syntax import NodeKind

if TYPE_CHECKING:
    from lengthlint.domain.model.syntax import SyntaxNode

logger = logging.getLogger(__name__)

# NodeKind -> listener callback name. OTHER has no callback.
ENTER_METHODS: Mapping[NodeKind, str] = MappingProxyType(
    {kind: f"enter_{kind.value}" for kind in NodeKind if kind is not NodeKind.OTHER}
)


def iter_preorder(root: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield nodes depth-first, each before its children.

    Iterative (explicit stack), so deep trees do not hit the recursion limit.

    Args:
        root: Tree root

    Yields:
        Nodes in pre-order, children in source order
    """
    stack: list[SyntaxNode] = [root]

    while stack:
        node = stack.pop()
        yield node
        # Reverse so the first child is popped first
        stack.extend(reversed(node.children))


class TreeWalker:
    """Walks a syntax tree and notifies listeners on entering each node.

    For every node, listeners are called in registration order, before
    the node's children are visited. A listener is notified only for the
    kinds it has an enter_<kind> method for.
    """

    def __init__(self, *listeners: object) -> None:
        """Initialize walker.

        Args:
            listeners: Objects with enter_<kind>(node) methods

        Raises:
            ValueError: If no listeners given (FAIL-FIRST)
        """
        if not listeners:
            raise ValueError("TreeWalker requires at least one listener")

        self._callbacks: dict[NodeKind, tuple[Callable[[SyntaxNode], None], ...]] = {}
        for kind, method_name in ENTER_METHODS.items():
            bound = tuple(
                getattr(listener, method_name)
                for listener in listeners
                if callable(getattr(listener, method_name, None))
            )
            if bound:
                self._callbacks[kind] = bound

    def walk(self, root: SyntaxNode) -> int:
        """Walk tree from root.

        Args:
            root: Tree root

        Returns:
            Number of nodes visited
        """
        visited = 0
        for node in iter_preorder(root):
            visited += 1
            for callback in self._callbacks.get(node.kind, ()):
                callback(node)

        logger.debug("walked %d nodes", visited)
        return visited
