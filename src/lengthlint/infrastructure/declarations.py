"""Declaration detection: marks constant/variable names for the reactor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lengthlint.domain.model.enums import PendingDeclaration
from lengthlint.domain.model.syntax import NodeKind
from lengthlint.infrastructure.walker import iter_preorder

if TYPE_CHECKING:
    from lengthlint.domain.model.syntax import SyntaxNode
    from lengthlint.domain.ports.visitor import LengthVisitorProtocol

_KEYWORDS = frozenset({"let", "var"})

# Tokens ending the name part of `let <pattern>: Type = value`
_PATTERN_END = frozenset({"=", ":", "{"})


def declared_identifier(declaration: SyntaxNode) -> SyntaxNode | None:
    """Find the identifier a constant or variable declaration introduces.

    Scans the leaves after the `let`/`var` keyword up to the type
    annotation, initializer or accessor block.

    Args:
        declaration: constant_declaration or variable_declaration node

    Returns:
        The declared identifier leaf, None for patterns without one (`let _ = f()`)
    """
    leaves = [node for node in iter_preorder(declaration) if node.is_leaf]
    start = next((i + 1 for i, leaf in enumerate(leaves) if leaf.start.text in _KEYWORDS), 0)

    for leaf in leaves[start:]:
        if leaf.start.text in _PATTERN_END:
            return None
        if leaf.kind is NodeKind.IDENTIFIER:
            return leaf
    return None


class DeclarationDetector:
    """Tree listener that announces declared names to a length visitor.

    On entering a constant or variable declaration, it locates the declared
    identifier. When the walk reaches that identifier, it marks the visitor
    right before the visitor's own identifier callback, so the mark is
    consumed by that identifier and no other. Register the detector ahead of
    the visitor on the walker.

    A variable declaration with its own variable_name child (computed
    property, observed property) is not tracked: that child is verified
    directly and marking would report the name twice.
    """

    def __init__(self, visitor: LengthVisitorProtocol) -> None:
        """Initialize detector.

        Args:
            visitor: Visitor receiving mark_pending_* calls

        Raises:
            TypeError: If visitor is None
        """
        if visitor is None:
            raise TypeError("visitor must not be None")
        self._visitor = visitor
        # id(identifier leaf) -> declaration kind, for the current walk
        self._targets: dict[int, PendingDeclaration] = {}

    def enter_constant_declaration(self, node: SyntaxNode) -> None:
        self._track(node, PendingDeclaration.CONSTANT)

    def enter_variable_declaration(self, node: SyntaxNode) -> None:
        if node.has_child(NodeKind.VARIABLE_NAME):
            return
        self._track(node, PendingDeclaration.VARIABLE)

    def enter_identifier(self, node: SyntaxNode) -> None:
        match self._targets.pop(id(node), None):
            case PendingDeclaration.CONSTANT:
                self._visitor.mark_pending_constant()
            case PendingDeclaration.VARIABLE:
                self._visitor.mark_pending_variable()
            case None:
                pass

    def _track(self, declaration: SyntaxNode, pending: PendingDeclaration) -> None:
        identifier = declared_identifier(declaration)
        if identifier is not None:
            self._targets[id(identifier)] = pending
