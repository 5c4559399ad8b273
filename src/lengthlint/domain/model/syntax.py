"""Syntax tree model delivered by an external parser.

The tree mirrors a parse tree: every node knows its first and last token,
leaves hold exactly one token, and a node's text is the concatenation of
its leaves (whitespace and comments are not part of the tree).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from lengthlint.domain.model.span import SourceSpan

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class NodeKind(Enum):
    """Syntax-tree node categories known to the length rules.

    Values are snake_case grammar rule names. Anything else is OTHER.
    """

    # Name-bearing nodes
    CLASS_NAME = "class_name"
    ENUM_NAME = "enum_name"
    STRUCT_NAME = "struct_name"
    PROTOCOL_NAME = "protocol_name"
    ELEMENT_NAME = "element_name"
    FUNCTION_NAME = "function_name"
    LABEL_NAME = "label_name"
    SETTER_NAME = "setter_name"
    TYPE_NAME = "type_name"
    TYPEALIAS_NAME = "typealias_name"
    VARIABLE_NAME = "variable_name"
    RAW_VALUE_STYLE_ENUM_CASE = "raw_value_style_enum_case"
    UNION_STYLE_ENUM_CASE = "union_style_enum_case"
    ENUM_CASE_NAME = "enum_case_name"
    IDENTIFIER = "identifier"

    # Body-bearing nodes
    CLASS_BODY = "class_body"
    CLOSURE_EXPRESSION = "closure_expression"
    FUNCTION_BODY = "function_body"
    STRUCT_BODY = "struct_body"

    # Declarations (consumed by declaration detection)
    CONSTANT_DECLARATION = "constant_declaration"
    VARIABLE_DECLARATION = "variable_declaration"

    OTHER = "other"

    @classmethod
    def parse(cls, name: str) -> NodeKind:
        """Resolve a grammar rule name to NodeKind.

        Accepts snake_case ("class_body") and camelCase ("classBody").
        Unknown names map to OTHER: the length rules ignore them.
        """
        snake = _CAMEL_BOUNDARY.sub("_", name.strip()).lower()
        try:
            return cls(snake)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True, slots=True)
class Token:
    """Single lexical token.

    Attributes:
        text: Token text as spelled in source
        line: Line number (1-based)
        column: Column number (1-based)
    """

    text: str
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column <= 0:
            raise ValueError(f"column must be > 0, got {self.column}")

    @property
    def position(self) -> tuple[int, int]:
        """(line, column) for ordering."""
        return (self.line, self.column)


@dataclass(frozen=True, slots=True)
class SyntaxNode:
    """Immutable syntax-tree node.

    Attributes:
        kind: Node category
        start: First token covered by the node
        stop: Last token covered by the node
        children: Child nodes in source order
    """

    kind: NodeKind
    start: Token
    stop: Token
    children: tuple[SyntaxNode, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.kind, NodeKind):
            raise TypeError(f"kind must be NodeKind, got {type(self.kind).__name__}")
        if self.stop.position < self.start.position:
            raise ValueError(
                f"stop token {self.stop.position} precedes start token {self.start.position}"
            )
        if not self.children and self.start != self.stop:
            raise ValueError("leaf node must cover exactly one token")

    @classmethod
    def leaf(cls, kind: NodeKind, token: Token) -> SyntaxNode:
        """Create a single-token node."""
        return cls(kind=kind, start=token, stop=token)

    @classmethod
    def branch(cls, kind: NodeKind, *children: SyntaxNode) -> SyntaxNode:
        """Create a node spanning its children.

        Raises:
            ValueError: If no children given (FAIL-FIRST)
        """
        if not children:
            raise ValueError(f"{kind.value} branch requires at least one child")
        return cls(kind=kind, start=children[0].start, stop=children[-1].stop, children=children)

    @property
    def is_leaf(self) -> bool:
        """True if node holds a single token."""
        return not self.children

    @property
    def text(self) -> str:
        """Concatenated text of all leaf tokens.

        Iterative, so deeply nested nodes do not hit the recursion limit.
        """
        if self.is_leaf:
            return self.start.text
        parts: list[str] = []
        stack: list[SyntaxNode] = [self]
        while stack:
            node = stack.pop()
            if node.children:
                stack.extend(reversed(node.children))
            else:
                parts.append(node.start.text)
        return "".join(parts)

    def first_child(self, kind: NodeKind) -> SyntaxNode | None:
        """Find first direct child of given kind."""
        for child in self.children:
            if child.kind is kind:
                return child
        return None

    def has_child(self, kind: NodeKind) -> bool:
        """Check for a direct child of given kind."""
        return self.first_child(kind) is not None


def span_of(node: SyntaxNode, *, with_text: bool = True) -> SourceSpan:
    """Derive the node's SourceSpan.

    Args:
        node: Node to measure
        with_text: Concatenate the covered text. Line-only spans leave it empty.
    """
    return SourceSpan(
        start_line=node.start.line,
        start_column=node.start.column,
        stop_line=node.stop.line,
        text=node.text if with_text else "",
    )
