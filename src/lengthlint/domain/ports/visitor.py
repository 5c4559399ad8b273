"""Node visitor protocol for length verification.

One method per syntax-tree node category. A tree-walk driver calls the
matching method once per node, before descending into its children.
The visitor holds no reference to the driver.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lengthlint.domain.model.syntax import SyntaxNode


class LengthVisitorProtocol(Protocol):
    """Contract for length visitors (pre-order enter callbacks)."""

    def enter_class_name(self, node: SyntaxNode) -> None: ...

    def enter_enum_name(self, node: SyntaxNode) -> None: ...

    def enter_struct_name(self, node: SyntaxNode) -> None: ...

    def enter_protocol_name(self, node: SyntaxNode) -> None: ...

    def enter_element_name(self, node: SyntaxNode) -> None: ...

    def enter_function_name(self, node: SyntaxNode) -> None: ...

    def enter_label_name(self, node: SyntaxNode) -> None: ...

    def enter_setter_name(self, node: SyntaxNode) -> None: ...

    def enter_type_name(self, node: SyntaxNode) -> None: ...

    def enter_typealias_name(self, node: SyntaxNode) -> None: ...

    def enter_variable_name(self, node: SyntaxNode) -> None: ...

    def enter_raw_value_style_enum_case(self, node: SyntaxNode) -> None: ...

    def enter_union_style_enum_case(self, node: SyntaxNode) -> None: ...

    def enter_identifier(self, node: SyntaxNode) -> None: ...

    def enter_class_body(self, node: SyntaxNode) -> None: ...

    def enter_closure_expression(self, node: SyntaxNode) -> None: ...

    def enter_function_body(self, node: SyntaxNode) -> None: ...

    def enter_struct_body(self, node: SyntaxNode) -> None: ...

    def mark_pending_constant(self) -> None:
        """Next identifier visited names a constant declaration."""
        ...

    def mark_pending_variable(self) -> None:
        """Next identifier visited names a variable declaration."""
        ...
