"""Traversal reactor: per-node length verification.

Receives one enter callback per node, in pre-order, from an external
tree walker, and reports violations through a DiagnosticEmitter.

Declaration context:
    Whether an identifier names a constant or a variable is known only to
    the enclosing declaration node, which is entered before the identifier.
    A declaration-detection collaborator calls mark_pending_constant() or
    mark_pending_variable() right before the declared identifier reaches
    this reactor; that identifier callback consumes the mark. An identifier
    without a mark is a reference, not a declaration name, and is ignored.

One reactor per traversal. Not thread-safe, not re-entrant.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lengthlint.application.verification.emitter import DiagnosticEmitter
from lengthlint.application.verification.evaluator import (
    construct_length,
    construct_too_long,
    name_length,
    name_too_long,
)
from lengthlint.application.verification.rule_table import BODY_RULES, NAME_RULES
from lengthlint.domain.model.enums import (
    ConstructCategory,
    MessageTemplate,
    PendingDeclaration,
    RuleKind,
)
from lengthlint.domain.model.syntax import NodeKind, span_of

if TYPE_CHECKING:
    from pathlib import Path

    from lengthlint.domain.model.limits import LengthLimits
    from lengthlint.domain.model.syntax import SyntaxNode
    from lengthlint.domain.ports.sink import DiagnosticSinkProtocol

logger = logging.getLogger(__name__)


class MaxLengthReactor:
    """Verifies maximum lengths of names and construct bodies.

    Implements LengthVisitorProtocol.

    Attributes:
        _limits: Configured limits (shared, read-only)
        _enabled_rules: Rules to check (shared, read-only)
        _emitter: Formats and forwards violations
        _pending: Declaration kind awaiting its identifier, None if none
    """

    def __init__(
        self,
        limits: LengthLimits,
        enabled_rules: frozenset[RuleKind],
        sink: DiagnosticSinkProtocol,
        file: Path | None = None,
    ) -> None:
        """Initialize reactor.

        Args:
            limits: Configured limits
            enabled_rules: Rules to check; all others are no-ops
            sink: Destination of diagnostics
            file: Source file attributed to reported locations

        Raises:
            TypeError: If limits or enabled_rules is None
        """
        if limits is None:
            raise TypeError("limits must not be None")
        if enabled_rules is None:
            raise TypeError("enabled_rules must not be None")

        self._limits = limits
        self._enabled_rules = enabled_rules
        self._emitter = DiagnosticEmitter(sink, file)
        self._pending: PendingDeclaration | None = None

    # -------------------------------------------------------------------------
    # Declaration context
    # -------------------------------------------------------------------------

    def mark_pending_constant(self) -> None:
        """Next identifier visited names a constant declaration."""
        self._pending = PendingDeclaration.CONSTANT

    def mark_pending_variable(self) -> None:
        """Next identifier visited names a variable declaration."""
        self._pending = PendingDeclaration.VARIABLE

    @property
    def pending(self) -> PendingDeclaration | None:
        """Declaration kind awaiting its identifier."""
        return self._pending

    @property
    def pending_constant_name(self) -> bool:
        """True if the next identifier names a constant."""
        return self._pending is PendingDeclaration.CONSTANT

    @property
    def pending_variable_name(self) -> bool:
        """True if the next identifier names a variable."""
        return self._pending is PendingDeclaration.VARIABLE

    # -------------------------------------------------------------------------
    # Name-bearing nodes
    # -------------------------------------------------------------------------

    def enter_class_name(self, node: SyntaxNode) -> None:
        self._enter_name(NodeKind.CLASS_NAME, node)

    def enter_enum_name(self, node: SyntaxNode) -> None:
        self._enter_name(NodeKind.ENUM_NAME, node)

    def enter_struct_name(self, node: SyntaxNode) -> None:
        self._enter_name(NodeKind.STRUCT_NAME, node)

    def enter_protocol_name(self, node: SyntaxNode) -> None:
        self._enter_name(NodeKind.PROTOCOL_NAME, node)

    def enter_element_name(self, node: SyntaxNode) -> None:
        self._enter_name(NodeKind.ELEMENT_NAME, node)

    def enter_function_name(self, node: SyntaxNode) -> None:
        self._enter_name(NodeKind.FUNCTION_NAME, node)

    def enter_label_name(self, node: SyntaxNode) -> None:
        self._enter_name(NodeKind.LABEL_NAME, node)

    def enter_setter_name(self, node: SyntaxNode) -> None:
        self._enter_name(NodeKind.SETTER_NAME, node)

    def enter_type_name(self, node: SyntaxNode) -> None:
        self._enter_name(NodeKind.TYPE_NAME, node)

    def enter_typealias_name(self, node: SyntaxNode) -> None:
        self._enter_name(NodeKind.TYPEALIAS_NAME, node)

    def enter_variable_name(self, node: SyntaxNode) -> None:
        self._enter_name(NodeKind.VARIABLE_NAME, node)

    def enter_raw_value_style_enum_case(self, node: SyntaxNode) -> None:
        self._enter_name(NodeKind.RAW_VALUE_STYLE_ENUM_CASE, node)

    def enter_union_style_enum_case(self, node: SyntaxNode) -> None:
        self._enter_name(NodeKind.UNION_STYLE_ENUM_CASE, node)

    def enter_identifier(self, node: SyntaxNode) -> None:
        """Verify identifier as a declared name if a declaration is pending.

        Consumes the pending mark: it never survives two identifiers.
        """
        pending, self._pending = self._pending, None

        match pending:
            case PendingDeclaration.CONSTANT:
                self._verify_name(ConstructCategory.CONSTANT, node)
            case PendingDeclaration.VARIABLE:
                self._verify_name(ConstructCategory.VARIABLE, node)
            case None:
                pass  # reference, not a declaration name

    # -------------------------------------------------------------------------
    # Body-bearing nodes
    # -------------------------------------------------------------------------

    def enter_class_body(self, node: SyntaxNode) -> None:
        self._enter_body(NodeKind.CLASS_BODY, node)

    def enter_closure_expression(self, node: SyntaxNode) -> None:
        self._enter_body(NodeKind.CLOSURE_EXPRESSION, node)

    def enter_function_body(self, node: SyntaxNode) -> None:
        self._enter_body(NodeKind.FUNCTION_BODY, node)

    def enter_struct_body(self, node: SyntaxNode) -> None:
        self._enter_body(NodeKind.STRUCT_BODY, node)

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    def _enter_name(self, kind: NodeKind, node: SyntaxNode) -> None:
        """Verify a name-bearing node (or its reportable sub-node)."""
        entry = NAME_RULES[kind]
        target: SyntaxNode | None = node
        if entry.target is not None:
            target = node.first_child(entry.target)
            if target is None:
                logger.debug(
                    "%s at %s:%s has no %s child, skipped",
                    kind.value,
                    node.start.line,
                    node.start.column,
                    entry.target.value,
                )
                return
        self._verify_name(entry.category, target)

    def _enter_body(self, kind: NodeKind, node: SyntaxNode) -> None:
        """Verify a body-bearing node if its rule is enabled."""
        entry = BODY_RULES[kind]
        if entry.rule in self._enabled_rules:
            self._verify_construct(entry.rule, entry.category, entry.limit(self._limits), node)

    def _verify_name(self, category: ConstructCategory, node: SyntaxNode) -> None:
        if RuleKind.MAX_NAME_LENGTH not in self._enabled_rules:
            return
        limit = self._limits.max_name_length
        span = span_of(node)
        if name_too_long(span, limit):
            self._emitter.report(
                RuleKind.MAX_NAME_LENGTH,
                category,
                name_length(span),
                limit,
                MessageTemplate.CHARACTER_LIMIT,
                span.start,
            )

    def _verify_construct(
        self,
        rule: RuleKind,
        category: ConstructCategory,
        limit: int,
        node: SyntaxNode,
    ) -> None:
        span = span_of(node, with_text=False)
        if construct_too_long(span, limit):
            self._emitter.report(
                rule,
                category,
                construct_length(span),
                limit,
                MessageTemplate.LINE_LIMIT,
                span.start,
            )
