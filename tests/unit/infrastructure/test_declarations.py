"""Tests for infrastructure/declarations.py."""

import pytest

from lengthlint.application.collectors.sinks import CollectingSink
from lengthlint.application.verification.reactor import MaxLengthReactor
from lengthlint.domain.model.configuration import ALL_RULES
from lengthlint.domain.model.syntax import NodeKind, SyntaxNode
from lengthlint.infrastructure.declarations import DeclarationDetector, declared_identifier
from lengthlint.infrastructure.walker import TreeWalker
from tests.factories import (
    make_computed_variable,
    make_constant_declaration,
    make_identifier,
    make_leaf,
    make_limits,
    make_name,
    make_root,
    make_variable_declaration,
)


class MarkRecorder:
    """Records mark_pending_* calls."""

    def __init__(self) -> None:
        self.marks: list[str] = []

    def mark_pending_constant(self) -> None:
        self.marks.append("constant")

    def mark_pending_variable(self) -> None:
        self.marks.append("variable")


def make_wildcard_declaration(callee: str) -> SyntaxNode:
    """`let _ = <callee>()`."""
    return SyntaxNode.branch(
        NodeKind.CONSTANT_DECLARATION,
        make_leaf("let", 1, 1),
        make_leaf("_", 1, 5),
        make_leaf("=", 1, 7),
        make_identifier(callee, 1, 9),
        make_leaf("(", 1, 9 + len(callee)),
        make_leaf(")", 1, 10 + len(callee)),
    )


def check(*statements: SyntaxNode, max_name_length: int = 5) -> list[str]:
    """Walk statements with detector + reactor; return diagnostic lines."""
    sink = CollectingSink()
    reactor = MaxLengthReactor(make_limits(max_name_length=max_name_length), ALL_RULES, sink)
    TreeWalker(DeclarationDetector(reactor), reactor).walk(make_root(*statements))
    return [str(d) for d in sink.diagnostics]


class TestDeclaredIdentifier:
    """Tests for declared_identifier()."""

    def test_constant(self) -> None:
        node = declared_identifier(make_constant_declaration("pi"))
        assert node is not None
        assert node.text == "pi"

    def test_wildcard_has_none(self) -> None:
        assert declared_identifier(make_wildcard_declaration("someVeryLongFunctionName")) is None

    def test_type_annotation_not_a_name(self) -> None:
        # let _: Int = 3
        node = SyntaxNode.branch(
            NodeKind.CONSTANT_DECLARATION,
            make_leaf("let", 1, 1),
            make_leaf("_", 1, 5),
            make_leaf(":", 1, 6),
            make_name(NodeKind.TYPE_NAME, "Int", 1, 8),
            make_leaf("=", 1, 12),
            make_leaf("3", 1, 14),
        )
        assert declared_identifier(node) is None

    def test_attribute_before_keyword_skipped(self) -> None:
        # @objc let id = 1
        node = SyntaxNode.branch(
            NodeKind.CONSTANT_DECLARATION,
            make_leaf("@", 1, 1),
            make_identifier("objc", 1, 2),
            make_leaf("let", 1, 7),
            make_identifier("id", 1, 11),
            make_leaf("=", 1, 14),
            make_leaf("1", 1, 16),
        )
        found = declared_identifier(node)
        assert found is not None
        assert found.text == "id"


class TestDeclarationDetector:
    """Tests for DeclarationDetector."""

    def test_none_visitor_rejected(self) -> None:
        with pytest.raises(TypeError, match="visitor must not be None"):
            DeclarationDetector(None)  # type: ignore[arg-type]

    def test_marks_on_declared_identifier(self) -> None:
        recorder = MarkRecorder()
        TreeWalker(DeclarationDetector(recorder)).walk(make_root(make_constant_declaration("pi")))
        assert recorder.marks == ["constant"]

    def test_no_mark_on_entering_declaration(self) -> None:
        recorder = MarkRecorder()
        DeclarationDetector(recorder).enter_constant_declaration(make_constant_declaration("pi"))
        assert recorder.marks == []

    def test_variable_declaration_marks_variable(self) -> None:
        recorder = MarkRecorder()
        TreeWalker(DeclarationDetector(recorder)).walk(make_root(make_variable_declaration("count")))
        assert recorder.marks == ["variable"]

    def test_variable_with_own_name_not_marked(self) -> None:
        recorder = MarkRecorder()
        TreeWalker(DeclarationDetector(recorder)).walk(make_root(make_computed_variable("total", 1, 3)))
        assert recorder.marks == []

    def test_bare_declaration_not_marked(self) -> None:
        recorder = MarkRecorder()
        node = SyntaxNode.branch(NodeKind.CONSTANT_DECLARATION, make_leaf("let"))
        TreeWalker(DeclarationDetector(recorder)).walk(make_root(node, make_identifier("x", 2, 1)))
        assert recorder.marks == []


class TestWithReactor:
    """Detector registered ahead of the reactor."""

    def test_wildcard_call_target_not_reported(self) -> None:
        assert check(make_wildcard_declaration("someVeryLongFunctionName"), max_name_length=10) == []

    def test_wildcard_does_not_mark_following_reference(self) -> None:
        diagnostics = check(
            make_wildcard_declaration("f"),
            make_identifier("someVeryLongReference", 2, 1),
        )
        assert diagnostics == []

    def test_attribute_identifier_not_reported(self) -> None:
        node = SyntaxNode.branch(
            NodeKind.CONSTANT_DECLARATION,
            make_leaf("@", 1, 1),
            make_identifier("discardableResult", 1, 2),
            make_leaf("let", 2, 1),
            make_identifier("id", 2, 5),
        )
        assert check(node) == []

    def test_declared_name_reported(self) -> None:
        assert check(make_constant_declaration("longName")) == [
            "1:5: error: [max-name-length] Constant name exceeds character limit (8/5)"
        ]
