"""Tests for application/verification/emitter.py."""

from pathlib import Path

import pytest

from lengthlint.application.collectors.sinks import CollectingSink
from lengthlint.application.verification.emitter import DiagnosticEmitter
from lengthlint.domain.model.enums import ConstructCategory, MessageTemplate, RuleKind
from lengthlint.domain.model.location import Location


class TestDiagnosticEmitter:
    """Tests for DiagnosticEmitter.report()."""

    def test_forwards_triple_to_sink(self) -> None:
        sink = CollectingSink()
        emitter = DiagnosticEmitter(sink)

        emitter.report(
            RuleKind.MAX_NAME_LENGTH,
            ConstructCategory.CLASS,
            11,
            5,
            MessageTemplate.CHARACTER_LIMIT,
            Location(line=1, column=7),
        )

        (diagnostic,) = sink.diagnostics
        assert diagnostic.rule is RuleKind.MAX_NAME_LENGTH
        assert diagnostic.message == "Class name exceeds character limit (11/5)"
        assert diagnostic.location == Location(line=1, column=7)

    def test_line_limit_message(self) -> None:
        sink = CollectingSink()
        DiagnosticEmitter(sink).report(
            RuleKind.MAX_CLOSURE_LENGTH,
            ConstructCategory.CLOSURE,
            4,
            3,
            MessageTemplate.LINE_LIMIT,
            Location(line=2, column=20),
        )
        assert sink.diagnostics[0].message == "Closure exceeds line limit (4/3)"

    def test_returns_violation(self) -> None:
        violation = DiagnosticEmitter(CollectingSink()).report(
            RuleKind.MAX_STRUCT_LENGTH,
            ConstructCategory.STRUCT,
            12,
            10,
            MessageTemplate.LINE_LIMIT,
            Location(line=1, column=1),
        )
        assert violation.measured == 12
        assert violation.limit == 10

    def test_attributes_file(self) -> None:
        sink = CollectingSink()
        DiagnosticEmitter(sink, Path("A.swift")).report(
            RuleKind.MAX_NAME_LENGTH,
            ConstructCategory.TYPE,
            6,
            5,
            MessageTemplate.CHARACTER_LIMIT,
            Location(line=3, column=4),
        )
        assert sink.diagnostics[0].location == Location(line=3, column=4, file=Path("A.swift"))

    def test_no_deduplication(self) -> None:
        sink = CollectingSink()
        emitter = DiagnosticEmitter(sink)
        for _ in range(2):
            emitter.report(
                RuleKind.MAX_NAME_LENGTH,
                ConstructCategory.LABEL,
                6,
                5,
                MessageTemplate.CHARACTER_LIMIT,
                Location(line=1, column=1),
            )
        assert len(sink) == 2

    def test_none_sink_raises(self) -> None:
        with pytest.raises(TypeError, match="sink must not be None"):
            DiagnosticEmitter(None)  # type: ignore[arg-type]
