"""Diagnostic emitter: Violation -> (rule, message, location) -> sink."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lengthlint.domain.model.violation import Violation

if TYPE_CHECKING:
    from pathlib import Path

    from lengthlint.domain.model.enums import ConstructCategory, MessageTemplate, RuleKind
    from lengthlint.domain.model.location import Location
    from lengthlint.domain.ports.sink import DiagnosticSinkProtocol


class DiagnosticEmitter:
    """Formats violations and forwards them to a sink.

    No buffering, no deduplication. Every call reaches the sink
    synchronously. Failures raised by the sink propagate to the caller.
    """

    def __init__(self, sink: DiagnosticSinkProtocol, file: Path | None = None) -> None:
        """Initialize emitter.

        Args:
            sink: Destination of diagnostics
            file: Source file attributed to every location (optional)

        Raises:
            TypeError: If sink is None
        """
        if sink is None:
            raise TypeError("sink must not be None")
        self._sink = sink
        self._file = file

    def report(
        self,
        rule: RuleKind,
        category: ConstructCategory,
        measured: int,
        limit: int,
        template: MessageTemplate,
        location: Location,
    ) -> Violation:
        """Format one violation and hand it to the sink.

        Message shape: "<label><template phrase> (<measured>/<limit>)".

        Args:
            rule: Violated rule
            category: Construct category (builds the label)
            measured: Measured characters or lines
            limit: Configured limit
            template: Character-limit or line-limit phrase
            location: Start of the violating node's first token

        Returns:
            The reported Violation
        """
        if self._file is not None and location.file is None:
            location = location.with_file(self._file)

        violation = Violation(
            rule=rule,
            category=category,
            measured=measured,
            limit=limit,
            template=template,
            location=location,
        )
        self._sink.emit(rule, violation.message, location)
        return violation
