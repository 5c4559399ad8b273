"""Diagnostic sink protocol.

Users route diagnostics anywhere by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lengthlint.domain.model.enums import RuleKind
    from lengthlint.domain.model.location import Location


class DiagnosticSinkProtocol(Protocol):
    """Contract for diagnostic sinks.

    Receives one call per violation, in traversal order.
    Severity policy, rendering, aggregation and deduplication belong here,
    not in the verification core.

    Example:
        class PrintSink:
            def emit(self, rule: RuleKind, message: str, location: Location) -> None:
                print(f"{location}: [{rule.value}] {message}")
    """

    def emit(self, rule: RuleKind, message: str, location: Location) -> None:
        """Accept one diagnostic.

        Args:
            rule: Violated rule
            message: Human-readable message
            location: Start of the violating construct
        """
        ...
