"""Built-in diagnostic sinks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lengthlint.domain.model.violation import Diagnostic

if TYPE_CHECKING:
    from lengthlint.domain.model.enums import RuleKind
    from lengthlint.domain.model.location import Location


class CollectingSink:
    """Records diagnostics in emission order.

    Mutable during a traversal; snapshot with `diagnostics`.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def emit(self, rule: RuleKind, message: str, location: Location) -> None:
        """Record one diagnostic."""
        self._diagnostics.append(Diagnostic(rule=rule, message=message, location=location))

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Immutable snapshot of recorded diagnostics."""
        return tuple(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)


class LoggingSink:
    """Writes each diagnostic to a logger at ERROR level."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize sink.

        Args:
            logger: Target logger (default: this module's logger)
        """
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    def emit(self, rule: RuleKind, message: str, location: Location) -> None:
        """Log one diagnostic."""
        self._logger.error("%s: [%s] %s", location, rule.value, message)


class FanOutSink:
    """Forwards each diagnostic to several sinks, in order."""

    def __init__(self, *sinks: object) -> None:
        """Initialize sink.

        Args:
            sinks: Objects with emit(rule, message, location)

        Raises:
            ValueError: If no sinks given (FAIL-FIRST)
        """
        if not sinks:
            raise ValueError("FanOutSink requires at least one sink")
        self._sinks = sinks

    def emit(self, rule: RuleKind, message: str, location: Location) -> None:
        """Forward one diagnostic to every sink."""
        for sink in self._sinks:
            sink.emit(rule, message, location)  # type: ignore[attr-defined]
