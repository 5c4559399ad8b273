"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lengthlint.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Protocol for check result reporters.

    Stream reporters return None after writing; ConsoleReporter
    returns the formatted string.
    """

    def report(self, results: Sequence[CheckResult]) -> str | None:
        """Report check results.

        Args:
            results: One result per checked tree.
        """
        ...
