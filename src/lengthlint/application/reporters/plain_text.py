"""Plain text reporter: one line per diagnostic.

Stdlib-only reporter, compiler-style output:
    <file>:<line>:<column>: error: [<rule>] <message>
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from lengthlint.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lengthlint.domain.model.check_result import CheckResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None, *, summary: bool = True) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            summary: Append a totals line
        """
        self._output = output if output is not None else sys.stdout
        self._summary = summary

    def report(self, results: Sequence[CheckResult]) -> None:
        """Report diagnostics of every result, then the totals line."""
        for result in results:
            for diagnostic in result.diagnostics:
                self._write(str(diagnostic))

        if self._summary:
            total = sum(r.violation_count for r in results)
            self._write()
            self._write(f"Analyzed {len(results)} tree(s), found {total} violation(s)")

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)
