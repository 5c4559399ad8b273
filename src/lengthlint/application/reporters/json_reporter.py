"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from lengthlint.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lengthlint.domain.model.check_result import CheckResult
    from lengthlint.domain.model.violation import Diagnostic


class JSONReporter(BaseReporter):
    """JSON reporter for CI integration and other tools."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, results: Sequence[CheckResult]) -> None:
        """Report check results as one JSON document."""
        json.dump(self._results_to_dict(results), self._output, indent=self._indent)
        self._output.write("\n")

    def _results_to_dict(self, results: Sequence[CheckResult]) -> dict[str, object]:
        """Convert results to JSON-serializable dict."""
        by_rule: dict[str, int] = {}
        for result in results:
            for rule, count in result.count_by_rule().items():
                by_rule[rule.value] = by_rule.get(rule.value, 0) + count

        return {
            "passed": all(r.passed for r in results),
            "summary": {
                "trees": len(results),
                "violation_count": sum(r.violation_count for r in results),
                "by_rule": by_rule,
            },
            "files": [
                {
                    "file": str(r.file) if r.file is not None else None,
                    "violations": [self._diagnostic_to_dict(d) for d in r.diagnostics],
                }
                for r in results
            ],
        }

    def _diagnostic_to_dict(self, diagnostic: Diagnostic) -> dict[str, object]:
        """Convert Diagnostic to JSON-serializable dict."""
        return {
            "rule": diagnostic.rule.value,
            "severity": diagnostic.severity.name.lower(),
            "message": diagnostic.message,
            "location": {
                "line": diagnostic.location.line,
                "column": diagnostic.location.column,
            },
        }
