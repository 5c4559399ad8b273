"""Check result aggregate for one syntax tree."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from lengthlint.domain.model.violation import Diagnostic

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from lengthlint.domain.model.enums import RuleKind


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of checking one tree.

    Attributes:
        diagnostics: Emitted diagnostics in traversal order
        file: Source file of the tree, None for in-memory trees
        nodes_visited: Number of nodes the walker visited
    """

    diagnostics: tuple[Diagnostic, ...]
    file: Path | None = None
    nodes_visited: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.nodes_visited < 0:
            raise ValueError(f"nodes_visited must be >= 0, got {self.nodes_visited}")
        for d in self.diagnostics:
            if not isinstance(d, Diagnostic):
                raise TypeError(f"diagnostics must contain Diagnostic, got {type(d).__name__}")

    @property
    def passed(self) -> bool:
        """True if no diagnostics were emitted."""
        return len(self.diagnostics) == 0

    @property
    def violation_count(self) -> int:
        """Number of diagnostics."""
        return len(self.diagnostics)

    def count_by_rule(self) -> Mapping[RuleKind, int]:
        """Number of diagnostics per rule (only rules that fired)."""
        return dict(Counter(d.rule for d in self.diagnostics))

    @classmethod
    def empty(cls, file: Path | None = None) -> CheckResult:
        """Create empty result (passed, no diagnostics)."""
        return cls(diagnostics=(), file=file)
