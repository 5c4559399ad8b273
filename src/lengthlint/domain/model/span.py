"""Source span value object."""

from __future__ import annotations

from dataclasses import dataclass

from lengthlint.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Textual extent of one syntax-tree node.

    Derived on demand from a node, never stored by the verification core.

    Attributes:
        start_line: Line of the first token (1-based, inclusive)
        start_column: Column of the first token (1-based)
        stop_line: Line of the last token (1-based, inclusive)
        text: Exact text covered by the node
    """

    start_line: int
    start_column: int
    stop_line: int
    text: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.start_line <= 0:
            raise ValueError(f"start_line must be > 0, got {self.start_line}")
        if self.start_column <= 0:
            raise ValueError(f"start_column must be > 0, got {self.start_column}")
        if self.stop_line < self.start_line:
            raise ValueError(
                f"stop_line ({self.stop_line}) must be >= start_line ({self.start_line})"
            )

    @property
    def start(self) -> Location:
        """Location of the first token."""
        return Location(line=self.start_line, column=self.start_column)
