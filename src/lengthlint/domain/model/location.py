"""Source code location value object."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Location:
    """Position of a construct's first token.

    Attributes:
        line: Line number (1-based, must be > 0)
        column: Column number (1-based, must be > 0)
        file: Source file, None when the tree was not read from a file
    """

    line: int
    column: int
    file: Path | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column <= 0:
            raise ValueError(f"column must be > 0, got {self.column}")

    def with_file(self, file: Path | None) -> Location:
        """Return same position attributed to another file."""
        return Location(line=self.line, column=self.column, file=file)

    def __str__(self) -> str:
        """Format as file:line:column (line:column without file)."""
        if self.file is None:
            return f"{self.line}:{self.column}"
        return f"{self.file}:{self.line}:{self.column}"
