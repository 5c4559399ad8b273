"""Length violation exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lengthlint.domain.exceptions.base import LengthLintError

if TYPE_CHECKING:
    from lengthlint.domain.model.violation import Diagnostic


class LengthViolationError(LengthLintError):
    """Length limits exceeded.

    Raised by assert_check() when diagnostics were emitted.

    Attributes:
        diagnostics: All emitted diagnostics, in traversal order
    """

    def __init__(self, diagnostics: tuple[Diagnostic, ...]) -> None:
        if not diagnostics:
            raise ValueError("LengthViolationError requires at least one diagnostic")

        self.diagnostics = diagnostics

        msg_parts = [f"Found {len(diagnostics)} length violation(s):"]
        for d in diagnostics:
            msg_parts.append(f"  {d}")

        super().__init__("\n".join(msg_parts))
