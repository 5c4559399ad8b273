"""Violation evaluation: pure pass/fail and measurement functions.

All functions are total: no error conditions, no side effects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lengthlint.domain.model.span import SourceSpan


def name_length(span: SourceSpan) -> int:
    """Number of characters (code points) in the spelled name."""
    return len(span.text)


def construct_length(span: SourceSpan) -> int:
    """Line span of a construct: stop line minus start line.

    This counts line breaks inside the construct, one less than the number
    of lines it occupies. Reported values depend on this exact formula.
    """
    return span.stop_line - span.start_line


def name_too_long(span: SourceSpan, limit: int) -> bool:
    """True iff the spelled name has more than `limit` characters."""
    return name_length(span) > limit


def construct_too_long(span: SourceSpan, limit: int) -> bool:
    """True iff the construct's line span exceeds `limit`."""
    return construct_length(span) > limit
