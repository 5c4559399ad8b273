"""Domain model entities."""

from lengthlint.domain.model.check_result import CheckResult
from lengthlint.domain.model.configuration import ALL_RULES, LengthConfig
from lengthlint.domain.model.enums import (
    ConstructCategory,
    MessageTemplate,
    PendingDeclaration,
    RuleKind,
    Severity,
)
from lengthlint.domain.model.limits import LengthLimits
from lengthlint.domain.model.location import Location
from lengthlint.domain.model.span import SourceSpan
from lengthlint.domain.model.syntax import NodeKind, SyntaxNode, Token, span_of
from lengthlint.domain.model.violation import Diagnostic, Violation, format_message

__all__ = [
    # Enums
    "RuleKind",
    "ConstructCategory",
    "MessageTemplate",
    "Severity",
    "PendingDeclaration",
    "NodeKind",
    # Value objects
    "Location",
    "SourceSpan",
    "Token",
    "SyntaxNode",
    "span_of",
    # Configuration
    "LengthLimits",
    "LengthConfig",
    "ALL_RULES",
    # Results
    "Violation",
    "Diagnostic",
    "format_message",
    "CheckResult",
]
