"""lengthlint domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, pathlib, collections, re
"""

from lengthlint.domain.exceptions import (
    ConfigurationError,
    LengthLintError,
    LengthViolationError,
    ParsingError,
    TreeFormatError,
)
from lengthlint.domain.model import (
    ALL_RULES,
    CheckResult,
    ConstructCategory,
    Diagnostic,
    LengthConfig,
    LengthLimits,
    Location,
    MessageTemplate,
    NodeKind,
    PendingDeclaration,
    RuleKind,
    Severity,
    SourceSpan,
    SyntaxNode,
    Token,
    Violation,
)
from lengthlint.domain.ports import DiagnosticSinkProtocol, LengthVisitorProtocol

__all__ = [
    # Exceptions
    "LengthLintError",
    "ParsingError",
    "TreeFormatError",
    "ConfigurationError",
    "LengthViolationError",
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
    # Configuration
    "LengthLimits",
    "LengthConfig",
    "ALL_RULES",
    # Results
    "Violation",
    "Diagnostic",
    "CheckResult",
    # Ports
    "DiagnosticSinkProtocol",
    "LengthVisitorProtocol",
]
