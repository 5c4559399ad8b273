"""Length violation and emitted diagnostic."""

from __future__ import annotations

from dataclasses import dataclass

from lengthlint.domain.model.enums import (
    ConstructCategory,
    MessageTemplate,
    RuleKind,
    Severity,
)
from lengthlint.domain.model.location import Location


def format_message(label: str, template: MessageTemplate, measured: int, limit: int) -> str:
    """Build "<label><template phrase> (<measured>/<limit>)"."""
    return f"{label}{template.value} ({measured}/{limit})"


@dataclass(frozen=True, slots=True)
class Violation:
    """Detected breach of a name or construct length limit.

    Transient: produced and consumed within one node callback.

    Attributes:
        rule: Violated rule
        category: Construct the violating node belongs to
        measured: Character count (names) or stop - start line (constructs)
        limit: Configured limit that was exceeded
        template: Message phrase
        location: Start of the violating node's first token
    """

    rule: RuleKind
    category: ConstructCategory
    measured: int
    limit: int
    template: MessageTemplate
    location: Location

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.measured <= self.limit:
            raise ValueError(
                f"measured ({self.measured}) must exceed limit ({self.limit})"
            )

    @property
    def label(self) -> str:
        """Construct label: "Class name" for names, "Class" for bodies."""
        if self.template is MessageTemplate.CHARACTER_LIMIT:
            return self.category.name_label
        return self.category.value

    @property
    def message(self) -> str:
        """Human-readable message."""
        return format_message(self.label, self.template, self.measured, self.limit)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One (rule, message, location) triple as delivered to a sink.

    Attributes:
        rule: Violated rule
        message: Human-readable message
        location: Construct start location
        severity: Always ERROR for length rules
    """

    rule: RuleKind
    message: str
    location: Location
    severity: Severity = Severity.ERROR

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.message:
            raise ValueError("message must not be empty")

    def __str__(self) -> str:
        """Format as "<location>: error: [<rule>] <message>"."""
        return f"{self.location}: {self.severity.name.lower()}: [{self.rule.value}] {self.message}"
