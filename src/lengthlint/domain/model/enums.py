"""Domain enumerations."""

from __future__ import annotations

from enum import Enum, auto


class RuleKind(Enum):
    """Length rule identifier.

    Value is the rule name used in configuration and in reported diagnostics.
    """

    MAX_NAME_LENGTH = "max-name-length"
    MAX_CLASS_LENGTH = "max-class-length"
    MAX_CLOSURE_LENGTH = "max-closure-length"
    MAX_FUNCTION_LENGTH = "max-function-length"
    MAX_STRUCT_LENGTH = "max-struct-length"

    @classmethod
    def parse(cls, name: str) -> RuleKind:
        """Resolve rule identifier to RuleKind.

        Accepts the hyphenated identifier ("max-name-length") or the
        member name ("MAX_NAME_LENGTH").

        Args:
            name: Rule identifier

        Returns:
            Matching RuleKind

        Raises:
            ValueError: If name does not identify a rule (FAIL-FIRST)
        """
        normalized = name.strip()
        for rule in cls:
            if normalized in (rule.value, rule.name):
                return rule
        known = ", ".join(rule.value for rule in cls)
        raise ValueError(f"unknown rule '{name}', expected one of: {known}")


class ConstructCategory(Enum):
    """Syntactic construct a violation belongs to.

    Value is the display word used to build the message label.
    """

    CLASS = "Class"
    ENUM = "Enum"
    STRUCT = "Struct"
    PROTOCOL = "Protocol"
    CLOSURE = "Closure"
    FUNCTION = "Function"
    ELEMENT = "Element"
    LABEL = "Label"
    SETTER = "Setter"
    TYPE = "Type"
    TYPEALIAS = "Typealias"
    VARIABLE = "Variable"
    CONSTANT = "Constant"
    ENUM_CASE = "Enum case"

    @property
    def name_label(self) -> str:
        """Label for name-length violations ("Class name")."""
        return f"{self.value} name"


class MessageTemplate(Enum):
    """Message phrase appended after the construct label."""

    CHARACTER_LIMIT = " exceeds character limit"
    LINE_LIMIT = " exceeds line limit"


class Severity(Enum):
    """Diagnostic severity. The length rules report everything as ERROR."""

    ERROR = auto()


class PendingDeclaration(Enum):
    """Declaration kind whose name is the next identifier visited."""

    CONSTANT = auto()  # let
    VARIABLE = auto()  # var
