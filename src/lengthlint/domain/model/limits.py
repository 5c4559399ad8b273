"""Configured length limits."""

from __future__ import annotations

from dataclasses import dataclass, fields

DEFAULT_MAX_NAME_LENGTH = 40
DEFAULT_MAX_CLASS_LENGTH = 200
DEFAULT_MAX_CLOSURE_LENGTH = 20
DEFAULT_MAX_FUNCTION_LENGTH = 50
DEFAULT_MAX_STRUCT_LENGTH = 200


@dataclass(frozen=True, slots=True)
class LengthLimits:
    """Maximum name length (characters) and body lengths (lines).

    Immutable. Safe to share between concurrent traversals.

    Attributes:
        max_name_length: Max characters in any declared name
        max_class_length: Max line span of a class body
        max_closure_length: Max line span of a closure expression
        max_function_length: Max line span of a function body
        max_struct_length: Max line span of a struct body
    """

    max_name_length: int = DEFAULT_MAX_NAME_LENGTH
    max_class_length: int = DEFAULT_MAX_CLASS_LENGTH
    max_closure_length: int = DEFAULT_MAX_CLOSURE_LENGTH
    max_function_length: int = DEFAULT_MAX_FUNCTION_LENGTH
    max_struct_length: int = DEFAULT_MAX_STRUCT_LENGTH

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for f in fields(self):
            value = getattr(self, f.name)
            # bool is an int subclass, reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{f.name} must be int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{f.name} must be >= 0, got {value}")
