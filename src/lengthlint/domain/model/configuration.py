"""Length rule configuration.

Supplied once by the caller, never mutated during a traversal.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from lengthlint.domain.exceptions.configuration import ConfigurationError
from lengthlint.domain.model.enums import RuleKind
from lengthlint.domain.model.limits import LengthLimits

# Mapping key (hyphenated rule identifier) -> LengthLimits field
_LIMIT_KEYS: Mapping[str, str] = {
    RuleKind.MAX_NAME_LENGTH.value: "max_name_length",
    RuleKind.MAX_CLASS_LENGTH.value: "max_class_length",
    RuleKind.MAX_CLOSURE_LENGTH.value: "max_closure_length",
    RuleKind.MAX_FUNCTION_LENGTH.value: "max_function_length",
    RuleKind.MAX_STRUCT_LENGTH.value: "max_struct_length",
}

ALL_RULES: frozenset[RuleKind] = frozenset(RuleKind)


@dataclass(frozen=True, slots=True)
class LengthConfig:
    """Limits plus the set of enabled rules.

    Attributes:
        limits: Configured limits
        enabled_rules: Rules to check. Rules outside the set are no-ops.
    """

    limits: LengthLimits = field(default_factory=LengthLimits)
    enabled_rules: frozenset[RuleKind] = ALL_RULES

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.limits, LengthLimits):
            raise TypeError(f"limits must be LengthLimits, got {type(self.limits).__name__}")
        if not isinstance(self.enabled_rules, frozenset):
            raise TypeError("enabled_rules must be frozenset")
        for rule in self.enabled_rules:
            if not isinstance(rule, RuleKind):
                raise TypeError(f"enabled_rules must contain RuleKind, got {rule!r}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> LengthConfig:
        """Build config from a plain mapping (parsed TOML/JSON section).

        Keys:
            max-name-length, max-class-length, max-closure-length,
            max-function-length, max-struct-length: int limits
            only: rule identifiers to enable (all others disabled)
            except: rule identifiers to disable

        Underscores are accepted in place of hyphens.

        Raises:
            ConfigurationError: On unknown keys, unknown rules, bad values,
                or when both "only" and "except" are given
        """
        normalized = {str(key).replace("_", "-"): value for key, value in data.items()}

        unknown = set(normalized) - set(_LIMIT_KEYS) - {"only", "except"}
        if unknown:
            raise ConfigurationError(f"unknown keys: {', '.join(sorted(unknown))}")

        limit_values: dict[str, int] = {}
        for key, field_name in _LIMIT_KEYS.items():
            if key not in normalized:
                continue
            value = normalized[key]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{key} must be an integer, got {value!r}")
            limit_values[field_name] = value

        try:
            limits = LengthLimits(**limit_values)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        if "only" in normalized and "except" in normalized:
            raise ConfigurationError("'only' and 'except' are mutually exclusive")

        enabled = ALL_RULES
        if "only" in normalized:
            enabled = _parse_rules("only", normalized["only"])
        elif "except" in normalized:
            enabled = ALL_RULES - _parse_rules("except", normalized["except"])

        return cls(limits=limits, enabled_rules=enabled)


def _parse_rules(key: str, value: object) -> frozenset[RuleKind]:
    """Parse a list (or comma-separated string) of rule identifiers."""
    if isinstance(value, str):
        names = [part for part in value.split(",") if part.strip()]
    elif isinstance(value, Iterable):
        names = [str(part) for part in value]
    else:
        raise ConfigurationError(f"{key} must be a list of rule names, got {value!r}")

    try:
        return frozenset(RuleKind.parse(name) for name in names)
    except ValueError as e:
        raise ConfigurationError(f"{key}: {e}") from e
