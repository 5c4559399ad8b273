"""Rule table: node kind -> construct category -> limit -> gating rule.

Every node kind the length rules react to appears in exactly one table.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from lengthlint.domain.model.enums import ConstructCategory, RuleKind
from lengthlint.domain.model.limits import LengthLimits
from lengthlint.domain.model.syntax import NodeKind


@dataclass(frozen=True, slots=True)
class NameRule:
    """Name-length check for one node kind.

    Attributes:
        category: Construct the name belongs to
        target: Sub-node holding the reportable name, None for the node itself
    """

    category: ConstructCategory
    target: NodeKind | None = None


@dataclass(frozen=True, slots=True)
class BodyRule:
    """Construct-length check for one node kind.

    Attributes:
        category: Construct the body belongs to
        rule: Rule that gates the check and is reported
        limit_field: LengthLimits attribute holding the limit
    """

    category: ConstructCategory
    rule: RuleKind
    limit_field: str

    def limit(self, limits: LengthLimits) -> int:
        """Configured limit for this construct."""
        return getattr(limits, self.limit_field)


NAME_RULES: Mapping[NodeKind, NameRule] = MappingProxyType(
    {
        NodeKind.CLASS_NAME: NameRule(ConstructCategory.CLASS),
        NodeKind.ENUM_NAME: NameRule(ConstructCategory.ENUM),
        NodeKind.STRUCT_NAME: NameRule(ConstructCategory.STRUCT),
        NodeKind.PROTOCOL_NAME: NameRule(ConstructCategory.PROTOCOL),
        NodeKind.ELEMENT_NAME: NameRule(ConstructCategory.ELEMENT),
        NodeKind.FUNCTION_NAME: NameRule(ConstructCategory.FUNCTION),
        NodeKind.LABEL_NAME: NameRule(ConstructCategory.LABEL),
        NodeKind.SETTER_NAME: NameRule(ConstructCategory.SETTER, target=NodeKind.IDENTIFIER),
        NodeKind.TYPE_NAME: NameRule(ConstructCategory.TYPE),
        NodeKind.TYPEALIAS_NAME: NameRule(ConstructCategory.TYPEALIAS),
        NodeKind.VARIABLE_NAME: NameRule(ConstructCategory.VARIABLE),
        NodeKind.RAW_VALUE_STYLE_ENUM_CASE: NameRule(
            ConstructCategory.ENUM_CASE, target=NodeKind.ENUM_CASE_NAME
        ),
        NodeKind.UNION_STYLE_ENUM_CASE: NameRule(
            ConstructCategory.ENUM_CASE, target=NodeKind.ENUM_CASE_NAME
        ),
    }
)

BODY_RULES: Mapping[NodeKind, BodyRule] = MappingProxyType(
    {
        NodeKind.CLASS_BODY: BodyRule(
            ConstructCategory.CLASS, RuleKind.MAX_CLASS_LENGTH, "max_class_length"
        ),
        NodeKind.CLOSURE_EXPRESSION: BodyRule(
            ConstructCategory.CLOSURE, RuleKind.MAX_CLOSURE_LENGTH, "max_closure_length"
        ),
        NodeKind.FUNCTION_BODY: BodyRule(
            ConstructCategory.FUNCTION, RuleKind.MAX_FUNCTION_LENGTH, "max_function_length"
        ),
        NodeKind.STRUCT_BODY: BodyRule(
            ConstructCategory.STRUCT, RuleKind.MAX_STRUCT_LENGTH, "max_struct_length"
        ),
    }
)
