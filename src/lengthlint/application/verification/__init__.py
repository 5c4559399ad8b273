"""Length verification core: reactor, evaluator, emitter."""

from lengthlint.application.verification.emitter import DiagnosticEmitter
from lengthlint.application.verification.evaluator import (
    construct_length,
    construct_too_long,
    name_length,
    name_too_long,
)
from lengthlint.application.verification.reactor import MaxLengthReactor
from lengthlint.application.verification.rule_table import (
    BODY_RULES,
    NAME_RULES,
    BodyRule,
    NameRule,
)

__all__ = [
    "MaxLengthReactor",
    "DiagnosticEmitter",
    "name_too_long",
    "construct_too_long",
    "name_length",
    "construct_length",
    "NAME_RULES",
    "BODY_RULES",
    "NameRule",
    "BodyRule",
]
