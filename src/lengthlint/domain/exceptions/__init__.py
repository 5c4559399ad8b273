"""Domain exceptions."""

from lengthlint.domain.exceptions.base import LengthLintError
from lengthlint.domain.exceptions.configuration import ConfigurationError
from lengthlint.domain.exceptions.parsing import ParsingError, TreeFormatError
from lengthlint.domain.exceptions.violation import LengthViolationError

__all__ = [
    "LengthLintError",
    "ParsingError",
    "TreeFormatError",
    "ConfigurationError",
    "LengthViolationError",
]
