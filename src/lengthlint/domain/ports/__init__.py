"""Domain ports (interfaces/protocols)."""

from lengthlint.domain.ports.sink import DiagnosticSinkProtocol
from lengthlint.domain.ports.visitor import LengthVisitorProtocol

__all__ = [
    "DiagnosticSinkProtocol",
    "LengthVisitorProtocol",
]
