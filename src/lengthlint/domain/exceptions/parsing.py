"""Tree loading exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lengthlint.domain.exceptions.base import LengthLintError

if TYPE_CHECKING:
    from pathlib import Path


class ParsingError(LengthLintError):
    """Error while reading a syntax tree.

    Attributes:
        path: File that failed to load
        reason: Why loading failed
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


class TreeFormatError(ParsingError):
    """Malformed node in a serialized syntax tree.

    Attributes:
        path: Source of the tree
        node_path: Position of the bad node ("$.children[2].start")
        reason: What is wrong with the node
    """

    def __init__(self, path: Path | str, node_path: str, reason: str) -> None:
        if not node_path:
            raise ValueError("node_path must be non-empty string")

        self.node_path = node_path
        super().__init__(path, f"{reason} at {node_path}")
