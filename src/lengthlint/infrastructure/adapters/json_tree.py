"""JSON syntax tree adapter.

Loads a syntax tree exported by an external parser. Format:

    {"kind": "class_body",
     "start": {"text": "{", "line": 1, "column": 11},
     "stop": {"text": "}", "line": 4, "column": 1},
     "children": [<node>, ...]}

"start"/"stop" are the first and last tokens the node covers. A branch
may omit either one; it then defaults to its first child's start or last
child's stop token. Explicit tokens must enclose the children. A leaf has
no children and gives either "token" or equal "start"/"stop":

    {"kind": "identifier", "token": {"text": "x", "line": 3, "column": 9}}

Kinds are grammar rule names, snake_case or camelCase. Unknown kinds
become NodeKind.OTHER.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from lengthlint.domain.exceptions.parsing import ParsingError, TreeFormatError
from lengthlint.domain.model.syntax import NodeKind, SyntaxNode, Token

logger = logging.getLogger(__name__)

_IN_MEMORY = "<memory>"


class JSONTreeLoader:
    """Builds SyntaxNode trees from JSON.

    Stateless. FAIL-FIRST: raises on the first malformed node.
    """

    def load_file(self, path: Path) -> SyntaxNode:
        """Load tree from a UTF-8 JSON file.

        Args:
            path: Path to JSON file

        Returns:
            Tree root

        Raises:
            ParsingError: If file cannot be read or is not valid JSON
            TreeFormatError: If a node is malformed
        """
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ParsingError(path, "file not found") from e
        except PermissionError as e:
            raise ParsingError(path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise ParsingError(path, f"encoding error: {e}") from e

        return self.loads(raw, source=path)

    def loads(self, raw: str, source: Path | str = _IN_MEMORY) -> SyntaxNode:
        """Load tree from a JSON string.

        Args:
            raw: JSON document
            source: Origin used in error messages

        Returns:
            Tree root

        Raises:
            ParsingError: If raw is not valid JSON
            TreeFormatError: If a node is malformed
        """
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParsingError(source, f"invalid JSON: {e}") from e

        return self.from_data(data, source=source)

    def from_data(self, data: object, source: Path | str = _IN_MEMORY) -> SyntaxNode:
        """Build tree from already-decoded JSON data.

        Raises:
            TreeFormatError: If a node is malformed
        """
        try:
            root = _build_node(data, "$", source)
        except RecursionError as e:
            raise TreeFormatError(source, "$", "tree nesting too deep") from e

        logger.debug("loaded tree from %s: root kind %s", source, root.kind.value)
        return root


def _build_node(data: object, node_path: str, source: Path | str) -> SyntaxNode:
    """Recursively convert one JSON object to SyntaxNode."""
    if not isinstance(data, Mapping):
        raise TreeFormatError(source, node_path, f"node must be an object, got {type(data).__name__}")

    kind_name = data.get("kind")
    if not isinstance(kind_name, str) or not kind_name:
        raise TreeFormatError(source, node_path, "node requires a non-empty string 'kind'")
    kind = NodeKind.parse(kind_name)

    children_data = data.get("children", [])
    if not isinstance(children_data, list):
        raise TreeFormatError(source, node_path, "'children' must be a list")

    start = _optional_token(data, "start", node_path, source)
    stop = _optional_token(data, "stop", node_path, source)

    if "token" in data:
        if children_data:
            raise TreeFormatError(source, node_path, "node cannot have both 'token' and 'children'")
        if start is not None or stop is not None:
            raise TreeFormatError(source, node_path, "node cannot have both 'token' and 'start'/'stop'")
        token = _build_token(data["token"], f"{node_path}.token", source)
        return SyntaxNode.leaf(kind, token)

    if not children_data:
        if start is None:
            raise TreeFormatError(
                source, node_path, "node requires 'token', 'start' or non-empty 'children'"
            )
        return _make_node(kind, start, stop or start, (), node_path, source)

    children = tuple(
        _build_node(child, f"{node_path}.children[{i}]", source)
        for i, child in enumerate(children_data)
    )
    if start is not None and start.position > children[0].start.position:
        raise TreeFormatError(source, f"{node_path}.start", "start token follows first child")
    if stop is not None and stop.position < children[-1].stop.position:
        raise TreeFormatError(source, f"{node_path}.stop", "stop token precedes last child")

    return _make_node(
        kind,
        start or children[0].start,
        stop or children[-1].stop,
        children,
        node_path,
        source,
    )


def _make_node(
    kind: NodeKind,
    start: Token,
    stop: Token,
    children: tuple[SyntaxNode, ...],
    node_path: str,
    source: Path | str,
) -> SyntaxNode:
    try:
        return SyntaxNode(kind=kind, start=start, stop=stop, children=children)
    except ValueError as e:
        raise TreeFormatError(source, node_path, str(e)) from e


def _optional_token(
    data: Mapping[str, object],
    key: str,
    node_path: str,
    source: Path | str,
) -> Token | None:
    if key not in data:
        return None
    return _build_token(data[key], f"{node_path}.{key}", source)


def _build_token(data: object, node_path: str, source: Path | str) -> Token:
    """Convert one JSON token object to Token."""
    if not isinstance(data, Mapping):
        raise TreeFormatError(source, node_path, "token must be an object")

    text = data.get("text")
    line = data.get("line")
    column = data.get("column")

    if not isinstance(text, str):
        raise TreeFormatError(source, node_path, "token 'text' must be a string")
    for name, value in (("line", line), ("column", column)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TreeFormatError(source, node_path, f"token '{name}' must be an integer")

    try:
        return Token(text=text, line=line, column=column)
    except ValueError as e:
        raise TreeFormatError(source, node_path, str(e)) from e
