"""Tests for infrastructure/adapters/json_tree.py."""

import json
from pathlib import Path

import pytest

from lengthlint.domain.exceptions.parsing import ParsingError, TreeFormatError
from lengthlint.domain.model.syntax import NodeKind
from lengthlint.infrastructure.adapters.json_tree import JSONTreeLoader


def leaf(kind: str, text: str, line: int, column: int) -> dict[str, object]:
    return {"kind": kind, "token": {"text": text, "line": line, "column": column}}


CLASS_TREE = {
    "kind": "classDeclaration",
    "children": [
        leaf("other", "class", 1, 1),
        {"kind": "className", "children": [leaf("identifier", "Foo", 1, 7)]},
        {
            "kind": "class_body",
            "children": [leaf("other", "{", 1, 11), leaf("other", "}", 4, 1)],
        },
    ],
}


class TestFromData:
    """Tests for JSONTreeLoader.from_data()."""

    def test_builds_tree(self) -> None:
        root = JSONTreeLoader().from_data(CLASS_TREE)

        assert root.kind is NodeKind.OTHER
        name = root.children[1]
        assert name.kind is NodeKind.CLASS_NAME
        assert name.text == "Foo"
        body = root.children[2]
        assert body.kind is NodeKind.CLASS_BODY
        assert (body.start.line, body.stop.line) == (1, 4)

    def test_not_an_object(self) -> None:
        with pytest.raises(TreeFormatError, match=r"node must be an object, got list at \$"):
            JSONTreeLoader().from_data([])

    def test_missing_kind(self) -> None:
        with pytest.raises(TreeFormatError, match="non-empty string 'kind'"):
            JSONTreeLoader().from_data({"children": []})

    def test_no_token_no_children(self) -> None:
        with pytest.raises(TreeFormatError, match="requires 'token', 'start' or non-empty 'children'"):
            JSONTreeLoader().from_data({"kind": "other"})

    def test_token_and_children(self) -> None:
        data = dict(leaf("identifier", "x", 1, 1), children=[leaf("other", "y", 1, 2)])
        with pytest.raises(TreeFormatError, match="both 'token' and 'children'"):
            JSONTreeLoader().from_data(data)

    def test_bad_child_reports_path(self) -> None:
        data = {"kind": "other", "children": [leaf("other", "a", 1, 1), {"kind": "other"}]}
        with pytest.raises(TreeFormatError) as exc_info:
            JSONTreeLoader().from_data(data)
        assert exc_info.value.node_path == "$.children[1]"

    def test_token_line_must_be_integer(self) -> None:
        with pytest.raises(TreeFormatError, match="token 'line' must be an integer"):
            JSONTreeLoader().from_data(leaf("identifier", "x", "1", 1))  # type: ignore[arg-type]

    def test_token_bool_column_rejected(self) -> None:
        with pytest.raises(TreeFormatError, match="token 'column' must be an integer"):
            JSONTreeLoader().from_data(leaf("identifier", "x", 1, True))

    def test_token_text_must_be_string(self) -> None:
        with pytest.raises(TreeFormatError, match="token 'text' must be a string"):
            JSONTreeLoader().from_data({"kind": "identifier", "token": {"line": 1, "column": 1}})


class TestStartStop:
    """Tests for nodes giving explicit start/stop tokens."""

    def test_leaf_with_start_and_stop(self) -> None:
        token = {"text": "Foo", "line": 2, "column": 7}
        root = JSONTreeLoader().from_data({"kind": "class_name", "start": token, "stop": token})

        assert root.kind is NodeKind.CLASS_NAME
        assert root.is_leaf
        assert root.text == "Foo"

    def test_leaf_with_start_only(self) -> None:
        root = JSONTreeLoader().from_data(
            {"kind": "identifier", "start": {"text": "x", "line": 1, "column": 1}}
        )
        assert root.start == root.stop

    def test_leaf_spanning_two_tokens_rejected(self) -> None:
        data = {
            "kind": "identifier",
            "start": {"text": "a", "line": 1, "column": 1},
            "stop": {"text": "b", "line": 1, "column": 3},
        }
        with pytest.raises(TreeFormatError, match="exactly one token"):
            JSONTreeLoader().from_data(data)

    def test_explicit_stop_kept(self) -> None:
        data = {
            "kind": "closure_expression",
            "stop": {"text": "}", "line": 9, "column": 1},
            "children": [leaf("other", "{", 1, 5), leaf("identifier", "x", 2, 3)],
        }
        root = JSONTreeLoader().from_data(data)

        assert (root.start.line, root.start.column) == (1, 5)
        assert (root.stop.line, root.stop.text) == (9, "}")

    def test_start_and_stop_match_children(self) -> None:
        data = dict(
            CLASS_TREE,
            start={"text": "class", "line": 1, "column": 1},
            stop={"text": "}", "line": 4, "column": 1},
        )
        assert JSONTreeLoader().from_data(data) == JSONTreeLoader().from_data(CLASS_TREE)

    def test_start_after_first_child_rejected(self) -> None:
        data = dict(CLASS_TREE, start={"text": "Foo", "line": 1, "column": 7})
        with pytest.raises(TreeFormatError, match="start token follows first child") as exc_info:
            JSONTreeLoader().from_data(data)
        assert exc_info.value.node_path == "$.start"

    def test_stop_before_last_child_rejected(self) -> None:
        data = dict(CLASS_TREE, stop={"text": "{", "line": 1, "column": 11})
        with pytest.raises(TreeFormatError, match="stop token precedes last child"):
            JSONTreeLoader().from_data(data)

    def test_token_with_start_rejected(self) -> None:
        data = dict(leaf("identifier", "x", 1, 1), start={"text": "x", "line": 1, "column": 1})
        with pytest.raises(TreeFormatError, match="both 'token' and 'start'/'stop'"):
            JSONTreeLoader().from_data(data)

    def test_malformed_start_token(self) -> None:
        data = dict(CLASS_TREE, start={"text": "class", "line": "1", "column": 1})
        with pytest.raises(TreeFormatError, match="token 'line' must be an integer"):
            JSONTreeLoader().from_data(data)


class TestLoads:
    """Tests for JSONTreeLoader.loads()."""

    def test_invalid_json(self) -> None:
        with pytest.raises(ParsingError, match="invalid JSON"):
            JSONTreeLoader().loads("{not json")

    def test_valid(self) -> None:
        root = JSONTreeLoader().loads(json.dumps(leaf("identifier", "abc", 2, 3)))
        assert root.kind is NodeKind.IDENTIFIER
        assert root.text == "abc"


class TestLoadFile:
    """Tests for JSONTreeLoader.load_file()."""

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "tree.json"
        path.write_text(json.dumps(CLASS_TREE), encoding="utf-8")
        assert JSONTreeLoader().load_file(path).children[1].text == "Foo"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ParsingError, match="file not found"):
            JSONTreeLoader().load_file(tmp_path / "missing.json")

    def test_error_names_file(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("[", encoding="utf-8")
        with pytest.raises(ParsingError) as exc_info:
            JSONTreeLoader().load_file(path)
        assert exc_info.value.path == path
