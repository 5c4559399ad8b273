"""Tests for presentation/api/assertions.py."""

from pathlib import Path

import pytest

from lengthlint import assert_check, check_tree
from lengthlint.domain.exceptions.violation import LengthViolationError
from lengthlint.domain.model.syntax import NodeKind
from tests.factories import DEFAULT_TEST_FILE, make_body, make_config, make_name, make_root


class TestCheckTree:
    """Tests for check_tree()."""

    def test_default_limits(self) -> None:
        tree = make_root(make_name(NodeKind.FUNCTION_NAME, "f" * 41))
        (diagnostic,) = check_tree(tree).diagnostics
        assert diagnostic.message == "Function name exceeds character limit (41/40)"

    def test_file_attributed(self) -> None:
        result = check_tree(make_root(make_name(NodeKind.TYPE_NAME, "Short")), file=DEFAULT_TEST_FILE)
        assert result.file == DEFAULT_TEST_FILE
        assert result.passed


class TestAssertCheck:
    """Tests for assert_check()."""

    def test_passing_returns_result(self) -> None:
        result = assert_check(make_root(make_body(NodeKind.CLOSURE_EXPRESSION, 1, 2)), make_config())
        assert result.passed

    def test_failing_raises_with_diagnostics(self) -> None:
        tree = make_root(make_body(NodeKind.CLOSURE_EXPRESSION, 1, 9))

        with pytest.raises(LengthViolationError) as exc_info:
            assert_check(tree, make_config(), Path("Closure.swift"))

        (diagnostic,) = exc_info.value.diagnostics
        assert diagnostic.message == "Closure exceeds line limit (8/3)"
        assert "Found 1 length violation(s):" in str(exc_info.value)
        assert "Closure.swift:1:1" in str(exc_info.value)
