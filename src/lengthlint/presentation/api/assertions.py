"""Programmatic API: check trees and assert they are within limits.

Example:
    config = LengthConfig(limits=LengthLimits(max_name_length=30))
    assert_check(tree, config)  # raises LengthViolationError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lengthlint.application.services.length_checker import LengthChecker
from lengthlint.domain.exceptions.violation import LengthViolationError

if TYPE_CHECKING:
    from pathlib import Path

    from lengthlint.domain.model.check_result import CheckResult
    from lengthlint.domain.model.configuration import LengthConfig
    from lengthlint.domain.model.syntax import SyntaxNode


def check_tree(
    tree: SyntaxNode,
    config: LengthConfig | None = None,
    file: Path | None = None,
) -> CheckResult:
    """Run the length rules over one tree.

    Args:
        tree: Tree root
        config: Limits and enabled rules (default: LengthConfig())
        file: Source file attributed to diagnostics

    Returns:
        CheckResult with diagnostics in traversal order
    """
    return LengthChecker(config).check(tree, file)


def assert_check(
    tree: SyntaxNode,
    config: LengthConfig | None = None,
    file: Path | None = None,
) -> CheckResult:
    """Run the length rules and fail on any diagnostic.

    Returns:
        The passing CheckResult

    Raises:
        LengthViolationError: If any diagnostic was emitted
    """
    result = check_tree(tree, config, file)
    if not result.passed:
        raise LengthViolationError(result.diagnostics)
    return result
