"""Programmatic API."""

from lengthlint.presentation.api.assertions import assert_check, check_tree

__all__ = ["check_tree", "assert_check"]
