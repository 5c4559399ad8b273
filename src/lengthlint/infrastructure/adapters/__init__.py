"""Adapters for loading syntax trees."""

from lengthlint.infrastructure.adapters.json_tree import JSONTreeLoader

__all__ = ["JSONTreeLoader"]
