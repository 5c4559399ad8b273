"""Application services."""

from lengthlint.application.services.length_checker import LengthChecker

__all__ = ["LengthChecker"]
