"""Base exceptions for lengthlint domain."""


class LengthLintError(Exception):
    """Root exception for all lengthlint errors.

    All domain exceptions inherit from this.
    Allows catching all lengthlint-specific errors.
    """
