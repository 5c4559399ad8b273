"""Configuration exceptions."""

from lengthlint.domain.exceptions.base import LengthLintError


class ConfigurationError(LengthLintError):
    """Invalid length rule configuration.

    Attributes:
        reason: Why configuration is invalid (must not be empty)
    """

    def __init__(self, reason: str) -> None:
        # FAIL-FIRST validation
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        super().__init__(f"Invalid configuration: {reason}")
