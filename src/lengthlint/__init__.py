"""lengthlint - name and construct length verification for Swift syntax trees."""

__version__ = "0.1.0"

from lengthlint.application.services.length_checker import LengthChecker
from lengthlint.domain.model.configuration import LengthConfig
from lengthlint.domain.model.limits import LengthLimits
from lengthlint.presentation.api.assertions import assert_check, check_tree

__all__ = [
    "LengthChecker",
    "LengthConfig",
    "LengthLimits",
    "check_tree",
    "assert_check",
    "__version__",
]
