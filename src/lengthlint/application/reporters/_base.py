"""Base reporter class for output formatting.

Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lengthlint.domain.model.check_result import CheckResult


class BaseReporter(ABC):
    """Base class for reporters writing to a stream.

    Example:
        class CountReporter(BaseReporter):
            def report(self, results: Sequence[CheckResult]) -> None:
                print(sum(r.violation_count for r in results))
    """

    @abstractmethod
    def report(self, results: Sequence[CheckResult]) -> None:
        """Report check results.

        Args:
            results: One result per checked tree, in check order
        """
