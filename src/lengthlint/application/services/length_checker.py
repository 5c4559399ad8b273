"""LengthChecker: facade running the length rules over syntax trees."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lengthlint.application.collectors.sinks import CollectingSink, FanOutSink
from lengthlint.application.verification.reactor import MaxLengthReactor
from lengthlint.domain.model.check_result import CheckResult
from lengthlint.domain.model.configuration import LengthConfig
from lengthlint.infrastructure.declarations import DeclarationDetector
from lengthlint.infrastructure.walker import TreeWalker

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from lengthlint.domain.model.syntax import SyntaxNode
    from lengthlint.domain.ports.sink import DiagnosticSinkProtocol

logger = logging.getLogger(__name__)


class LengthChecker:
    """Checks syntax trees against configured length limits.

    Stateless between trees: every check builds its own reactor, so
    declaration context never leaks from one tree into another, and one
    checker may serve concurrent callers.

    Attributes:
        _config: Limits and enabled rules (immutable, shared)
        _sink: Optional extra sink receiving every diagnostic live
    """

    def __init__(
        self,
        config: LengthConfig | None = None,
        sink: DiagnosticSinkProtocol | None = None,
    ) -> None:
        """Initialize checker.

        Args:
            config: Limits and enabled rules. Uses defaults if None.
            sink: Extra sink notified as diagnostics are emitted
        """
        self._config = config or LengthConfig()
        self._sink = sink

    @property
    def config(self) -> LengthConfig:
        """Active configuration."""
        return self._config

    def check(self, tree: SyntaxNode, file: Path | None = None) -> CheckResult:
        """Run the length rules over one tree.

        Args:
            tree: Tree root
            file: Source file attributed to diagnostics

        Returns:
            CheckResult with diagnostics in traversal order
        """
        collector = CollectingSink()
        sink: DiagnosticSinkProtocol = (
            collector if self._sink is None else FanOutSink(collector, self._sink)
        )

        reactor = MaxLengthReactor(
            limits=self._config.limits,
            enabled_rules=self._config.enabled_rules,
            sink=sink,
            file=file,
        )
        walker = TreeWalker(DeclarationDetector(reactor), reactor)

        logger.debug("checking %s", file or "<tree>")
        visited = walker.walk(tree)
        logger.debug("%s: %d node(s), %d diagnostic(s)", file or "<tree>", visited, len(collector))

        return CheckResult(diagnostics=collector.diagnostics, file=file, nodes_visited=visited)

    def check_many(
        self,
        trees: Iterable[tuple[SyntaxNode, Path | None]],
    ) -> tuple[CheckResult, ...]:
        """Check several trees independently, in the given order.

        Args:
            trees: (tree, file) pairs

        Returns:
            One CheckResult per tree
        """
        return tuple(self.check(tree, file) for tree, file in trees)
