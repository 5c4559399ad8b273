"""Console reporter: CheckResults -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lengthlint.domain.model.check_result import CheckResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in characters
        show_passed: List trees without violations
        color: Emit ANSI styles
    """

    width: int = 120
    show_passed: bool = False
    color: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, results: Sequence[CheckResult]) -> str:
        """Format check results as a rich table per tree plus summary."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        console.print()
        console.rule("[bold]LENGTH CHECK[/bold]")
        console.print()

        for result in results:
            if result.passed and not self._config.show_passed:
                continue
            self._render_result(console, result)

        self._render_summary(console, results)
        return output.getvalue()

    def _render_result(self, console: Console, result: CheckResult) -> None:
        """Render one tree's diagnostics."""
        title = escape(str(result.file)) if result.file is not None else "<tree>"
        if result.passed:
            console.print(f"[green]{title}[/green]: no violations")
            console.print()
            return

        table = Table(title=title, title_justify="left")
        table.add_column("Location", style="cyan", no_wrap=True)
        table.add_column("Rule", style="yellow", no_wrap=True)
        table.add_column("Message")

        for d in result.diagnostics:
            table.add_row(f"{d.location.line}:{d.location.column}", d.rule.value, d.message)

        console.print(table)
        console.print()

    def _render_summary(self, console: Console, results: Sequence[CheckResult]) -> None:
        """Render totals line."""
        total = sum(r.violation_count for r in results)
        style = "green" if total == 0 else "bold red"
        console.print(
            f"[bold]Trees:[/bold] {len(results)}  [{style}]Violations: {total}[/{style}]"
        )
