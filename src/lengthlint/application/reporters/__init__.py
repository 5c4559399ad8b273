"""Reporters for length check results.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders rich tables.
"""

from lengthlint.application.reporters._base import BaseReporter
from lengthlint.application.reporters.console import ConsoleConfig, ConsoleReporter
from lengthlint.application.reporters.json_reporter import JSONReporter
from lengthlint.application.reporters.plain_text import PlainTextReporter
from lengthlint.application.reporters.protocol import ReporterProtocol

__all__ = [
    "BaseReporter",
    "ReporterProtocol",
    "PlainTextReporter",
    "JSONReporter",
    "ConsoleConfig",
    "ConsoleReporter",
]
