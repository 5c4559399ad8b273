"""Command line interface.

Usage:
    lengthlint TREE.json [TREE.json ...] [--max-name-length N] ...
        [--only RULES | --except RULES] [--config FILE] [--format FORMAT]

Exit codes: 0 no violations, 1 violations found, 2 loading or config error.
"""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from lengthlint import __version__
from lengthlint.application.reporters.console import ConsoleReporter
from lengthlint.application.reporters.json_reporter import JSONReporter
from lengthlint.application.reporters.plain_text import PlainTextReporter
from lengthlint.application.services.length_checker import LengthChecker
from lengthlint.domain.exceptions.base import LengthLintError
from lengthlint.domain.exceptions.configuration import ConfigurationError
from lengthlint.domain.model.configuration import LengthConfig
from lengthlint.domain.model.enums import RuleKind
from lengthlint.infrastructure.adapters.json_tree import JSONTreeLoader
from lengthlint.logging import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lengthlint.domain.model.check_result import CheckResult

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2

_LIMIT_OPTIONS = tuple(rule.value for rule in RuleKind)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="lengthlint",
        description="Check name and construct lengths in exported Swift syntax trees.",
    )
    parser.add_argument("trees", nargs="+", type=Path, help="syntax tree JSON files")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        type=Path,
        help="TOML file; reads [tool.lengthlint] or top-level keys",
    )
    for option in _LIMIT_OPTIONS:
        parser.add_argument(f"--{option}", type=int, metavar="N", dest=option.replace("-", "_"))

    rules = parser.add_mutually_exclusive_group()
    rules.add_argument("--only", metavar="RULES", help="comma-separated rules to enable")
    rules.add_argument(
        "--except", metavar="RULES", dest="except_", help="comma-separated rules to disable"
    )

    parser.add_argument(
        "--format",
        choices=("text", "json", "console"),
        default="text",
        help="output format (default: text)",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG"
    )
    return parser


def load_config(args: argparse.Namespace) -> LengthConfig:
    """Merge --config file and command line options (command line wins).

    Raises:
        ConfigurationError: On unreadable file or invalid values
    """
    data: dict[str, object] = {}

    if args.config is not None:
        try:
            with args.config.open("rb") as f:
                document = tomllib.load(f)
        except OSError as e:
            raise ConfigurationError(f"cannot read {args.config}: {e}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"{args.config}: {e}") from e
        # pyproject.toml style file: only the tool section is ours
        section: object = document
        if "tool" in document:
            tool = document["tool"]
            if not isinstance(tool, dict):
                raise ConfigurationError(f"{args.config}: [tool] must be a table")
            section = tool.get("lengthlint", {})
        if not isinstance(section, dict):
            raise ConfigurationError(f"{args.config}: [tool.lengthlint] must be a table")
        data.update(section)

    for option in _LIMIT_OPTIONS:
        value = getattr(args, option.replace("-", "_"))
        if value is not None:
            data[option] = value

    if args.only is not None:
        data.pop("except", None)
        data["only"] = args.only
    if args.except_ is not None:
        data.pop("only", None)
        data["except"] = args.except_

    return LengthConfig.from_mapping(data)


def render(results: Sequence[CheckResult], fmt: str, output: TextIO) -> None:
    """Write results in the requested format."""
    match fmt:
        case "json":
            JSONReporter(output).report(results)
        case "console":
            output.write(ConsoleReporter().report(results))
        case _:
            PlainTextReporter(output).report(results)


def main(argv: Sequence[str] | None = None, output: TextIO | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments (default: sys.argv[1:])
        output: Report stream (default: sys.stdout)

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    out = output if output is not None else sys.stdout

    verbosity = {0: None, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    configure_logging(verbosity)

    try:
        config = load_config(args)
        loader = JSONTreeLoader()
        checker = LengthChecker(config)
        results = []
        for path in args.trees:
            logger.info("checking %s", path)
            results.append(checker.check(loader.load_file(path), file=path))
    except LengthLintError as e:
        logger.error("%s", e)
        return EXIT_ERROR

    render(results, args.format, out)
    return EXIT_OK if all(r.passed for r in results) else EXIT_VIOLATIONS


if __name__ == "__main__":
    sys.exit(main())
