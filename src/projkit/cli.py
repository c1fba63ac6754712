"""Command line interface for projkit."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path
from typing import Sequence

from .config import SetupConfig
from .console import Reporter, configure_logging
from .errors import InstallError
from .jobs import JobOutcome, JobStatus
from .prompts import ask_package_manager, ask_tools
from .resolver import resolve_packages
from .scaffold import ToolchainScaffolder
from .tools import PackageManager, Tool, ToolSelection


def _add_skip_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--skip",
        metavar="TOOL",
        type=Tool,
        choices=list(Tool),
        action="append",
        default=[],
        help="Mark a tool as unwanted (repeatable). Choices: "
        + ", ".join(tool.value for tool in Tool),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Set up JavaScript development tooling in the current project"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="install tools and copy their configuration")
    init_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Project directory to set up (defaults to the current directory)",
    )
    init_parser.add_argument(
        "--pm",
        type=PackageManager,
        choices=list(PackageManager),
        help="Package manager to use instead of asking",
    )
    _add_skip_argument(init_parser)
    init_parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Do not ask which tools to install; use every tool not skipped",
    )
    init_parser.add_argument(
        "--templates", type=Path, help="Directory holding the configuration templates"
    )
    init_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the packages and install command without changing anything",
    )

    packages_parser = subparsers.add_parser(
        "packages", help="print the packages that would be installed"
    )
    _add_skip_argument(packages_parser)

    return parser


def _summarize(outcomes: Sequence[JobOutcome], reporter: Reporter) -> None:
    counts = Counter(outcome.status for outcome in outcomes)
    reporter.unimportant(
        f"{counts[JobStatus.SUCCEEDED]} succeeded, "
        f"{counts[JobStatus.FAILED]} failed, "
        f"{counts[JobStatus.SKIPPED]} skipped"
    )


def _handle_init(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    try:
        config = SetupConfig.from_environment(args.directory, args.templates)
    except ValueError as exc:
        parser.error(str(exc))

    reporter = Reporter()
    defaults = ToolSelection.from_unwanted(args.skip, tools=config.tool_order)
    if args.yes:
        selection = defaults
    else:
        selection = ask_tools(reporter.console, tools=config.tool_order, defaults=defaults)
    manager = args.pm or ask_package_manager(reporter.console)

    scaffolder = ToolchainScaffolder(config, reporter)
    if args.dry_run:
        plan = scaffolder.plan(selection, manager)
        print("packages: " + (" ".join(plan.packages) or "(none)"))
        print("command: " + (" ".join(plan.command) if plan.command else "(none)"))
        return 0

    try:
        outcomes = scaffolder.run(selection, manager)
    except InstallError as exc:
        reporter.error(exc)
        return 1

    _summarize(outcomes, reporter)
    return 0


def _handle_packages(args: argparse.Namespace) -> int:
    for package in resolve_packages(ToolSelection.from_unwanted(args.skip)):
        sys.stdout.write(package + "\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    if args.command == "init":
        return _handle_init(args, parser)
    if args.command == "packages":
        return _handle_packages(args)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
