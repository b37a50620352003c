"""CLI module for the gauntlet test harness."""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from gauntlet.config import GauntletConfig, load_config
from gauntlet.errors import GauntletError, ModuleLoadError
from gauntlet.reports import ConsoleReporter, Reporter
from gauntlet.testing import Registry, Runner, get_registry
from gauntlet.types import Outcome


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the gauntlet CLI."""
    console = Console()
    try:
        config = load_config()
    except GauntletError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(2) from exc

    parser = _build_parser()
    args_in = list(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args([*config.addopts, *args_in] if config.addopts else args_in)

    if args.command is None:
        parser.print_help()
        raise SystemExit(0)

    _configure_logging(args.log_level or config.log_level)
    raise SystemExit(_dispatch(args, config, console))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gauntlet", description="Gauntlet unit test harness")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Run all registered test classes")
    run_parser.add_argument("modules", nargs="*", help="Modules that register test classes")

    one_parser = subparsers.add_parser("one", help="Run a single test method")
    one_parser.add_argument("class_name", help="Name of the registered test class")
    one_parser.add_argument("method_name", help="Name of the test method")
    one_parser.add_argument(
        "-m",
        "--module",
        dest="modules",
        action="append",
        default=[],
        help="Module that registers test classes (repeatable)",
    )

    for p in (run_parser, one_parser):
        p.add_argument("-q", "--quiet", action="count", default=0, help="Reduce CLI output")
        p.add_argument("-v", "--verbose", action="count", default=0, help="Increase CLI output")
        p.add_argument("--log-level", type=str.upper, help="Log level for diagnostics")

    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _resolve_modules(args: argparse.Namespace, config: GauntletConfig) -> list[str]:
    if args.modules:
        return args.modules
    return config.modules


def _resolve_verbosity(args: argparse.Namespace, config: GauntletConfig) -> int:
    return config.verbosity + args.verbose - args.quiet


def _import_modules(module_names: Sequence[str]) -> None:
    """Import test modules so their classes register themselves."""
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    for name in module_names:
        try:
            importlib.import_module(name)
        except Exception as exc:
            raise ModuleLoadError(name, exc) from exc


def _dispatch(
    args: argparse.Namespace,
    config: GauntletConfig,
    console: Console,
    registry: Registry | None = None,
) -> int:
    try:
        _import_modules(_resolve_modules(args, config))
    except ModuleLoadError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        return 2

    runner = Runner(registry if registry is not None else get_registry())
    reporter: Reporter = ConsoleReporter(console=console, verbosity=_resolve_verbosity(args, config))

    if args.command == "one":
        result = runner.run_one(args.class_name, args.method_name)
        reporter.report_result(result)
        return 0 if result.outcome in (Outcome.PASS, Outcome.IGNORED) else 1

    reports = runner.run_all()
    reporter.report_run(reports)
    return 0 if all(report.failed == 0 and report.errors == 0 for report in reports) else 1


__all__ = ["main"]
