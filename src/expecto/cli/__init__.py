"""CLI module for the expecto test runner."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from expecto.config import ExpectoConfig, load_config
from expecto.errors import ConfigurationError
from expecto.reports import ConsoleReporter
from expecto.testing import NamePattern, Runner, load_suite


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for expecto CLI."""
    parser = _build_parser()
    args_in = list(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args(args_in)
    if args.command != "test":
        parser.print_help()
        raise SystemExit(0)

    console = Console()
    try:
        config = load_config()
    except ConfigurationError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(2) from exc

    if config.addopts:
        args = parser.parse_args(["test", *config.addopts, *args_in[1:]])

    exit_code = asyncio.run(_run_tests(args, config, console))
    raise SystemExit(exit_code)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="expecto", description="expecto test runner")
    subparsers = parser.add_subparsers(dest="command")

    test_parser = subparsers.add_parser("test", help="Run the tests declared in a file")
    test_parser.add_argument("path", help="Python file declaring tests")
    test_parser.add_argument(
        "-t",
        "--test-name-pattern",
        dest="name_pattern",
        help="Run only tests whose full name matches this regular expression",
    )
    test_parser.add_argument("--maxfail", type=int, help="Stop after this many failures")
    test_parser.add_argument(
        "--timeout",
        type=float,
        help="Default per-test timeout in seconds",
    )
    test_parser.add_argument("-q", "--quiet", action="count", default=0, help="Reduce CLI output")
    test_parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase CLI output"
    )
    return parser


def _resolve_name_pattern(args: argparse.Namespace, config: ExpectoConfig) -> str | None:
    return args.name_pattern or config.name_pattern


def _resolve_maxfail(args: argparse.Namespace, config: ExpectoConfig) -> int | None:
    if args.maxfail is not None:
        return args.maxfail if args.maxfail > 0 else None
    return config.maxfail


def _resolve_verbosity(args: argparse.Namespace, config: ExpectoConfig) -> int:
    return config.verbosity + args.verbose - args.quiet


def _resolve_timeout(args: argparse.Namespace, config: ExpectoConfig) -> float:
    if args.timeout is not None and args.timeout > 0:
        return args.timeout
    return config.timeout


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity >= 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


async def _run_tests(args: argparse.Namespace, config: ExpectoConfig, console: Console) -> int:
    name_pattern = _resolve_name_pattern(args, config)
    maxfail = _resolve_maxfail(args, config)
    verbosity = _resolve_verbosity(args, config)
    timeout = _resolve_timeout(args, config)
    _configure_logging(verbosity)

    if name_pattern:
        try:
            NamePattern(name_pattern)
        except ConfigurationError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            return 2

    try:
        suite = load_suite(args.path)
    except FileNotFoundError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        return 2
    except Exception as exc:
        console.print(f"[red]Error loading {escape(args.path)}: {type(exc).__name__}: {escape(str(exc))}[/red]")
        return 2

    runner = Runner(
        timeout=timeout,
        maxfail=maxfail,
        name_pattern=name_pattern,
        reporters=[ConsoleReporter(console=console, verbosity=verbosity)],
    )
    try:
        run_result = await runner.run(suite)
    except ConfigurationError as exc:
        console.print(f"[red]Configuration error: {escape(str(exc))}[/red]")
        return 2

    return run_result.exit_code


__all__ = ["main"]
