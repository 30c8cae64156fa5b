"""CLI application entry point and command routing for vetkit.

This module is the **sole error boundary** for the entire application.
It catches :class:`~vetkit.exceptions.VetkitError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No validation logic lives here — every command delegates to the
  public function surface in ``core`` and ``infra``.
* A failed validation propagates as a ``VetkitError`` and is rendered
  by :func:`cli`, so scripts can rely on the exit code alone.
* Results meant for piping (``range``, ``compare``) go to stdout;
  status messages go to the stderr console.
"""

from __future__ import annotations

import argparse
import sys

from vetkit.cli import exit_codes
from vetkit.cli.console import configure_logging, console
from vetkit.exceptions import VetkitError
from vetkit.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``vetkit file PATH [-e EXT ...] [--absent]``
    * ``vetkit dir PATH [--absent]``
    * ``vetkit range TYPE``
    * ``vetkit compare A B [--tolerance T] [--op eq|le|ge]``
    * ``vetkit doctor``
    """
    parser = argparse.ArgumentParser(
        prog="vetkit",
        description="Validate file system paths and numeric ranges.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Emit debug logging to stderr.",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    file_cmd = commands.add_parser("file", help="Validate a file path.")
    file_cmd.add_argument("path")
    file_cmd.add_argument(
        "-e",
        "--ext",
        dest="extensions",
        action="append",
        default=[],
        metavar="EXT",
        help="Allowed extension including the dot (repeatable).",
    )
    file_cmd.add_argument(
        "--absent",
        action="store_true",
        help="Require that the file does NOT exist yet.",
    )

    dir_cmd = commands.add_parser("dir", help="Validate a directory path.")
    dir_cmd.add_argument("path")
    dir_cmd.add_argument(
        "--absent",
        action="store_true",
        help="Require that the directory does NOT exist yet.",
    )

    range_cmd = commands.add_parser("range", help="Show the range of a numeric type.")
    range_cmd.add_argument("type", metavar="TYPE", help="e.g. uint8, int64, float32, decimal")

    compare_cmd = commands.add_parser("compare", help="Compare two numbers with a tolerance.")
    compare_cmd.add_argument("a", type=float)
    compare_cmd.add_argument("b", type=float)
    compare_cmd.add_argument("-t", "--tolerance", type=float, default=0.0)
    compare_cmd.add_argument(
        "--op",
        choices=("eq", "le", "ge"),
        default="eq",
        help="eq: A == B, le: A <= B, ge: A >= B (default: eq).",
    )

    commands.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_file(path: str, extensions: list[str], absent: bool) -> int:
    from vetkit.infra.filesystem import validate_existing_file, validate_non_existing_file

    if absent:
        validate_non_existing_file(path, extensions)
    else:
        validate_existing_file(path, extensions)
    console.print(f"[bold green]OK[/bold green]  {path}")
    return exit_codes.SUCCESS


def _handle_dir(path: str, absent: bool) -> int:
    from vetkit.infra.filesystem import (
        validate_existing_directory,
        validate_non_existing_directory,
    )

    if absent:
        validate_non_existing_directory(path)
    else:
        validate_existing_directory(path)
    console.print(f"[bold green]OK[/bold green]  {path}")
    return exit_codes.SUCCESS


def _handle_range(type_name: str) -> int:
    from vetkit.core.numeric_types import type_range

    bounds = type_range(type_name)
    print(f"{bounds.numeric_type} {bounds.minimum!r} {bounds.maximum!r}")
    return exit_codes.SUCCESS


def _handle_compare(a: float, b: float, tolerance: float, op: str) -> int:
    """Print ``true``/``false``; the exit code mirrors the result like ``test``."""
    from vetkit.core.tolerance import are_equal, greater_or_equal, smaller_or_equal

    compare = {
        "eq": are_equal,
        "le": smaller_or_equal,
        "ge": greater_or_equal,
    }[op]
    result = compare(a, b, tolerance)
    print("true" if result else "false")
    return exit_codes.SUCCESS if result else exit_codes.GENERAL_ERROR


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from vetkit.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the vetkit CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.verbose:
        configure_logging(verbose=True)

    if args.command == "file":
        return _handle_file(args.path, args.extensions, args.absent)
    if args.command == "dir":
        return _handle_dir(args.path, args.absent)
    if args.command == "range":
        return _handle_range(args.type)
    if args.command == "compare":
        return _handle_compare(args.a, args.b, args.tolerance, args.op)
    return _handle_doctor()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except VetkitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
