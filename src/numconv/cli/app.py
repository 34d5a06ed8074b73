"""CLI application entry point and command routing for numconv.

This module is the **sole error boundary** for the application.  It
catches :class:`~numconv.exceptions.NumconvError`, ``KeyboardInterrupt``
and any unexpected ``Exception``, renders a short message, and returns a
well-defined exit code.

Modes
-----
* ``numconv``                  — numbered interactive shell
* ``numconv --select``         — arrow-key interactive shell
* ``numconv -c N NUMBER``      — one conversion, then exit
* ``numconv --list``           — show the conversion menu
* ``numconv --version``
"""

from __future__ import annotations

import argparse
import sys

from numconv.cli import exit_codes
from numconv.cli.console import console, print_error
from numconv.exceptions import NumconvError
from numconv.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="numconv",
        description="Convert numbers between binary, octal, decimal and "
        "hexadecimal.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-c",
        "--command",
        type=int,
        metavar="N",
        default=None,
        help="Run menu conversion N (see --list) on NUMBER and exit.",
    )
    parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="Show the numbered conversion menu and exit.",
    )
    parser.add_argument(
        "--select",
        action="store_true",
        help="Pick conversions with the arrow keys (needs questionary).",
    )
    parser.add_argument(
        "number",
        nargs="?",
        default=None,
        help="Digit-string to convert; only valid together with --command.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_one_shot(choice: int, number: str) -> int:
    """Run a single menu conversion and print its result line.

    Errors are not caught here; they reach :func:`cli`.
    """
    from numconv.core.commands import get_command
    from numconv.core.dispatcher import run_command

    result = run_command(get_command(choice), number)
    print(result.line)
    return exit_codes.SUCCESS


def _handle_list() -> int:
    from numconv.cli.menu import render_menu

    render_menu()
    return exit_codes.SUCCESS


def _handle_shell() -> int:
    from numconv.cli.shell import run_shell

    return run_shell()


def _handle_select() -> int:
    from numconv.cli.select_prompt import run_select_shell

    return run_select_shell()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the numconv CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list:
        return _handle_list()

    if args.command is not None:
        if args.number is None:
            parser.error("--command requires a NUMBER to convert")
        return _handle_one_shot(args.command, args.number)

    if args.number is not None:
        parser.error("NUMBER is only accepted together with --command")

    if args.select:
        return _handle_select()

    return _handle_shell()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` so the process never exits with a raw stack trace
    during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except NumconvError as exc:
        print_error(exc)
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
