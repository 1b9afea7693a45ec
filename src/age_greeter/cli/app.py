"""CLI application entry point and command routing for age-greeter.

This module is the **sole error boundary** for the application.  It
catches :class:`~age_greeter.exceptions.AgeGreeterError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a short
message on stderr and returns a well-defined exit code.

Architecture notes
------------------
* Line classification lives in ``core``; stream reading in ``infra``.
* The quit keyword arrives here as :class:`QuitRequested` and becomes a
  successful exit without printing the greeting.
"""

from __future__ import annotations

import argparse
import sys

from age_greeter.cli import exit_codes
from age_greeter.cli.console import err_console
from age_greeter.exceptions import AgeGreeterError, QuitRequested
from age_greeter.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``age-greeter``          — interactive greeting
    * ``age-greeter doctor``   — environment diagnostics
    * ``age-greeter --version``
    """
    parser = argparse.ArgumentParser(
        prog="age-greeter",
        description="Ask for a name and an age, then print a greeting.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        help="Optional command: 'doctor' runs diagnostics.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_greet() -> int:
    """Read the name and age from stdin and print the greeting.

    Raises
    ------
    QuitRequested
        When the user types the quit keyword at the age prompt.
    """
    from age_greeter.cli import messages
    from age_greeter.cli.console import console
    from age_greeter.cli.prompts import read_name, read_validated_age
    from age_greeter.core.models import Greeting
    from age_greeter.infra.line_source import StreamLineSource

    source = StreamLineSource()
    name = read_name(source)
    age = read_validated_age(messages.AGE_LABEL, source)

    console.print(messages.greeting(Greeting(name=name, age=age)), markup=False)
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from age_greeter.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the age-greeter CLI.

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

    if args.command is not None:
        if args.command.lower() != "doctor":
            parser.error(f"unknown command: {args.command}")
        return _handle_doctor()

    try:
        return _handle_greet()
    except QuitRequested:
        return exit_codes.SUCCESS


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
    except AgeGreeterError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
