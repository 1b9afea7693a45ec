"""``age-greeter doctor`` — environment diagnostics command.

Checks whether the runtime can show the Korean prompts and read input,
then renders a Rich table (plain text without Rich) on stderr.
"""

from __future__ import annotations

import codecs
import platform
import sys

from age_greeter.cli import exit_codes
from age_greeter.cli.console import err_console
from age_greeter.version import __version__

_OK = "[green]OK[/green]"
_WARN = "[yellow]WARN[/yellow]"
_FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _agegreeter_version_check() -> tuple[str, str, str]:
    return "age-greeter", __version__, _OK


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = _OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _rich_check() -> tuple[str, str, str]:
    """Rich is optional at runtime: missing means plain output, not failure."""
    try:
        import rich  # noqa: F401
    except ImportError:
        return "rich", "NOT INSTALLED", _WARN

    from importlib.metadata import PackageNotFoundError, version

    try:
        return "rich", version("rich"), _OK
    except PackageNotFoundError:
        return "rich", "unknown", _OK


def _is_utf_encoding(encoding: str) -> bool:
    try:
        return codecs.lookup(encoding).name.startswith("utf")
    except LookupError:
        return False


def _stdout_encoding_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the stdout encoding row."""
    encoding = getattr(sys.stdout, "encoding", None) or "unknown"
    status = _OK if _is_utf_encoding(encoding) else _WARN
    return "stdout", encoding, status


def _stdin_check() -> tuple[str, str, str]:
    try:
        interactive = sys.stdin.isatty()
    except (AttributeError, ValueError, OSError):
        return "stdin", "unavailable", _WARN
    return "stdin", "terminal" if interactive else "redirected", _OK


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nage-greeter doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<32} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _print_rich_doctor_table(checks: list[tuple[str, str, str]]) -> bool:
    """Render doctor output with Rich; return ``False`` if Rich is missing."""
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        return False

    table = Table(
        title="age-greeter doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    err_console.print()
    err_console.print(table)
    err_console.print()
    return True


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.  WARN rows do not
        fail the run.
    """
    encoding_check = _stdout_encoding_check()
    checks = [
        _agegreeter_version_check(),
        _python_version_check(),
        _rich_check(),
        encoding_check,
        _stdin_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    if not _print_rich_doctor_table(checks):
        _print_plain_doctor_table(checks)

    _, encoding, encoding_status = encoding_check
    if "WARN" in encoding_status:
        err_console.print(
            f"[yellow]stdout encoding {encoding} may not display Korean text.[/yellow]"
        )
        err_console.print("Run with: [bold]PYTHONIOENCODING=utf-8 age-greeter[/bold]\n")

    if has_failure:
        err_console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    err_console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
