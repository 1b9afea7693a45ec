"""Interactive prompts for the greeting flow.

This module owns the conversation with the user:

* Prompting for and reading the name.
* The bounded-retry validated age loop, with its feedback messages.

Line classification itself is pure and lives in
:mod:`age_greeter.core.age_parser`; lines come from any
:class:`~age_greeter.core.protocols.LineSource`.
"""

from __future__ import annotations

from age_greeter.cli import messages
from age_greeter.cli.console import Printer, console
from age_greeter.core.age_parser import check_age
from age_greeter.core.models import DEFAULT_LIMITS, AgeLimits, AgeStatus
from age_greeter.core.protocols import LineSource
from age_greeter.exceptions import QuitRequested


def read_name(source: LineSource, out: Printer = console) -> str:
    """Prompt for a name and return the line verbatim.

    No trimming or validation is applied.  End of input gives ``""``.
    """
    out.print(messages.NAME_PROMPT, end="", markup=False)
    line = source.read_line()
    return "" if line is None else line


def read_validated_age(
    label: str,
    source: LineSource,
    out: Printer = console,
    limits: AgeLimits = DEFAULT_LIMITS,
) -> int:
    """Prompt for an age until a valid one is entered or the budget runs out.

    Parameters
    ----------
    label:
        Caller-supplied text shown before the range hint.
    source:
        Where input lines come from.
    out:
        Where prompts and feedback go.
    limits:
        Accepted range, retry budget, fallback value and quit keywords.

    Returns
    -------
    int
        The first in-range value entered, or ``limits.default`` when the
        input ends or ``limits.max_tries`` attempts fail.

    Raises
    ------
    QuitRequested
        When a quit keyword is entered.  The termination notice has
        already been printed.
    InputReadError
        When *source* cannot be read.
    """
    for attempt in range(1, limits.max_tries + 1):
        out.print(messages.age_prompt(label, limits), end="", markup=False)

        line = source.read_line()
        if line is None:
            # End of input is not a retry: no further prompts, no notice.
            return limits.default

        result = check_age(line, limits)
        if result.status is AgeStatus.QUIT:
            out.print(messages.QUIT_NOTICE, markup=False)
            raise QuitRequested()
        if result.accepted and result.value is not None:
            return result.value

        if result.status is AgeStatus.OUT_OF_RANGE:
            out.print(messages.out_of_range(limits), style="yellow", markup=False)
        else:
            out.print(messages.NOT_A_NUMBER, style="yellow", markup=False)
        out.print(messages.remaining_attempts(limits.max_tries - attempt), markup=False)

    out.print(messages.attempts_exhausted(limits), style="red", markup=False)
    return limits.default
