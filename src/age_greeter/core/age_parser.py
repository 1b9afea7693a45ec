"""Pure classification of age input lines.

Every function here is deterministic and free of I/O.  The CLI retry
loop feeds raw lines through :func:`check_age` and reacts to the
returned :class:`~age_greeter.core.models.AgeCheck`.

Pipeline order (enforced by :func:`check_age`):

1. **Strip** — remove leading/trailing ASCII whitespace.
2. **Quit** — an exact quit keyword short-circuits everything.
3. **Parse** — read the integer at the start of the first token.
4. **Range** — accept only values inside the configured limits.
"""

from __future__ import annotations

import re

from age_greeter.core.models import DEFAULT_LIMITS, AgeCheck, AgeLimits, AgeStatus

_LEADING_INTEGER = re.compile(r"[+-]?[0-9]+")

# ASCII whitespace only; U+3000 and other Unicode spaces are input, not padding.
_WHITESPACE = " \t\n\r\v\f"

# Values a 32-bit signed int can hold; anything wider is not a number.
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def strip_line(line: str) -> str:
    """Remove leading and trailing ASCII whitespace."""
    return line.strip(_WHITESPACE)


def is_quit_keyword(line: str, limits: AgeLimits = DEFAULT_LIMITS) -> bool:
    """Return ``True`` when the stripped *line* is a quit keyword."""
    return strip_line(line) in limits.quit_keywords


def parse_first_int(line: str) -> int | None:
    """Parse the integer at the start of the first token of *line*.

    Leading whitespace is skipped, then an optional sign and ASCII digits
    are read; whatever follows is ignored (``"5 10"`` and ``"30살"`` give
    ``5`` and ``30``).  Returns ``None`` when no digits start the token
    or when the value does not fit a 32-bit signed integer.
    """
    match = _LEADING_INTEGER.match(line.lstrip(_WHITESPACE))
    if match is None:
        return None
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def check_age(line: str, limits: AgeLimits = DEFAULT_LIMITS) -> AgeCheck:
    """Classify one raw input line against *limits*."""
    if is_quit_keyword(line, limits):
        return AgeCheck(AgeStatus.QUIT)

    value = parse_first_int(line)
    if value is None:
        return AgeCheck(AgeStatus.NOT_A_NUMBER)
    if not limits.contains(value):
        return AgeCheck(AgeStatus.OUT_OF_RANGE, value)
    return AgeCheck(AgeStatus.VALID, value)
