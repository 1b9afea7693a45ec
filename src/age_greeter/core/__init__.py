"""Core layer — pure models and input classification.

Rules
-----
* No ``print()`` calls.
* No stream or filesystem I/O.
* No imports from ``cli`` or ``infra``.
"""

from age_greeter.core.age_parser import (
    check_age,
    is_quit_keyword,
    parse_first_int,
    strip_line,
)
from age_greeter.core.models import AgeCheck, AgeLimits, AgeStatus, Greeting
from age_greeter.core.protocols import LineSource

__all__: list[str] = [
    "AgeCheck",
    "AgeLimits",
    "AgeStatus",
    "Greeting",
    "LineSource",
    "check_age",
    "is_quit_keyword",
    "parse_first_int",
    "strip_line",
]
