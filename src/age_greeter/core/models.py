"""Domain models for age-greeter.

All models are **frozen** dataclasses: immutable value objects with no
I/O and no dependency on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Reader limits
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AgeLimits:
    """Constants governing the validated age reader."""

    minimum: int = 0
    """Smallest accepted age (inclusive)."""

    maximum: int = 150
    """Largest accepted age (inclusive)."""

    max_tries: int = 3
    """Number of invalid attempts allowed before falling back."""

    default: int = 0
    """Age used when input runs out or the retry budget is exhausted."""

    quit_keywords: tuple[str, ...] = ("q", "Q")
    """Stripped lines that end the program immediately."""

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(
                f"minimum ({self.minimum}) must not exceed maximum ({self.maximum})"
            )
        if self.max_tries < 1:
            raise ValueError("max_tries must be at least 1")

    def contains(self, value: int) -> bool:
        """Return ``True`` when *value* lies within the inclusive range."""
        return self.minimum <= value <= self.maximum


DEFAULT_LIMITS = AgeLimits()


# ---------------------------------------------------------------------------
# Classification result
# ---------------------------------------------------------------------------

class AgeStatus(enum.Enum):
    """Outcome of classifying a single stripped input line."""

    VALID = "valid"
    QUIT = "quit"
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True, slots=True)
class AgeCheck:
    """Classification of one age input line.

    ``value`` holds the parsed integer for ``VALID`` and ``OUT_OF_RANGE``
    results, and ``None`` otherwise.
    """

    status: AgeStatus
    value: int | None = None

    @property
    def accepted(self) -> bool:
        return self.status is AgeStatus.VALID


# ---------------------------------------------------------------------------
# Greeting
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Greeting:
    """The name and age collected from the user."""

    name: str
    age: int

    @property
    def next_year_age(self) -> int:
        return self.age + 1
