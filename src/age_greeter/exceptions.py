"""Exception hierarchy for age-greeter.

Every error that crosses a layer boundary inherits from
:class:`AgeGreeterError`.  Raw I/O exceptions must not propagate beyond
the infrastructure layer; they are re-raised as a typed subclass.

Hierarchy
---------
AgeGreeterError
├── InputReadError
└── EnvironmentError

:class:`QuitRequested` is deliberately *not* part of the hierarchy: it
is a control-flow signal, not an error.
"""

from __future__ import annotations


class AgeGreeterError(Exception):
    """Base exception for all age-greeter errors.

    The CLI error boundary renders the message (and the optional hint)
    without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input -----------------------------------------------------------------

class InputReadError(AgeGreeterError):
    """Raised when standard input cannot be read or decoded."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(AgeGreeterError):
    """Raised when an optional runtime dependency is not available."""


# --- Control flow ----------------------------------------------------------

class QuitRequested(Exception):
    """Raised by the age reader when the user types the quit keyword.

    The termination notice has already been printed when this is raised.
    The CLI entry point turns it into a successful exit, so the greeting
    is never reached.
    """
