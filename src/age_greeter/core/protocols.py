"""Protocols consumed by the core and CLI layers.

Infrastructure adapters satisfy these structurally; callers depend only
on the protocol, never on a concrete stream reader.
"""

from __future__ import annotations

from typing import Protocol


class LineSource(Protocol):
    """Contract for line-oriented text input."""

    def read_line(self) -> str | None:
        """Return the next line without its terminator.

        Returns ``None`` at end of input.  An empty line is ``""``.

        Raises
        ------
        InputReadError
            When the underlying stream cannot be read or decoded.
        """
        ...  # pragma: no cover
