"""Infrastructure: line-oriented reading from a text stream.

Wraps ``readline()`` on a text stream (``sys.stdin`` by default) and
exposes the :class:`~age_greeter.core.protocols.LineSource` contract:
the terminator is removed and end of input is reported as ``None``.
"""

from __future__ import annotations

import sys
from typing import TextIO

from age_greeter.exceptions import InputReadError


class StreamLineSource:
    """Read lines from a text stream.

    Parameters
    ----------
    stream:
        Text stream to read from.  When ``None`` (default), the current
        ``sys.stdin`` is looked up on every read so that redirected or
        monkeypatched stdin is honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO | None = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdin

    def read_line(self) -> str | None:
        """Return the next line without ``\\n``/``\\r\\n``, or ``None`` at EOF.

        Raises
        ------
        InputReadError
            When the stream is closed, unreadable, or yields bytes that
            cannot be decoded.
        """
        try:
            raw = self.stream.readline()
        except UnicodeDecodeError as exc:
            raise InputReadError(
                "Input could not be decoded.",
                hint="Make sure the terminal sends UTF-8 (e.g. PYTHONIOENCODING=utf-8).",
            ) from exc
        except (OSError, ValueError) as exc:
            # ValueError: I/O operation on closed file.
            raise InputReadError(f"Could not read from input: {exc}") from exc

        if raw == "":
            return None
        return _strip_terminator(raw)


def _strip_terminator(raw: str) -> str:
    """Remove exactly one trailing line terminator."""
    if raw.endswith("\r\n"):
        return raw[:-2]
    if raw.endswith("\n"):
        return raw[:-1]
    return raw
