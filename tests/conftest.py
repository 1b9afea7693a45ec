"""Shared pytest fixtures and configuration for the age-greeter test suite.

Guidelines
----------
* No real terminal: stdin is always an in-memory stream or a fake.
* Core tests must be pure — no side effects.
* Rich must never emit colour codes into captured output.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest


class FakeLineSource:
    """In-memory :class:`LineSource`; ``None`` once the lines run out."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: list[str] = list(lines)
        self.reads: int = 0

    def read_line(self) -> str | None:
        self.reads += 1
        if not self._lines:
            return None
        return self._lines.pop(0)


class RecordingConsole:
    """Console stand-in that records every ``print`` call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None, str]] = []

    def print(
        self,
        *objects: object,
        style: str | None = None,
        end: str = "\n",
        markup: bool = True,
    ) -> None:
        self.calls.append((" ".join(str(obj) for obj in objects), style, end))

    @property
    def text(self) -> str:
        """Everything printed, as a terminal would show it."""
        return "".join(text + end for text, _, end in self.calls)

    @property
    def messages(self) -> list[str]:
        """Newline-terminated messages only (prompts excluded)."""
        return [text for text, _, end in self.calls if end == "\n"]


@pytest.fixture(autouse=True)
def _plain_rich_output(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def recording_console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def line_source() -> Callable[..., FakeLineSource]:
    """Factory: ``line_source("Alice", "30")``."""

    def _make(*lines: str) -> FakeLineSource:
        return FakeLineSource(lines)

    return _make
