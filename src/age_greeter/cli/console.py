"""CLI console helpers with optional Rich support.

Rich is imported lazily on every print so that the greeting flow and
``--version`` keep working when Rich is not installed; output then falls
back to plain ``print``.

Two proxies are exported:

* ``console`` writes to stdout (prompts, feedback, greeting).
* ``err_console`` writes to stderr (errors, diagnostics).
"""

from __future__ import annotations

import re
import sys
from typing import Any, Protocol, TextIO

from age_greeter.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?[a-z][a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console bound to the current stdout or stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


def strip_markup(text: str) -> str:
	"""Drop Rich style tags such as ``[bold red]`` for plain output."""
	return _MARKUP_TAG.sub("", text)


class Printer(Protocol):
	"""Anything with the proxy's ``print`` signature (used by prompts)."""

	def print(
		self,
		*objects: object,
		style: str | None = None,
		end: str = "\n",
		markup: bool = True,
	) -> None:
		...  # pragma: no cover


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback.

	With ``markup=False`` the text is written verbatim: no markup, emoji
	codes, highlighting or wrapping.  User-supplied text must always be
	printed that way.
	"""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr = stderr

	@property
	def file(self) -> TextIO:
		return sys.stderr if self._stderr else sys.stdout

	def print(
		self,
		*objects: object,
		style: str | None = None,
		end: str = "\n",
		markup: bool = True,
	) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			self._print_plain(*objects, end=end, markup=markup)
			return
		if markup:
			rich_console.print(*objects, style=style, end=end)
		else:
			rich_console.print(
				*objects,
				style=style,
				end=end,
				markup=False,
				emoji=False,
				highlight=False,
				soft_wrap=True,
			)

	def _print_plain(self, *objects: object, end: str, markup: bool) -> None:
		texts = [
			strip_markup(obj) if markup and isinstance(obj, str) else obj
			for obj in objects
		]
		print(*texts, end=end, file=self.file, flush=True)


console = _ConsoleProxy()
err_console = _ConsoleProxy(stderr=True)
