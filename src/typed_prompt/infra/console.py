"""Console helpers with optional Rich support.

Rich is imported lazily so that ``--help`` and ``--version`` keep
working when it is not installed.  Everything is written to stderr;
stdout is reserved for answers printed by the CLI.
"""

from __future__ import annotations

import sys
from typing import Any

from typed_prompt.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain stderr print.

		With *markup* off the text is emitted verbatim: no ``[tag]``,
		``:emoji:`` or highlighting.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		if markup:
			rich_console.print(*objects)
		else:
			rich_console.print(*objects, markup=False, highlight=False, emoji=False, soft_wrap=True)


console = _ConsoleProxy()


class ConsoleDiagnostics:
	"""``DiagnosticSink`` writing validation failures to stderr."""

	def write(self, line: str) -> None:
		console.print(line, markup=False)
