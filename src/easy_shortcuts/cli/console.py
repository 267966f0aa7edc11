"""Stderr console helpers with optional Rich support.

Rich is imported lazily so the fail-fast path still works, with plain
``print`` output, when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from easy_shortcuts.exceptions import EnvironmentError


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

	def print(self, *objects: object) -> None:
		"""Render markup with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def line(self, text: str) -> None:
		"""Write *text* verbatim as one unwrapped stderr line."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(text, file=sys.stderr)
			return
		rich_console.print(
			text, markup=False, highlight=False, emoji=False, soft_wrap=True,
		)


console = _ConsoleProxy()
