"""CLI console helpers with optional Rich support.

Optional UI dependencies are imported lazily so that bootstrap paths
(``--help``, ``--version``) and plain output keep working when Rich is
not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from mtg_card_search.exceptions import EnvironmentError


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
	"""Create a Rich console instance targeting stdout (or stderr)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback.

	Text is printed literally: card names and rules text routinely contain
	square brackets and colons, so Rich markup, emoji codes, and
	highlighting are all disabled.  Lines are never wrapped.
	"""

	def print(self, *objects: object, style: str | None = None, end: str = "\n") -> None:
		"""Render with Rich when available, else plain stdout print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, end=end, file=sys.stdout, flush=True)
			return
		rich_console.print(
			*objects,
			style=style,
			end=end,
			markup=False,
			emoji=False,
			highlight=False,
			soft_wrap=True,
		)


console = _ConsoleProxy()
