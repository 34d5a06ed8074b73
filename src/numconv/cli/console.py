"""Console helpers with optional Rich support.

Rich is never imported at module level, so ``--help``, ``--version``
and the plain numbered shell keep working without it.
"""

from __future__ import annotations

import sys
from typing import Any

from numconv.exceptions import EnvironmentError, NumconvError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console bound to stderr (default) or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible stderr proxy with a plain-text fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def print_error(exc: NumconvError) -> None:
	"""Render ``Error: <message>`` and the optional hint on stderr."""
	try:
		rich_console = get_rich_console()
	except EnvironmentError:
		print(f"Error: {exc}", file=sys.stderr)
		if exc.hint:
			print(f"Hint: {exc.hint}", file=sys.stderr)
		return

	from rich.markup import escape

	rich_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
	if exc.hint:
		rich_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
