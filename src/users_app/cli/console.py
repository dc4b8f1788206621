"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
keep working when it is not installed.  Output goes to stdout: this is
the application's conversation with the operator, not diagnostics.
"""

from __future__ import annotations

from typing import Any

from users_app.exceptions import EnvironmentError


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
	"""Create a Rich console instance (stdout unless *stderr* is set)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


def rich_available() -> bool:
	"""Return whether Rich can be imported."""
	try:
		_load_rich_console_class()
	except EnvironmentError:
		return False
	return True


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with plain-text fallback."""

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain ``print``."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects)
			return
		rich_console.print(*objects, markup=markup)


console = _ConsoleProxy()
