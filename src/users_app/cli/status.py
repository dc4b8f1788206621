"""Console rendering of status lines and the user table.

Maps each :class:`~users_app.core.models.Variant` to a styled status
line and renders the user list as a table.  Rich is used when it is
installed; otherwise everything degrades to plain aligned text.  No
method here raises or returns a value the loop consumes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from users_app.cli.console import console, rich_available
from users_app.core.models import User, Variant
from users_app.exceptions import EnvironmentError

# variant -> (rich style, icon, plain-text prefix)
_STYLES: dict[Variant, tuple[str, str, str]] = {
    Variant.SUCCESS: ("bold green", "✔", "[OK]"),
    Variant.ERROR: ("bold red", "✖", "[ERROR]"),
    Variant.INFO: ("bold cyan", "ℹ", "[INFO]"),
}


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for user list rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


def _escape(text: str) -> str:
    """Escape operator-supplied text so Rich does not parse it as markup."""
    from rich.markup import escape

    return escape(text)


def _format_age(age: object) -> str:
    """Render whole-number floats without a trailing ``.0``."""
    if isinstance(age, float) and age.is_integer():
        return str(int(age))
    return str(age)


class ConsoleReporter:
    """Concrete :class:`~users_app.core.protocols.Reporter` for the terminal."""

    def __init__(self) -> None:
        self._rich: bool = rich_available()

    def report(self, variant: Variant, text: str) -> None:
        """Print *text* as a status line styled for *variant*."""
        style, icon, prefix = _STYLES[variant]
        if self._rich:
            console.print(f"[{style}]{icon}[/{style}] {_escape(text)}")
        else:
            print(f"{prefix} {text}")

    def table(self, users: Sequence[User]) -> None:
        """Print *users* as a table with a zero-based index column."""
        if not self._rich:
            _print_plain_table(users)
            return

        table_class = _import_rich_table()
        table = table_class(
            show_header=True,
            header_style="bold magenta",
            border_style="dim",
        )
        table.add_column("(index)", justify="right", style="dim")
        table.add_column("name", justify="left", min_width=10)
        table.add_column("age", justify="right", min_width=5)

        for index, user in enumerate(users):
            table.add_row(str(index), _escape(user.name), _format_age(user.age))

        console.print(table)

    def line(self, text: str = "") -> None:
        """Print a plain line without markup parsing."""
        if self._rich:
            console.print(text, markup=False)
        else:
            print(text)


def _print_plain_table(users: Sequence[User]) -> None:
    """Render the user table without Rich."""
    width = max([len("name"), *(len(user.name) for user in users)])
    print(f"{'(index)':>7}  {'name':<{width}}  {'age':>5}")
    print("-" * (7 + 2 + width + 2 + 5))
    for index, user in enumerate(users):
        print(f"{index:>7}  {user.name:<{width}}  {_format_age(user.age):>5}")
