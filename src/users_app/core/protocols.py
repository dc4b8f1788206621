"""Protocols (interfaces) consumed by the command loop.

The loop depends only on these contracts, never on questionary or rich
directly.  The CLI layer supplies the concrete adapters; tests supply
scripted fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from users_app.core.models import Question, User, Variant


class Prompter(Protocol):
    """Contract for the interactive prompt backend."""

    def prompt(self, questions: Sequence[Question]) -> dict[str, Any]:
        """Ask *questions* one at a time, in order, and collect answers.

        Returns a dict keyed by :attr:`Question.name`.  ``NUMBER``
        questions yield ``int`` or ``float`` values, or ``None`` when the
        operator submits nothing and the question has no default.  An
        empty answer to a question with a default yields that default.

        Raises
        ------
        PromptAbortedError
            When the operator cancels a prompt.
        """
        ...  # pragma: no cover


class Reporter(Protocol):
    """Contract for rendering loop output."""

    def report(self, variant: Variant, text: str) -> None:
        """Render *text* as a status line styled for *variant*."""
        ...  # pragma: no cover

    def table(self, users: Sequence[User]) -> None:
        """Render *users* as a table, one row per record."""
        ...  # pragma: no cover

    def line(self, text: str = "") -> None:
        """Render a plain line of text."""
        ...  # pragma: no cover
