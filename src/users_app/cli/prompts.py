"""questionary-backed prompter for the command loop.

Responsible for:

* Asking each :class:`~users_app.core.models.Question` in order.
* Coercing ``NUMBER`` answers to ``int``/``float`` and re-asking on
  malformed input, so the core only ever sees typed values.
* Substituting a question's default when the operator submits nothing.

questionary is imported lazily so that ``--help`` and ``--version``
keep working without it.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from users_app.core.models import FieldKind, Question
from users_app.exceptions import EnvironmentError, PromptAbortedError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

def _parse_number(text: str) -> int | float | None:
    """Parse *text* as an ``int``, else a finite ``float``, else ``None``."""
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        value = float(stripped)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _validate_number(text: str) -> bool | str:
    """questionary validator: accept blank input or a finite number."""
    if not text.strip() or _parse_number(text) is not None:
        return True
    return "Please enter a number"


def _build_message(question: Question) -> str:
    """Append the default, if any, the way the operator will see it."""
    if question.default is None:
        return question.message
    return f"{question.message} ({question.default})"


def _coerce(question: Question, raw: str) -> Any:
    """Turn a raw answer into the value handed to the core.

    A NUMBER answer is blank when it is empty or all whitespace, the same
    rule :func:`_validate_number` applies.  TEXT answers are never trimmed.
    """
    if question.kind is FieldKind.NUMBER:
        if not raw.strip():
            return question.default
        return _parse_number(raw)
    if raw == "" and question.default is not None:
        return question.default
    return raw


# ---------------------------------------------------------------------------
# Prompter
# ---------------------------------------------------------------------------

class QuestionaryPrompter:
    """Concrete :class:`~users_app.core.protocols.Prompter` using questionary."""

    def prompt(self, questions: Sequence[Question]) -> dict[str, Any]:
        """Ask each question in turn and return answers keyed by name.

        Raises
        ------
        PromptAbortedError
            If the operator presses Ctrl+C or Esc (questionary returns
            ``None``).
        EnvironmentError
            If questionary is not installed.
        """
        questionary = _import_questionary()

        answers: dict[str, Any] = {}
        for question in questions:
            if question.kind is FieldKind.NUMBER:
                raw: str | None = questionary.text(
                    _build_message(question),
                    validate=_validate_number,
                ).ask()
            else:
                raw = questionary.text(_build_message(question)).ask()

            if raw is None:
                raise PromptAbortedError("Prompt cancelled.")

            answers[question.name] = _coerce(question, raw)
        return answers
