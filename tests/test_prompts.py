"""Tests for the questionary-backed prompter (cli/prompts.py).

``questionary`` is replaced by a MagicMock through the
``_import_questionary`` seam — no terminal interaction.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from tests.fakes import RecordingReporter
from users_app.cli.prompts import (
    QuestionaryPrompter,
    _build_message,
    _coerce,
    _parse_number,
    _validate_number,
)
from users_app.core.command_loop import CommandLoop
from users_app.core.models import FieldKind, Question, User, Variant
from users_app.core.store import UserStore
from users_app.exceptions import PromptAbortedError


def _text(name: str = "name", default: Any = None) -> Question:
    return Question(name, FieldKind.TEXT, "Enter name", default=default)


def _number(name: str = "age", default: Any = None) -> Question:
    return Question(name, FieldKind.NUMBER, "Enter age", default=default)


def _questionary(*answers: str | None) -> MagicMock:
    """Build a questionary stand-in whose ``text().ask()`` yields *answers*."""
    questionary_mod = MagicMock()
    questionary_mod.text.return_value.ask.side_effect = list(answers)
    return questionary_mod


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

class TestParseNumber:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("30", 30), (" 42 ", 42), ("-1", -1), ("2.5", 2.5), ("0", 0)],
    )
    def test_numbers(self, text: str, expected: float) -> None:
        assert _parse_number(text) == expected

    def test_integers_stay_int(self) -> None:
        assert isinstance(_parse_number("30"), int)

    @pytest.mark.parametrize("text", ["abc", "", "3a", "nan", "inf"])
    def test_non_numbers(self, text: str) -> None:
        assert _parse_number(text) is None


class TestValidateNumber:
    def test_blank_allowed(self) -> None:
        assert _validate_number("") is True

    def test_number_allowed(self) -> None:
        assert _validate_number("12") is True

    def test_garbage_returns_message(self) -> None:
        assert _validate_number("twelve") == "Please enter a number"


class TestBuildMessage:
    def test_without_default(self) -> None:
        assert _build_message(_text()) == "Enter name"

    def test_with_default(self) -> None:
        assert _build_message(_number(default=30)) == "Enter age (30)"


class TestCoerce:
    def test_blank_uses_default(self) -> None:
        assert _coerce(_text(default="Ann"), "") == "Ann"
        assert _coerce(_number(default=30), "") == 30

    def test_blank_text_without_default_is_empty(self) -> None:
        assert _coerce(_text(), "") == ""

    def test_blank_number_without_default_is_none(self) -> None:
        assert _coerce(_number(), "") is None

    def test_text_is_not_trimmed(self) -> None:
        assert _coerce(_text(), " Ann ") == " Ann "

    def test_number_is_parsed(self) -> None:
        assert _coerce(_number(default=30), "31") == 31

    def test_whitespace_number_uses_default(self) -> None:
        assert _coerce(_number(default=30), "  ") == 30

    def test_whitespace_number_without_default_is_none(self) -> None:
        assert _coerce(_number(), "   ") is None

    def test_whitespace_text_is_kept(self) -> None:
        assert _coerce(_text(default="Ann"), "  ") == "  "


# ---------------------------------------------------------------------------
# QuestionaryPrompter
# ---------------------------------------------------------------------------

class TestQuestionaryPrompter:
    @patch("users_app.cli.prompts._import_questionary")
    def test_answers_keyed_by_name(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary("Bob", "25")
        answers = QuestionaryPrompter().prompt([_text(), _number()])
        assert answers == {"name": "Bob", "age": 25}

    @patch("users_app.cli.prompts._import_questionary")
    def test_questions_asked_in_order(self, mock_q: MagicMock) -> None:
        questionary_mod = _questionary("Bob", "25")
        mock_q.return_value = questionary_mod
        QuestionaryPrompter().prompt([_text(), _number()])
        messages = [c.args[0] for c in questionary_mod.text.call_args_list]
        assert messages == ["Enter name", "Enter age"]

    @patch("users_app.cli.prompts._import_questionary")
    def test_number_question_has_validator(self, mock_q: MagicMock) -> None:
        questionary_mod = _questionary("25")
        mock_q.return_value = questionary_mod
        QuestionaryPrompter().prompt([_number()])
        assert questionary_mod.text.call_args.kwargs["validate"] is _validate_number

    @patch("users_app.cli.prompts._import_questionary")
    def test_defaults_applied_on_blank(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary("", "")
        answers = QuestionaryPrompter().prompt(
            [_text(default="Ann"), _number(default=30)],
        )
        assert answers == {"name": "Ann", "age": 30}

    @patch("users_app.cli.prompts._import_questionary")
    def test_cancel_raises_prompt_aborted(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary("Bob", None)
        with pytest.raises(PromptAbortedError):
            QuestionaryPrompter().prompt([_text(), _number()])

    @patch("users_app.cli.prompts._import_questionary")
    def test_empty_question_list(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary()
        assert QuestionaryPrompter().prompt([]) == {}

    @patch("users_app.cli.prompts._import_questionary")
    def test_whitespace_age_falls_back_to_default(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary("   ")
        answers = QuestionaryPrompter().prompt([_number(default=30)])
        assert answers == {"age": 30}


# ---------------------------------------------------------------------------
# Edit flow through the real prompter
# ---------------------------------------------------------------------------

class TestEditWithQuestionaryPrompter:
    @patch("users_app.cli.prompts._import_questionary")
    def test_whitespace_age_keeps_record(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary("Ann", "", "  ")
        store = UserStore()
        store.add(User("Ann", 30))
        reporter = RecordingReporter()

        CommandLoop(store, QuestionaryPrompter(), reporter).step("edit")

        assert store.list() == (User("Ann", 30),)
        assert reporter.statuses == [
            (Variant.SUCCESS, "User deleted"),
            (Variant.SUCCESS, "User has been successfully added!"),
        ]
