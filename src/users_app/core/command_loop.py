"""Interactive command loop.

A single-threaded state machine: wait for a command token, run the
matching branch (which may ask further questions and mutate the store),
report the result, then wait again.  ``quit`` is the only terminal
state.  Each command finishes completely, prompts, mutation and output
included, before the next top-level prompt is issued.

Errors in the domain sense (rejected record, unknown user, unknown
command) are reported as status lines and never raised.
"""

from __future__ import annotations

import logging

from users_app.core.models import (
    Command,
    FieldKind,
    Outcome,
    Question,
    User,
    Variant,
)
from users_app.core.protocols import Prompter, Reporter
from users_app.core.store import UserStore

logger = logging.getLogger(__name__)

ACTION_QUESTION = Question(
    name="action",
    kind=FieldKind.TEXT,
    message="How can I help you?",
)

FAREWELL = "Bye bye!"
UNKNOWN_COMMAND = "Command not found !"
NO_DATA = "No data..."
USERS_HEADER = "Users data"


class CommandLoop:
    """Drive a :class:`UserStore` from operator commands.

    Parameters
    ----------
    store:
        The session's user store.
    prompter:
        Source of operator answers.
    reporter:
        Sink for status lines and tables.
    """

    def __init__(
        self,
        store: UserStore,
        prompter: Prompter,
        reporter: Reporter,
    ) -> None:
        self._store = store
        self._prompter = prompter
        self._reporter = reporter

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Prompt for commands until the operator quits."""
        running = True
        while running:
            answers = self._prompter.prompt([ACTION_QUESTION])
            running = self.step(answers.get(ACTION_QUESTION.name))

    def step(self, token: object) -> bool:
        """Run one command and return whether the loop should continue."""
        command = Command.parse(token)
        logger.debug("Dispatching %r -> %s", token, command)

        match command:
            case Command.LIST:
                self._list()
            case Command.ADD:
                self._add()
            case Command.EDIT:
                self._edit()
            case Command.REMOVE:
                self._remove()
            case Command.QUIT:
                self._reporter.report(Variant.INFO, FAREWELL)
                return False
            case None:
                self._reporter.report(Variant.ERROR, UNKNOWN_COMMAND)
        return True

    # ------------------------------------------------------------------
    # Branches
    # ------------------------------------------------------------------

    def _list(self) -> None:
        users = self._store.list()
        if not users:
            self._reporter.report(Variant.INFO, NO_DATA)
            return
        self._reporter.report(Variant.INFO, USERS_HEADER)
        self._reporter.table(users)

    def _add(self) -> None:
        answers = self._prompter.prompt([
            Question("name", FieldKind.TEXT, "Enter name"),
            Question("age", FieldKind.NUMBER, "Enter age"),
        ])
        self._show(self._store.add(User(answers.get("name"), answers.get("age"))))

    def _edit(self) -> None:
        target = self._prompter.prompt([
            Question(
                "name",
                FieldKind.TEXT,
                "Enter name of the user you want to edit:",
            ),
        ]).get("name")

        current = self._store.find(target)
        if current is None:
            self._show(Outcome.NOT_FOUND)
            return

        answers = self._prompter.prompt([
            Question("name", FieldKind.TEXT, "Enter new name:", default=current.name),
            Question("age", FieldKind.NUMBER, "Enter new age:", default=current.age),
        ])
        result = self._store.edit(
            target,
            User(answers.get("name"), answers.get("age")),
        )
        self._show(result.removed)
        if result.added is not None:
            self._show(result.added)

    def _remove(self) -> None:
        name = self._prompter.prompt([
            Question("name", FieldKind.TEXT, "Enter name"),
        ]).get("name")
        self._show(self._store.remove(name))

    def _show(self, outcome: Outcome) -> None:
        self._reporter.report(outcome.variant, outcome.message)
