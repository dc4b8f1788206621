"""Domain models for users-app.

Records and question descriptors are **frozen** dataclasses; the closed
sets of commands, outcomes and display variants are enums.  Nothing in
this module performs I/O or validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


# ---------------------------------------------------------------------------
# User record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class User:
    """A single user entry.

    Construction never validates: a ``User`` may be a *candidate* that
    the store later rejects.
    """

    name: str
    """Display name, also the (non-unique) lookup key."""

    age: Any
    """Age as returned by the prompt layer; valid records hold a positive number."""


# ---------------------------------------------------------------------------
# Display variants and store outcomes
# ---------------------------------------------------------------------------

class Variant(str, Enum):
    """Display category of a status line."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class Outcome(Enum):
    """Result of a store mutation, with the status line it maps to."""

    ADDED = (Variant.SUCCESS, "User has been successfully added!")
    REJECTED = (Variant.ERROR, "Wrong data!")
    REMOVED = (Variant.SUCCESS, "User deleted")
    NOT_FOUND = (Variant.ERROR, "User not found")

    @property
    def variant(self) -> Variant:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


@dataclass(frozen=True, slots=True)
class EditResult:
    """Outcomes of the two steps of an edit (remove, then add)."""

    removed: Outcome
    added: Outcome | None
    """``None`` when nothing was removed and the add step never ran."""

    @property
    def lost(self) -> bool:
        """True when the original record is gone and nothing replaced it."""
        return self.removed is Outcome.REMOVED and self.added is Outcome.REJECTED


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class Command(str, Enum):
    """Top-level command tokens recognised by the prompt loop."""

    LIST = "list"
    ADD = "add"
    EDIT = "edit"
    REMOVE = "remove"
    QUIT = "quit"

    @classmethod
    def parse(cls, token: object) -> Command | None:
        """Return the command for an exact, case-sensitive *token* match."""
        for command in cls:
            if token == command.value:
                return command
        return None


COMMAND_HELP: dict[Command, str] = {
    Command.LIST: "show all users",
    Command.ADD: "add new user to the list",
    Command.EDIT: "edit user from the list",
    Command.REMOVE: "remove user from the list",
    Command.QUIT: "quit the app",
}


# ---------------------------------------------------------------------------
# Question descriptors
# ---------------------------------------------------------------------------

class FieldKind(str, Enum):
    """Value kind a prompt question yields."""

    TEXT = "text"
    NUMBER = "number"


@dataclass(frozen=True, slots=True)
class Question:
    """One question handed to the prompt layer."""

    name: str
    """Key under which the answer is returned."""

    kind: FieldKind
    message: str
    default: Any = None
    """Value used when the operator submits no input; ``None`` for no default."""
