"""Exception hierarchy for users-app.

Domain outcomes (a rejected record, a missing user, an unknown command)
are *not* exceptions: the store and the command loop report them as
status lines.  The classes here cover conditions that end the session
and are rendered by the CLI error boundary.

Hierarchy
---------
UsersAppError
├── EnvironmentError
└── PromptAbortedError
"""

from __future__ import annotations


class UsersAppError(Exception):
    """Base exception for all users-app errors.

    Carries an optional *hint* shown below the message by the CLI
    error boundary.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


class EnvironmentError(UsersAppError):
    """Raised when an optional UI dependency (rich, questionary) is missing."""


class PromptAbortedError(UsersAppError):
    """Raised when the operator cancels a prompt (Ctrl+C or Esc)."""
