"""Core layer — user records, validation, the store and the command loop.

Rules
-----
* No ``print()`` calls.
* No imports from ``cli``; no rich, no questionary.
* Operator I/O only through the :mod:`~users_app.core.protocols` contracts.
"""

from users_app.core.command_loop import CommandLoop
from users_app.core.models import (
    Command,
    EditResult,
    FieldKind,
    Outcome,
    Question,
    User,
    Variant,
)
from users_app.core.protocols import Prompter, Reporter
from users_app.core.store import UserStore
from users_app.core.validator import validate

__all__: list[str] = [
    "Command",
    "CommandLoop",
    "EditResult",
    "FieldKind",
    "Outcome",
    "Prompter",
    "Question",
    "Reporter",
    "User",
    "UserStore",
    "Variant",
    "validate",
]
