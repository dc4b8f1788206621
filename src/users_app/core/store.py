"""In-memory user store.

The store owns one ordered ``list`` of :class:`~users_app.core.models.User`
records.  Names are not unique: every lookup targets the *first* record
whose name matches exactly.

Guarantees
----------
* Only records that pass :func:`~users_app.core.validator.validate` are
  ever inserted.
* Order is append order; removal splices out exactly one element.
* No I/O and no persistence.  State lives for the process lifetime.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from users_app.core.models import EditResult, Outcome, User
from users_app.core.validator import validate

logger = logging.getLogger(__name__)


class UserStore:
    """Ordered, session-scoped collection of users."""

    def __init__(self) -> None:
        self._users: list[User] = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self) -> tuple[User, ...]:
        """Return a read-only snapshot of all users in store order."""
        return tuple(self._users)

    def find(self, name: str) -> User | None:
        """Return the first user named *name*, or ``None``."""
        index = self._index_of(name)
        return None if index is None else self._users[index]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, candidate: User) -> Outcome:
        """Append *candidate* if it validates.

        Returns :attr:`Outcome.REJECTED` without touching the store when
        validation fails.
        """
        if not validate(candidate):
            logger.debug("Rejected candidate %r", candidate)
            return Outcome.REJECTED
        self._users.append(candidate)
        logger.debug("Added %r (size=%d)", candidate, len(self._users))
        return Outcome.ADDED

    def remove(self, name: str) -> Outcome:
        """Delete the first user named *name*."""
        index = self._index_of(name)
        if index is None:
            logger.debug("No user named %r to remove", name)
            return Outcome.NOT_FOUND
        removed = self._users.pop(index)
        logger.debug("Removed %r from index %d", removed, index)
        return Outcome.REMOVED

    def edit(self, name: str, replacement: User) -> EditResult:
        """Replace the first user named *name* by delete-then-insert.

        The replacement always lands at the end of the sequence.  The
        two steps are not atomic: when *replacement* is invalid the
        original record has already been removed and is not restored.
        """
        removed = self.remove(name)
        if removed is Outcome.NOT_FOUND:
            return EditResult(removed=removed, added=None)
        added = self.add(replacement)
        result = EditResult(removed=removed, added=added)
        if result.lost:
            logger.warning(
                "Edit of %r dropped the record: replacement %r was rejected",
                name,
                replacement,
            )
        return result

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._users)

    def __bool__(self) -> bool:
        return len(self._users) > 0

    def __iter__(self) -> Iterator[User]:
        return iter(self.list())

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _index_of(self, name: str) -> int | None:
        for index, user in enumerate(self._users):
            if user.name == name:
                return index
        return None
