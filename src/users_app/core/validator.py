"""Record validation — a pure predicate over candidate users."""

from __future__ import annotations

import math
from numbers import Real


def is_valid_name(name: object) -> bool:
    """Return ``True`` for a non-empty ``str``.  No trimming is applied."""
    return isinstance(name, str) and len(name) > 0


def is_valid_age(age: object) -> bool:
    """Return ``True`` for a real number strictly greater than zero.

    ``bool`` is rejected even though it subclasses ``int``, and so is NaN.
    """
    if isinstance(age, bool) or not isinstance(age, Real):
        return False
    if math.isnan(age):
        return False
    return age > 0


def validate(candidate: object) -> bool:
    """Return whether *candidate* may be stored.

    Any object with ``name`` and ``age`` attributes is accepted as a
    candidate; a missing attribute makes it invalid.  Never raises.
    """
    name = getattr(candidate, "name", None)
    age = getattr(candidate, "age", None)
    return is_valid_name(name) and is_valid_age(age)
