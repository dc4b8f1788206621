"""Exit-code constants used by the CLI layer.

Quitting and external termination (Ctrl+C, closed prompt) both count as
a clean exit; only failures of the program itself are non-zero.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Operator quit, or the session was interrupted from outside."""

GENERAL_ERROR: int = 1
"""A known UsersAppError was caught.  User-facing message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
