"""Shared pytest fixtures for the users-app test suite.

Guidelines
----------
* No terminal interaction: the loop is driven by scripted prompters.
* Output is captured by a recording reporter, not by Rich.
* Core tests must be pure — no side effects beyond the store under test.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from tests.fakes import RecordingReporter
from users_app.core.store import UserStore


@pytest.fixture()
def store() -> UserStore:
    return UserStore()


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture(autouse=True)
def _reset_app_logger() -> Iterator[None]:
    """Detach handlers installed by ``configure_logging`` during a test."""
    yield
    logger = logging.getLogger("users_app")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
