"""Logging configuration for the CLI.

Diagnostics go to stderr through :class:`rich.logging.RichHandler`, or
a plain :class:`logging.StreamHandler` when Rich is not installed.  The
default level is WARNING so the interactive session stays uncluttered.
"""

from __future__ import annotations

import logging

from users_app.cli.console import get_rich_console
from users_app.exceptions import EnvironmentError

LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

DEFAULT_LOG_LEVEL = "warning"


def _build_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler

        rich_console = get_rich_console(stderr=True)
    except (ModuleNotFoundError, EnvironmentError):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s: %(message)s"),
        )
        return handler
    return RichHandler(console=rich_console, show_path=False)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Attach a single handler to the ``users_app`` logger at *level*.

    Safe to call more than once: previously attached handlers are
    replaced rather than stacked.
    """
    logger = logging.getLogger("users_app")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(_build_handler())
    logger.setLevel(LOG_LEVELS[level])
