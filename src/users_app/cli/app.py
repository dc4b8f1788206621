"""CLI application entry point for users-app.

This module is the **sole error boundary** for the entire application.
It catches :class:`~users_app.exceptions.UsersAppError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here.  The session is a
  :class:`~users_app.core.command_loop.CommandLoop` wired to the
  questionary prompter and the console reporter.
* There are no functional flags or subcommands: everything happens in
  the interactive loop.  The only options are ``--version`` and
  ``--log-level``.
* Quitting and external termination both exit with
  :data:`exit_codes.SUCCESS`.
"""

from __future__ import annotations

import argparse
import logging
import sys

from users_app.cli import exit_codes
from users_app.cli.console import console
from users_app.cli.logging_setup import DEFAULT_LOG_LEVEL, LOG_LEVELS, configure_logging
from users_app.cli.status import ConsoleReporter
from users_app.core.command_loop import FAREWELL
from users_app.core.models import COMMAND_HELP, Variant
from users_app.core.protocols import Reporter
from users_app.exceptions import PromptAbortedError, UsersAppError
from users_app.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="users-app",
        description="Interactive in-memory user list manager.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=sorted(LOG_LEVELS, key=LOG_LEVELS.__getitem__),
        default=DEFAULT_LOG_LEVEL,
        help="Diagnostic log level written to stderr (default: %(default)s).",
    )
    return parser


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

def show_banner(reporter: Reporter) -> None:
    """Print the welcome text and the list of available commands."""
    reporter.line()
    reporter.line("Welcome to the UsersApp!")
    reporter.line("=" * 36)
    reporter.report(Variant.INFO, "Available actions")
    reporter.line()
    for command, description in COMMAND_HELP.items():
        reporter.line(f"{command.value} – {description}")
    reporter.line()


def _run_session() -> int:
    """Run one interactive session until the operator quits."""
    from users_app.cli.prompts import QuestionaryPrompter
    from users_app.core.command_loop import CommandLoop
    from users_app.core.store import UserStore

    reporter = ConsoleReporter()
    show_banner(reporter)

    loop = CommandLoop(UserStore(), QuestionaryPrompter(), reporter)
    loop.run()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the users-app CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    logger.debug("Starting users-app %s", __version__)

    return _run_session()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except (PromptAbortedError, KeyboardInterrupt):
        reporter = ConsoleReporter()
        reporter.line()
        reporter.report(Variant.INFO, FAREWELL)
        sys.exit(exit_codes.SUCCESS)
    except UsersAppError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
