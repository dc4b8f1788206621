"""Allow ``python -m users_app`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m users_app`` behaves exactly like the ``users-app`` script.
"""

from __future__ import annotations

from users_app.cli.app import cli

if __name__ == "__main__":
    cli()
