"""users-app — interactive in-memory user list manager.

Keeps a session-scoped list of users and drives it from a prompt loop.
"""

from users_app.version import __version__

__all__: list[str] = ["__version__"]
