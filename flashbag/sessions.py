import typing

from starlette.requests import HTTPConnection
from starsessions import (
    CookieStore,
    InMemoryStore,
    SessionAutoloadMiddleware,
    SessionMiddleware,
    SessionStore,
    load_session,
)

type Session = typing.MutableMapping[str, typing.Any]


def get_session(connection: HTTPConnection) -> Session | None:
    """Return the session of the current request or None if sessions are not enabled."""
    return typing.cast(Session | None, connection.scope.get("session"))


__all__ = [
    "Session",
    "get_session",
    "SessionMiddleware",
    "SessionAutoloadMiddleware",
    "SessionStore",
    "InMemoryStore",
    "CookieStore",
    "load_session",
]
