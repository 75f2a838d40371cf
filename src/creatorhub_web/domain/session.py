from __future__ import annotations

from collections.abc import Mapping

SESSION_COOKIE = "CH-SESSION"


def read_session(cookies: Mapping[str, str], name: str = SESSION_COOKIE) -> str | None:
    """Returns the session cookie value, treating an empty value as absent."""
    value = cookies.get(name)
    return value or None


def is_logged_in(cookies: Mapping[str, str], name: str = SESSION_COOKIE) -> bool:
    """Whether the request carries a session cookie. Does not validate it."""
    return read_session(cookies, name) is not None
