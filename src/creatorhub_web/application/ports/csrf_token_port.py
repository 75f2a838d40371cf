from __future__ import annotations

from typing import Protocol

from creatorhub_web.domain.model import AntiForgeryToken, CookieSpec


class CsrfTokenPort(Protocol):
    """Issues anti-forgery tokens bound to a session and scopes them as cookies."""

    def issue(self, session: str) -> AntiForgeryToken | None:
        """Returns a fresh token, or None when the session is not trusted."""
        ...

    def cookie_for(self, token: AntiForgeryToken) -> CookieSpec: ...
