from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol
import json


class HttpTransportError(Exception):
    """The request never produced an HTTP response (DNS, connect, timeout, ...)."""


class HttpResponse:
    def __init__(
        self,
        status_code: int,
        text: str,
        url: str,
        headers: Mapping[str, str],
        *,
        raw: Any | None = None,
    ) -> None:
        self.status_code = status_code
        self.text = text
        self.url = url
        self.headers = dict(headers)
        self._raw = raw

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decodes the body. Raises ValueError when it is not JSON."""
        if self._raw is not None and hasattr(self._raw, "json"):
            return self._raw.json()
        return json.loads(self.text)


class HttpClientPort(Protocol):
    """Minimal blocking HTTP client abstraction, used by the server-side loader."""

    def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> HttpResponse: ...
    def post(
        self,
        url: str,
        *,
        json: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse: ...


class AsyncHttpClientPort(Protocol):
    """Non-blocking counterpart, used by the bookmark mutation client.

    Cookies set on it are sent with every request (the ambient session credential).
    """

    async def post(
        self,
        url: str,
        *,
        json: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse: ...
    def set_cookies(self, cookies: Mapping[str, str]) -> None: ...
