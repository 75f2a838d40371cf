from __future__ import annotations

import logging
from typing import Mapping, Any
import requests

from creatorhub_web.application.ports.http_client_port import HttpClientPort, HttpResponse, HttpTransportError

logger = logging.getLogger(__name__)


class RequestsHttpClient(HttpClientPort):
    """HTTP client adapter backed by a persistent requests.Session.

    - Persists cookies across requests automatically (cookie jar)
    - Session cookies travel as explicit headers set by the callers
    - Logs cookie names and Set-Cookie presence, never cookie values
    """

    def __init__(self, timeout: float = 10.0, default_headers: Mapping[str, str] | None = None) -> None:
        self.session = requests.Session()
        self.timeout = timeout
        if default_headers:
            self.session.headers.update(dict(default_headers))

    def _log(self, msg: str) -> None:
        logger.debug("[RequestsHttpClient] %s", msg)

    def _send(self, method: str, url: str, **kwargs: Any) -> HttpResponse:
        self._log(f"{method} {url} | cookies: {list(self.session.cookies.get_dict().keys())}")
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            self._log(f"{method} {url} | failed: {type(e).__name__}")
            raise HttpTransportError(str(e)) from e
        if resp.headers.get("Set-Cookie"):
            self._log(f"{method} {url} | Set-Cookie received")
        return HttpResponse(resp.status_code, resp.text, str(resp.url), resp.headers, raw=resp)

    def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> HttpResponse:
        return self._send("GET", url, headers=headers)

    def post(
        self,
        url: str,
        *,
        json: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        return self._send("POST", url, json=json, headers=headers)

