from __future__ import annotations
import logging
from typing import Mapping, Any
import httpx
from creatorhub_web.application.ports.http_client_port import (
    AsyncHttpClientPort,
    HttpClientPort,
    HttpResponse,
    HttpTransportError,
)

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/json, text/plain, */*",
    "User-Agent": "creatorhub-web/0.1 httpx",
}


def _wrap(resp: httpx.Response) -> HttpResponse:
    return HttpResponse(resp.status_code, resp.text, str(resp.url), resp.headers, raw=resp)


class HttpxClient(HttpClientPort):
    def __init__(self, timeout: float = 10.0, *, transport: httpx.BaseTransport | None = None) -> None:
        """HTTP client adapter backed by a persistent httpx.Client.

        - Persists cookies across requests automatically (cookie jar)
        - Session cookies travel as explicit headers, the jar only keeps Set-Cookie
        - Never retries: a transport failure is raised once as HttpTransportError

        Args:
            timeout (float, optional): Timeout for requests. Defaults to 10.0.
            transport (httpx.BaseTransport | None, optional): Custom transport (tests).
        """
        self._client = httpx.Client(timeout=timeout, headers=DEFAULT_HEADERS, transport=transport)

    def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> HttpResponse:
        """Gets the given URL.

        Args:
            url (str): URL to get.
            headers (Mapping[str, str] | None, optional): Headers to include. Defaults to None.

        Returns:
            HttpResponse: Response from the server, whatever its status.
        """
        try:
            resp = self._client.get(url, headers=headers)
        except httpx.HTTPError as e:
            logger.info("GET %s failed: %s", url, type(e).__name__)
            raise HttpTransportError(str(e)) from e
        logger.debug("GET %s -> %s", url, resp.status_code)
        return _wrap(resp)

    def post(self, url: str, *, json: Any | None = None, headers: Mapping[str, str] | None = None) -> HttpResponse:
        """Posts to the given URL, with an optional JSON body.

        Args:
            url (str): URL to post to.
            json (Any | None, optional): JSON body. Defaults to None (empty body).
            headers (Mapping[str, str] | None, optional): Headers to include. Defaults to None.

        Returns:
            HttpResponse: Response from the server, whatever its status.
        """
        try:
            resp = self._client.post(url, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.info("POST %s failed: %s", url, type(e).__name__)
            raise HttpTransportError(str(e)) from e
        logger.debug("POST %s -> %s", url, resp.status_code)
        return _wrap(resp)

    def close(self) -> None:
        self._client.close()


class AsyncHttpxClient(AsyncHttpClientPort):
    """Same adapter over httpx.AsyncClient, for calls made off the request path."""

    def __init__(self, timeout: float = 10.0, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._client = httpx.AsyncClient(timeout=timeout, headers=DEFAULT_HEADERS, transport=transport)

    async def post(self, url: str, *, json: Any | None = None, headers: Mapping[str, str] | None = None) -> HttpResponse:
        try:
            resp = await self._client.post(url, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.info("POST %s failed: %s", url, type(e).__name__)
            raise HttpTransportError(str(e)) from e
        logger.debug("POST %s -> %s", url, resp.status_code)
        return _wrap(resp)

    def set_cookies(self, cookies: Mapping[str, str]) -> None:
        self._client.cookies.update(dict(cookies))

    async def aclose(self) -> None:
        await self._client.aclose()
