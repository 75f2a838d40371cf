from __future__ import annotations

from collections.abc import Mapping

from creatorhub_web.application.ports.http_client_port import AsyncHttpClientPort, HttpClientPort
from creatorhub_web.config import Settings
from creatorhub_web.infrastructure.adapters.http.httpx_client import AsyncHttpxClient, DEFAULT_HEADERS, HttpxClient
from creatorhub_web.infrastructure.adapters.http.requests_client import RequestsHttpClient


def build_http_client(settings: Settings) -> HttpClientPort:
    if settings.http_backend == "requests":
        return RequestsHttpClient(timeout=settings.http_timeout, default_headers=DEFAULT_HEADERS)
    if settings.http_backend != "httpx":
        raise ValueError(f"unknown HTTP_BACKEND {settings.http_backend!r}")
    return HttpxClient(timeout=settings.http_timeout)


def build_async_http_client(settings: Settings, cookies: Mapping[str, str] | None = None) -> AsyncHttpClientPort:
    """Async client for the browser-side calls; ``cookies`` act as the ambient credential."""
    http = AsyncHttpxClient(timeout=settings.http_timeout)
    if cookies:
        http.set_cookies(cookies)
    return http
