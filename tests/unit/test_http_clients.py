from __future__ import annotations
import asyncio
import json
import httpx
import pytest
import requests
from requests.adapters import BaseAdapter
from creatorhub_web.application.ports.http_client_port import HttpTransportError
from creatorhub_web.infrastructure.adapters.http.factory import build_async_http_client, build_http_client
from creatorhub_web.infrastructure.adapters.http.httpx_client import AsyncHttpxClient, HttpxClient
from creatorhub_web.infrastructure.adapters.http.requests_client import RequestsHttpClient
from _fakes import API, make_settings


def test_httpx_client_returns_error_statuses_unchanged():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(404, json={"message": "Not found"})

    client = HttpxClient(transport=httpx.MockTransport(handler))
    resp = client.get(f"{API}/footage/42", headers={"X-USER-TOKEN": "abc"})
    assert resp.status_code == 404
    assert not resp.ok
    assert resp.json() == {"message": "Not found"}
    assert seen[0].headers["x-user-token"] == "abc"


def test_httpx_client_wraps_transport_failures():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused")

    client = HttpxClient(transport=httpx.MockTransport(handler))
    with pytest.raises(HttpTransportError):
        client.post(f"{API}/user/state")


def test_async_client_sends_ambient_session_cookie_and_json_body():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"csrf": "t2", "marked": True})

    async def call():
        client = AsyncHttpxClient(transport=httpx.MockTransport(handler))
        client.set_cookies({"CH-SESSION": "abc"})
        try:
            return await client.post(f"{API}/user/bookmark", json={"id": "42"}, headers={"XSRF-TOKEN": "t1"})
        finally:
            await client.aclose()

    resp = asyncio.run(call())
    assert resp.json() == {"csrf": "t2", "marked": True}
    request = seen[0]
    assert request.headers["xsrf-token"] == "t1"
    assert "CH-SESSION=abc" in request.headers["cookie"]
    assert json.loads(request.content) == {"id": "42"}


class StubAdapter(BaseAdapter):
    def __init__(self, status: int, body=None, error: Exception | None = None) -> None:
        super().__init__()
        self.status, self.body, self.error = status, body, error
        self.requests: list[requests.PreparedRequest] = []

    def send(self, request, **kwargs):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        resp = requests.Response()
        resp.status_code = self.status
        resp._content = json.dumps(self.body).encode() if self.body is not None else b""
        resp.headers["Content-Type"] = "application/json"
        resp.url = request.url
        resp.request = request
        return resp

    def close(self):
        pass


def test_requests_client_posts_json_and_reads_status():
    adapter = StubAdapter(403, {"message": "Invalid CSRF token"})
    client = RequestsHttpClient(timeout=5)
    client.session.mount("https://", adapter)

    resp = client.post(f"{API}/user/bookmark", json={"id": "42"}, headers={"XSRF-TOKEN": "t1"})

    assert resp.status_code == 403
    assert resp.json() == {"message": "Invalid CSRF token"}
    sent = adapter.requests[0]
    assert sent.headers["XSRF-TOKEN"] == "t1"
    assert json.loads(sent.body) == {"id": "42"}


def test_requests_client_wraps_transport_failures():
    client = RequestsHttpClient()
    client.session.mount("https://", StubAdapter(0, error=requests.ConnectionError("down")))
    with pytest.raises(HttpTransportError):
        client.get(f"{API}/footage/42")


def test_factory_picks_backend_from_settings():
    assert isinstance(build_http_client(make_settings()), HttpxClient)
    assert isinstance(build_http_client(make_settings(http_backend="requests")), RequestsHttpClient)
    with pytest.raises(ValueError):
        build_http_client(make_settings(http_backend="curl"))
    client = build_async_http_client(make_settings(), {"CH-SESSION": "abc"})
    assert dict(client._client.cookies) == {"CH-SESSION": "abc"}
    sync_client = build_http_client(make_settings())
    assert not hasattr(sync_client, "set_cookies")
    assert not hasattr(sync_client, "dump_cookies")
    assert not hasattr(client, "dump_cookies")
