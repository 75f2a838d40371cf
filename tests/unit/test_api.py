from __future__ import annotations
import pytest
from fastapi.testclient import TestClient
from creatorhub_web.application.use_cases.load_footage_detail import LoadFootageDetailUseCase
from creatorhub_web.domain.model import AntiForgeryToken, Footage
from creatorhub_web.presentation.api.main import app
from creatorhub_web.presentation.api.routes.footage import get_footage_detail_loader
from _fakes import FOOTAGE_42, FakeFootage, FakeTokens, make_settings


@pytest.fixture
def wire():
    def _wire(footage: Footage | None, token: AntiForgeryToken | None = AntiForgeryToken("t1", "s1")):
        loader = LoadFootageDetailUseCase(footage=FakeFootage(footage), tokens=FakeTokens(token), settings=make_settings())
        app.dependency_overrides[get_footage_detail_loader] = lambda: loader
        return TestClient(app)
    yield _wire
    app.dependency_overrides.clear()


def test_render_sets_xsrf_cookie_on_parent_domain(wire):
    client = wire(Footage.from_payload(FOOTAGE_42))
    resp = client.get("/videos/42", headers={"Cookie": "CH-SESSION=abc"})
    assert resp.status_code == 200
    props = resp.json()["props"]
    assert props["loggedIn"] is True
    assert props["token"] == "t1"
    assert props["footage"]["name"] == FOOTAGE_42["name"]
    set_cookie = resp.headers["set-cookie"]
    assert set_cookie.startswith("XSRF-TOKEN=t1;")
    assert "Domain=.scrcreate.app" in set_cookie


def test_missing_footage_is_404(wire):
    client = wire(None)
    resp = client.get("/videos/404", headers={"Cookie": "CH-SESSION=abc"})
    assert resp.status_code == 404
    assert resp.json() == {"notFound": True}


def test_anonymous_viewer_is_redirected_to_login(wire):
    client = wire(Footage.from_payload(FOOTAGE_42))
    resp = client.get("/videos/42", follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"] == "/login"
    assert "set-cookie" not in resp.headers


def test_empty_token_redirects_to_login(wire):
    client = wire(Footage.from_payload(FOOTAGE_42), token=None)
    resp = client.get("/videos/42", headers={"Cookie": "CH-SESSION=abc"}, follow_redirects=False)
    assert resp.status_code == 307


def test_health_and_metrics(wire):
    client = wire(None)
    client.get("/videos/1")
    assert client.get("/health").json()["status"] == "ok"
    body = client.get("/metrics").text
    assert 'footage_page_outcomes_total{outcome="not_found"}' in body
