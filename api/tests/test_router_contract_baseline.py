"""
Baseline router contract checks.

Shape-focused (status + key response fields): route registration, health and
scaffold endpoints, and the error body format shared by every handler.
"""

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

import app.main as m
from app.deps import get_storage
from app.repo import MemStorage


def _client():
    m.app.dependency_overrides[get_storage] = lambda: MemStorage()
    return TestClient(m.app)


def teardown_function():
    m.app.dependency_overrides.clear()


def test_health_contract():
    res = _client().get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


@pytest.mark.parametrize("module", ["profile", "match"])
def test_scaffold_health_contract(module):
    res = _client().get(f"/_scaffold/{module}/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "module": module}


def test_expected_routes_registered():
    paths = m.app.openapi()["paths"]
    assert "post" in paths["/api/profiles"]
    assert "get" in paths["/api/profiles/{profile_id}"]
    assert "post" in paths["/api/match"]


def test_malformed_json_is_a_400_with_detail():
    res = _client().post("/api/profiles", content=b"{not json", headers={"content-type": "application/json"})
    assert res.status_code == 400
    assert isinstance(res.json()["detail"], str)


def test_cors_preflight_allows_dev_origin():
    res = _client().options(
        "/api/match",
        headers={"origin": "http://localhost:5173", "access-control-request-method": "POST"},
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_run_serves_the_app_with_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(m.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    m.run()
    assert calls == [(m.app, {"host": m.HOST, "port": m.PORT, "log_level": m.LOG_LEVEL.lower()})]
