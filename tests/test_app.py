# tests/test_app.py
import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

import baas
from baas.core.errors import StartupError
from baas.main import create_app
from conftest import make_settings


def test_health(client):
    res = client.get("/baas/health")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy",
        "service": "Backend Automation Service",
        "version": "1.0.0",
    }


@pytest.mark.asyncio
async def test_health_without_lifespan(tmp_path):
    app = create_app(make_settings(tmp_path))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        res = await ac.get("/baas/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


def test_options_short_circuits_with_204(client):
    res = client.options(
        "/baas/projects",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "POST"},
    )
    assert res.status_code == 204
    assert res.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert res.headers["access-control-allow-credentials"] == "true"
    assert "DELETE" in res.headers["access-control-allow-methods"]


def test_options_on_unknown_path_is_also_204(client):
    assert client.options("/anything/at/all").status_code == 204


def test_cors_headers_on_regular_responses(client):
    res = client.get("/baas/health")
    assert res.headers["access-control-allow-origin"] == "*"
    assert "x-process-time" in res.headers


def test_unknown_route_uses_error_shape(client):
    res = client.get("/baas/nothing-here")
    assert res.status_code == 404
    assert set(res.json()) == {"error", "message"}


def test_unsupported_method_is_405(client):
    res = client.patch("/baas/projects")
    assert res.status_code == 405
    assert set(res.json()) == {"error", "message"}


def test_startup_without_database_url_fails(tmp_path):
    app = create_app(make_settings(tmp_path, DATABASE_URL=None))
    with pytest.raises(StartupError):
        with TestClient(app):
            pass


def test_startup_with_unreachable_database_fails(tmp_path):
    bad = f"sqlite:///{tmp_path / 'missing-dir' / 'x.db'}"
    app = create_app(make_settings(tmp_path, DATABASE_URL=bad))
    with pytest.raises(StartupError):
        with TestClient(app):
            pass


def test_release_mode_hides_docs(tmp_path):
    app = create_app(make_settings(tmp_path, APP_MODE="release"))
    with TestClient(app) as c:
        assert c.get("/docs").status_code == 404
        assert c.get("/baas/health").status_code == 200


def test_unhandled_error_keeps_cors_headers(settings):
    app = create_app(settings)

    @app.get("/baas/boom")
    def boom():
        raise RuntimeError("boom")

    with TestClient(app, raise_server_exceptions=False) as c:
        res = c.get("/baas/boom", headers={"Origin": "http://localhost:3000"})
    assert res.status_code == 500
    assert res.json() == {
        "error": "Internal server error",
        "message": "An unexpected error occurred",
    }
    assert res.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert res.headers["access-control-allow-credentials"] == "true"


def test_health_reports_package_version(client):
    assert client.get("/baas/health").json()["version"] == baas.__version__
