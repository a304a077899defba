# tests/conftest.py
from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from baas.core.config import Settings
from baas.db.session import Database
from baas.main import create_app


def make_settings(tmp_path, **overrides) -> Settings:
    values = {
        "DATABASE_URL": f"sqlite:///{tmp_path / 'baas_test.db'}",
        "LOG_DIR": str(tmp_path / ".logs"),
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture()
def client(settings: Settings) -> Iterator[TestClient]:
    """TestClient with the lifespan running (tables created on a fresh SQLite file)."""
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def database(settings: Settings) -> Iterator[Database]:
    db = Database(settings.DATABASE_URL)
    db.create_tables()
    yield db
    db.dispose()


@pytest.fixture()
def session(database: Database):
    s = database.session()
    try:
        yield s
    finally:
        s.close()


SHOP = {
    "name": "Shop",
    "description": "storefront",
    "database_url": "postgres://x",
    "database_type": "postgres",
}

USERS_API = {
    "name": "List users",
    "path": "/users",
    "method": "GET",
    "table_name": "users",
}


@pytest.fixture()
def project(client: TestClient) -> dict:
    res = client.post("/baas/projects", json=SHOP)
    assert res.status_code == 201
    return res.json()["project"]
