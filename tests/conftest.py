"""Shared fixtures: the API wired to a throwaway SQLite database per test."""

import os

# Keep the import-time engine off PostgreSQL; each test swaps in its own
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DEVICE_MODE", "simulated")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from app import database
from main import app, create_app


@pytest.fixture
def test_engine(tmp_path):
    return create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'registry.db'}")


@pytest.fixture
def session_factory(test_engine):
    return sessionmaker(bind=test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def patched_db(monkeypatch, test_engine, session_factory):
    monkeypatch.setattr(database, "engine", test_engine)
    monkeypatch.setattr(database, "AsyncSessionLocal", session_factory)


@pytest.fixture
def client(patched_db):
    """TestClient driven through the app lifespan (tables created on enter)."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def prefixed_client(patched_db):
    """Same API mounted under /api."""
    with TestClient(create_app(api_prefix="/api")) as c:
        yield c


@pytest.fixture
def run_async(client):
    """Run a coroutine function on the client's event loop."""
    def _run(fn, *args):
        return client.portal.call(fn, *args)
    return _run


@pytest.fixture
def soldier_payload():
    """Factory fixture: call with overrides to get a registration body."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {
            "full_names": f"Abdi Hassan Mohamed {counter['n']}",
            "phone_number": f"+25261500{counter['n']:04d}",
            "date_of_birth": "1994-03-12",
            "gender": "Male",
            "rank_position": "Sergeant",
            "enlistment_date": "2015-06-01",
            "horin_platoon": "Horin 3",
            "commander": "Col. Ahmed",
            "net_salary": 300.0,
            "clan": "Ogaden",
            "blood_group": "O+",
            "status": "Active",
        }
        payload.update(overrides)
        return payload
    return _make


@pytest.fixture
def register(client, soldier_payload):
    """Register a soldier through the API and return the stored row."""
    def _register(**overrides):
        resp = client.post("/soldiers", json=soldier_payload(**overrides))
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _register
