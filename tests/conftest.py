"""
- Keep the app from running local-only setup (CORS for the dev front-end)
- Give every test its own empty GameStore and override FastAPI's get_store so routes use it
- Provide a client fixture (TestClient(app)) that already has the override applied
"""
import os
import pytest

from fastapi.testclient import TestClient

os.environ.setdefault("APP_ENV", "test")

from mastermind.config import GameConfig
from mastermind.main import app, get_store
from mastermind.store import GameStore


@pytest.fixture
def store() -> GameStore:
    return GameStore(GameConfig())


@pytest.fixture(autouse=True)
def override_dep(store):
    """Force the app to use this test's store for every request."""
    app.dependency_overrides[get_store] = lambda: store
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)
