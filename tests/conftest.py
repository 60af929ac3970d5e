"""Test fixtures — a freshly seeded store and app client per test.

Learn: the store is an injected dependency, so isolation is simple:
each test gets its own seeded InMemoryStore and the app's get_store
dependency is overridden to return it. Nothing leaks between tests.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from restboard.auth.jwt import create_session_token
from restboard.main import app
from restboard.store.memory import get_store, seed_store
from restboard.store.models import User


@pytest.fixture()
def store():
    """Per-test store seeded with users 1 and 2 and two messages."""
    return seed_store()


@pytest_asyncio.fixture()
async def client(store):
    """HTTP client with the app's get_store overridden for testing."""
    app.dependency_overrides[get_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture()
def robin():
    return User(id="1", username="Robin Wieruch")


@pytest.fixture()
def auth_headers(robin):
    """Bearer header carrying a valid session token for user 1."""
    return {"Authorization": f"Bearer {create_session_token(robin)}"}
