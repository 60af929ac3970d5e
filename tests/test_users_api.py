"""Users API tests."""

import pytest
from httpx import ASGITransport, AsyncClient

from restboard.main import app
from restboard.store.memory import InMemoryStore, get_store
from restboard.store.models import User


@pytest.mark.asyncio
async def test_list_users(client):
    r = await client.get("/users")
    assert r.status_code == 200
    assert r.json() == [
        {"id": "1", "username": "Robin Wieruch"},
        {"id": "2", "username": "Dave Davids"},
    ]


@pytest.mark.asyncio
async def test_list_users_single_seed():
    """A store seeded with only Robin lists exactly Robin."""
    store = InMemoryStore()
    store.create("users", User(id="1", username="Robin Wieruch"))
    app.dependency_overrides[get_store] = lambda: store
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            r = await ac.get("/users")
    finally:
        app.dependency_overrides.clear()

    assert r.status_code == 200
    assert r.json() == [{"id": "1", "username": "Robin Wieruch"}]


@pytest.mark.asyncio
async def test_get_user(client):
    r = await client.get("/users/2")
    assert r.status_code == 200
    assert r.json() == {"id": "2", "username": "Dave Davids"}


@pytest.mark.asyncio
async def test_get_user_not_found(client):
    r = await client.get("/users/42")
    assert r.status_code == 404
    assert r.json()["detail"] == "User 42 not found"
