import asyncio
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from dinehub.core.config import settings
from dinehub.core.database import get_db
from dinehub.main import app


@pytest.fixture
def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'dinehub-test.db'}", poolclass=NullPool)
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
def client(engine, session_factory, monkeypatch):
    """TestClient bound to a fresh database; demo seeding disabled."""
    monkeypatch.setattr(settings, "SEED_DEMO_DATA", False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original_engine = app.state.engine
    app.state.engine = engine
    with TestClient(app) as c:
        yield c
    app.state.engine = original_engine
    app.dependency_overrides.clear()


@pytest.fixture
def run(client, session_factory):
    """Run ``fn(db, *args, **kwargs)`` on its own session (tables already exist)."""
    def _run(fn, *args, **kwargs):
        async def go():
            async with session_factory() as db:
                return await fn(db, *args, **kwargs)
        return asyncio.run(go())
    return _run


# ---------------------------------------------------------------------------
# Data helpers: alice owns "Bistro" with a "Dinner" menu
# ---------------------------------------------------------------------------
@pytest.fixture
def owner(client):
    resp = client.post("/api/auth/register", json={"username": "alice", "password": "pw1"})
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def restaurant(client, owner):
    resp = client.post("/api/restaurants", json={
        "name": "Bistro",
        "slug": "bistro",
        "cuisineType": "French Bistro",
        "description": "Small plates",
    })
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def menu(client, restaurant):
    resp = client.post("/api/menus", json={"restaurantId": restaurant["id"], "name": "Dinner"})
    assert resp.status_code == 201
    return resp.json()


def item_payload(menu_id, **overrides):
    payload = {
        "menuId": menu_id,
        "name": "Soup",
        "description": "Soup of the day",
        "price": "6.00",
        "category": "Starters",
        "isAvailable": True,
        "isBestseller": False,
        "isChefsPick": False,
        "isTodaysSpecial": False,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_item(client, menu):
    def _make(**overrides):
        resp = client.post("/api/menu-items", json=item_payload(menu["id"], **overrides))
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make
