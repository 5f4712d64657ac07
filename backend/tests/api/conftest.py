"""API test fixtures: in-memory SQLite database + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with tables created
    - The app under test is built with create_app() and handed the test
      DatabaseSessionManager directly (lifespan is not run by ASGITransport)
    - make_store / make_product create rows through the public API
"""

import pytest
from httpx import ASGITransport, AsyncClient

from inventory_api.config import Settings
from inventory_api.infrastructure.database import DatabaseSessionManager
from inventory_api.main import create_app


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
async def client(db_manager):
    settings = Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        static_dir="__no_static_dir__",
        log_format="text",
    )
    app = create_app(settings)
    app.state.db_manager = db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def make_store(client):
    async def _make(name: str = "Main Street") -> dict:
        res = await client.post("/api/stores", json={"name": name})
        assert res.status_code == 201, res.text
        return res.json()
    return _make


@pytest.fixture
def make_product(client):
    async def _make(store_id: str, **fields) -> dict:
        body = {
            "storeId": store_id,
            "name": "Widget",
            "category": "tools",
            "price": 9.99,
            "quantityInStock": 10,
        }
        body.update(fields)
        res = await client.post("/api/products", json=body)
        assert res.status_code == 201, res.text
        return res.json()
    return _make
