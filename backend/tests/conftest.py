"""Root conftest — store and HTTP client fixtures shared by every test package.

Invariants:
    - Every test gets a fresh SQLite database file under tmp_path
    - app.state.db_manager points at that store for the client's lifetime
    - dependency_overrides are cleared after each client-based test

Design Decisions:
    - File database over :memory:: each pooled connection sees the same data
    - Lifespan is not run by ASGITransport, so the fixture attaches the manager
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Keep tests away from a developer's real database and log settings
os.environ.setdefault("DB_FILE", "test-database.sqlite")
os.environ.setdefault("LOG_FORMAT", "text")

from warehouse.infrastructure.database import DatabaseSessionManager  # noqa: E402
from warehouse.main import app  # noqa: E402
from warehouse.services.inventory_gateway import SqlInventoryGateway  # noqa: E402


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'inventory.db'}")
    await manager.create_schema()
    yield manager
    await manager.close()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
def gateway(test_db):
    return SqlInventoryGateway(test_db)


@pytest.fixture
async def client(db_manager):
    """FastAPI test client bound to the per-test store."""
    app.state.db_manager = db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
    app.state.db_manager = None


@pytest.fixture
async def lenient_client(db_manager):
    """Client that returns the 500 response instead of re-raising app exceptions."""
    app.state.db_manager = db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
    app.state.db_manager = None


@pytest.fixture
def pen():
    return {"name": "Pen", "category": "Stationery", "price": 5, "stock": 100}


@pytest.fixture
def book():
    return {"name": "Book", "category": "Books", "price": 20, "stock": 2}
