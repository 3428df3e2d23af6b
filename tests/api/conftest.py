"""API test fixtures — async SQLite DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database (root conftest fixtures)
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, exercises the real repository
      including the UNIQUE index on telegram_link
"""

import pytest
from httpx import ASGITransport, AsyncClient

from telegram_links.infrastructure.database import get_db, DatabaseSessionManager
import telegram_links.infrastructure.database as db_module
from telegram_links.main import app

BASE = "/api/telegram-links"


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def create_link(client):
    """POST a link and return the created record's JSON."""
    async def _create(link: str = "https://t.me/abc", owner: str = "Alice") -> dict:
        res = await client.post(
            BASE, json={"telegram_link": link, "owner_name": owner},
        )
        assert res.status_code == 201, res.text
        return res.json()["data"]
    return _create
