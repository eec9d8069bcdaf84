"""
Pytest fixtures.

Unit tests run against a mocked asyncpg pool. Tests marked with the
`live_db` fixture need a real PostgreSQL server and are skipped unless
PICSTORE_TEST_DATABASE_URL is set, e.g.

    PICSTORE_TEST_DATABASE_URL=postgresql://postgres@localhost:5432/postgres pytest
"""
import os
import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import asyncpg
import pytest
import pytest_asyncio

from picstore import Db
from picstore.core.db import drop_database

TEST_URL = "postgresql://picstore@localhost:5432/picstore_test"


@pytest.fixture
def fake_pool(monkeypatch):
    """An asyncpg pool stand-in; asyncpg.create_pool returns it."""
    pool = MagicMock()
    pool.fetchrow = AsyncMock(return_value=None)
    pool.fetch = AsyncMock(return_value=[])
    pool.execute = AsyncMock(return_value="OK")
    pool.close = AsyncMock()
    monkeypatch.setattr(asyncpg, "create_pool", AsyncMock(return_value=pool))
    return pool


@pytest_asyncio.fixture
async def db(fake_pool):
    """A Db connected to the fake pool."""
    store = Db(TEST_URL, setup=False)
    await store.connect()
    yield store
    if store.connected:
        await store.disconnect()


@pytest.fixture
def image_row():
    """Build a row shaped like the images table returns."""
    def _make_row(**overrides):
        row = {
            "id": uuid.uuid4(),
            "description": "an #awesome picture",
            "url": "https://picstore.test/a.jpg",
            "likes": 0,
            "liked": False,
            "tags": ["awesome"],
            "user_id": str(uuid.uuid4()),
            "created_at": datetime.now(timezone.utc),
        }
        row.update(overrides)
        return row

    return _make_row


@pytest.fixture
def user_row():
    """Build a row shaped like the users table returns."""
    def _make_row(**overrides):
        row = {
            "id": uuid.uuid4(),
            "username": "skumblue5",
            "email": "skumblue5@picstore.test",
            "name": "Skum Blue",
            "password": None,
            "facebook": False,
            "created_at": datetime.now(timezone.utc),
        }
        row.update(overrides)
        return row

    return _make_row


@pytest_asyncio.fixture
async def live_db():
    """
    A Db on a freshly provisioned, uniquely named database.
    The database is dropped after the test.
    """
    url = os.environ.get("PICSTORE_TEST_DATABASE_URL", "").strip()
    if not url:
        pytest.skip("PICSTORE_TEST_DATABASE_URL is not set")

    name = f"picstore_{uuid.uuid4().hex}"
    store = Db(url, db=name, setup=True)
    await store.connect()
    assert store.connected
    try:
        yield store
    finally:
        await store.disconnect()
        assert not store.connected
        await drop_database(store.database.url, name)
