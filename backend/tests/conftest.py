"""Root conftest - shared test configuration, database and client fixtures.

Invariants:
    - Every test gets its own DatabaseSessionManager on TEST_DATABASE_URL
      (in-memory SQLite by default)
    - The manager is reset (drop + recreate) and disposed after each test
    - get_db dependency overridden to use the per-test manager
    - Verification reads open a fresh session so they never see a stale identity map

Design Decisions:
    - SQLite in-memory by default: no external dependency; set TEST_DATABASE_URL
      to run the same suite against PostgreSQL
    - Synthetic posts generated with Faker
"""

import os
from contextlib import asynccontextmanager

import pytest

# In-memory SQLite unless TEST_DATABASE_URL points elsewhere
os.environ.setdefault("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

from faker import Faker  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from blog_api.config import get_settings  # noqa: E402
from blog_api.infrastructure.database import DatabaseSessionManager, get_db  # noqa: E402
import blog_api.infrastructure.database as db_module  # noqa: E402
from blog_api.main import app  # noqa: E402
from blog_api.services.post_store import PostStore  # noqa: E402

SEED_COUNT = 10

fake = Faker()


def generate_post_data() -> dict:
    """Random {title, content, author: {firstName, lastName}} record."""
    return {
        "title": fake.sentence(),
        "content": fake.text(),
        "author": {
            "firstName": fake.first_name(),
            "lastName": fake.last_name(),
        },
    }


@pytest.fixture
def make_post_data():
    return generate_post_data


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(get_settings().test_database_url)
    await manager.create_all()
    yield manager
    await manager.reset()
    await manager.dispose()


@pytest.fixture
def open_store(db_manager):
    """Context manager factory yielding a PostStore on a fresh session."""

    @asynccontextmanager
    async def _open():
        async with db_manager.session() as db:
            yield PostStore(db)

    return _open


@pytest.fixture
async def seeded_posts(open_store):
    """Seed ten synthetic posts before the test."""
    async with open_store() as store:
        return await store.insert_many(
            [generate_post_data() for _ in range(SEED_COUNT)],
        )


@pytest.fixture
async def client(db_manager):
    """FastAPI test client bound to the per-test database manager."""
    async def override_get_db():
        async with db_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
