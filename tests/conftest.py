"""
Test configuration: in-memory Motor database (mongomock-motor) and an HTTP
client over the ASGI app with the Mongo/Redis dependencies overridden.
"""

import os

os.environ.setdefault("APP_ENV", "development")
os.environ.setdefault("DEBUG", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from warehouse.api.deps import mongo_db, redis_dep
from warehouse.domain.repositories.product_repo import ProductRepo
from warehouse.main import app


@pytest.fixture
def db():
    return AsyncMongoMockClient()["warehouse_test"]


@pytest.fixture
async def repo(db):
    r = ProductRepo(db)
    await r.ensure_indexes()
    return r


@pytest.fixture
async def client(db, repo):
    """Async test client; Redis is disabled unless a test overrides redis_dep."""

    async def override_mongo_db():
        return db

    app.dependency_overrides[mongo_db] = override_mongo_db
    app.dependency_overrides[redis_dep] = lambda: None

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
