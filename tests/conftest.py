"""
Shared pytest fixtures for the Redis-backed store tests.

All tests run against an in-process fakeredis server.
"""

import fakeredis
import pytest
import pytest_asyncio

from redisdb.engine.db import RedisDB
from redisdb.models.config import RedisDBConfig


@pytest.fixture
def redis_server():
    """Provide a fresh in-process Redis server."""
    return fakeredis.FakeServer()


@pytest_asyncio.fixture
async def make_db(redis_server):
    """Provide a factory for stores sharing one server, closed after the test."""
    created = []

    def factory(page_size: int = RedisDBConfig.DEFAULT_PAGE_SIZE) -> RedisDB:
        client = fakeredis.FakeAsyncRedis(server=redis_server)
        database = RedisDB(RedisDBConfig(page_size=page_size), client=client)
        created.append(database)
        return database

    yield factory

    for database in created:
        await database.close()


@pytest.fixture
def db(make_db):
    """Provide a store with the default page size."""
    return make_db()


@pytest.fixture
def paged_db(make_db):
    """Provide a store with a tiny page size so scans span many pages."""
    return make_db(page_size=3)


@pytest.fixture
def sample_entries():
    """Provide sample key-value entries for testing."""
    return [
        (b"a", b"value-a"),
        (b"b", b"value-b"),
        (b"c", b"value-c"),
        (b"d", b"value-d"),
    ]


@pytest.fixture
def large_sample_entries():
    """Provide larger sample spanning many iterator pages."""
    return [(f"key{i:04d}".encode(), f"value{i}".encode()) for i in range(100)]
