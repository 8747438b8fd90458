"""
Tests for the backend registry.
"""

import fakeredis
import pytest

import redisdb
from redisdb.engine import registry
from redisdb.engine.db import RedisDB
from redisdb.models.exceptions import UnknownBackendError


@pytest.fixture
def clean_registry(monkeypatch):
    """Isolate registrations made by a test."""
    monkeypatch.setattr(registry, "_creators", dict(registry._creators))


class TestRegistry:
    def test_redis_registered_on_import(self):
        assert redisdb.REDIS_BACKEND in registry.registered_backends()

    async def test_new_db_redis(self, monkeypatch):
        server = fakeredis.FakeServer()
        monkeypatch.setattr(
            "redisdb.engine.db.Redis",
            lambda **kwargs: fakeredis.FakeAsyncRedis(server=server),
        )

        database = await redisdb.new_db("redis", host="localhost", db=2)
        try:
            assert isinstance(database, RedisDB)
            assert database.config.db == 2
        finally:
            await database.close()

    async def test_unknown_backend(self):
        with pytest.raises(UnknownBackendError):
            await redisdb.new_db("nosuchdb")

    def test_duplicate_registration(self, clean_registry):
        async def creator(**kwargs):
            raise AssertionError("not called")

        with pytest.raises(ValueError):
            registry.register_db_creator(redisdb.REDIS_BACKEND, creator)

    async def test_force_registration(self, clean_registry, db):
        async def creator(**kwargs):
            return db

        registry.register_db_creator("memory", creator)
        registry.register_db_creator("memory", creator, force=True)

        assert await registry.new_db("memory") is db
        assert "memory" in registry.registered_backends()
