"""
RedisDB - ordered key-value store API on top of Redis.
"""

import logging
import sys
from typing import TextIO

from redis.asyncio import Redis

from redisdb.engine.batch import RedisDBBatch
from redisdb.engine.iterator import RedisDBIterator
from redisdb.interfaces.db import DB
from redisdb.models.config import RedisDBConfig
from redisdb.models.kv_item import INDEX_KEY, KeyRange, check_key, check_value
from redisdb.models.stats import parse_stats

logger = logging.getLogger(__name__)


def _raw_reply(response, **options):
    """Response callback handing the server reply back untouched."""
    return response


class RedisDB(DB):
    """
    Key-value store backed by a Redis database.

    Provides:
    - get(key) / has(key): Point reads
    - set(key, value) / delete(key): Point writes
    - new_batch(): Atomic multi-key writes
    - iterator(start, end) / reverse_iterator(start, end): Ordered range scans

    Architecture:
    - Each key is stored as a plain Redis string holding the value
    - Every live key is also a member of the sorted set INDEX_KEY, all with
      score 0, so Redis orders the members by their raw bytes
    - Writes update the key and the index in one MULTI/EXEC transaction, so
      a key is in the index if and only if it exists
    - Range scans page through the index (see RedisDBIterator)
    """

    # Sorted set mirroring the key space
    INDEX_KEY = INDEX_KEY

    def __init__(
        self,
        config: RedisDBConfig | None = None,
        client: Redis | None = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            config: Connection and paging settings. Defaults to RedisDBConfig().
            client: Existing client to take ownership of. When given, the
                connection settings of config are ignored. The client must
                not decode responses, keys and values are bytes. Its INFO
                replies are left as the server's raw text.
        """
        self._config = config or RedisDBConfig()
        if client is None:
            client = Redis(
                host=self._config.host,
                port=self._config.port,
                password=self._config.password,
                db=self._config.db,
                socket_timeout=self._config.socket_timeout,
                socket_connect_timeout=self._config.socket_connect_timeout,
            )
        # stats() parses the report itself, keeping values exactly as sent
        client.set_response_callback("INFO", _raw_reply)
        self._client = client

    @classmethod
    async def create(
        cls,
        host: str = "localhost",
        password: str | None = None,
        db: int = 0,
        **options,
    ) -> "RedisDB":
        """
        Async factory method to create a store and check the connection.

        Args:
            host: Redis server host.
            password: Password for AUTH, None when not set.
            db: Numeric Redis database to select.
            **options: Further RedisDBConfig fields (port, page_size, ...).

        Returns:
            RedisDB whose server answered PING.
        """
        database = cls(RedisDBConfig(host=host, password=password, db=db, **options))
        try:
            await database.client.ping()
        except Exception:
            await database.close()
            raise
        logger.info(f"Connected to redis at {host} (db {db})")
        return database

    @property
    def client(self) -> Redis:
        """The Redis client owned by this store."""
        return self._client

    @property
    def config(self) -> RedisDBConfig:
        return self._config

    async def get(self, key: bytes) -> bytes | None:
        check_key(key)
        return await self._client.get(key)

    async def has(self, key: bytes) -> bool:
        return await self.get(key) is not None

    async def set(self, key: bytes, value: bytes) -> None:
        await self.set_sync(key, value)

    async def set_sync(self, key: bytes, value: bytes) -> None:
        check_key(key)
        check_value(value)

        # KEEPTTL leaves any expiry set on an existing key untouched
        async with self._client.pipeline(transaction=True) as pipe:
            pipe.set(key, value, keepttl=True)
            pipe.zadd(self.INDEX_KEY, {key: 0})
            await pipe.execute()

    async def delete(self, key: bytes) -> None:
        await self.delete_sync(key)

    async def delete_sync(self, key: bytes) -> None:
        check_key(key)

        async with self._client.pipeline(transaction=True) as pipe:
            pipe.delete(key)
            pipe.zrem(self.INDEX_KEY, key)
            await pipe.execute()

    def new_batch(self) -> RedisDBBatch:
        return RedisDBBatch(self._client, self.INDEX_KEY)

    async def iterator(
        self, start: bytes | None = None, end: bytes | None = None
    ) -> RedisDBIterator:
        return await self._open_iterator(KeyRange(start, end, reverse=False))

    async def reverse_iterator(
        self, start: bytes | None = None, end: bytes | None = None
    ) -> RedisDBIterator:
        return await self._open_iterator(KeyRange(start, end, reverse=True))

    async def _open_iterator(self, key_range: KeyRange) -> RedisDBIterator:
        return await RedisDBIterator.open(
            self._client, self.INDEX_KEY, key_range, self._config.page_size
        )

    async def stats(self) -> dict[str, str]:
        """
        Return the server's INFO stats section as a name -> value mapping.

        Returns:
            Dict of statistic name to textual value. Report lines without a
            "name:value" separator map to "n/a".
        """
        return parse_stats(await self._client.info("stats"))

    async def print_all(self, out: TextIO | None = None) -> None:
        """
        Write the stats report and every entry, hex encoded, to out.

        Args:
            out: Destination stream. Defaults to sys.stdout.
        """
        out = out or sys.stdout
        for name, value in (await self.stats()).items():
            out.write(f"{name}:{value}\n")

        async with await self.iterator() as itr:
            async for key, value in itr:
                out.write(f"[{key.hex().upper()}]:\t[{value.hex().upper()}]\n")
            if itr.error() is not None:
                raise itr.error()

    async def unsafe_reset(self) -> None:
        """Remove every key of the selected Redis database."""
        logger.warning(f"Flushing redis db {self._config.db}")
        await self._client.flushdb()

    async def close(self) -> None:
        await self._client.aclose()
