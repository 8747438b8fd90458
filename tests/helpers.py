"""
Helpers shared by the store tests.
"""

import asyncio

from redisdb.engine.db import RedisDB
from redisdb.engine.iterator import PRODUCER_TASK_NAME


async def load(database: RedisDB, entries) -> None:
    """Write entries through a single batch."""
    batch = database.new_batch()
    for key, value in entries:
        batch.set(key, value)
    await batch.write()


async def collect(itr) -> list[tuple[bytes, bytes]]:
    """Drain an iterator into a list and close it."""
    async with itr:
        return [pair async for pair in itr]


def running_producers() -> list[asyncio.Task]:
    """Iterator producer tasks that have not finished yet."""
    return [t for t in asyncio.all_tasks() if t.get_name() == PRODUCER_TASK_NAME]


async def index_members(database: RedisDB) -> set[bytes]:
    return set(await database.client.zrange(RedisDB.INDEX_KEY, 0, -1))


async def primary_keys(database: RedisDB) -> set[bytes]:
    keys = set(await database.client.keys("*"))
    keys.discard(RedisDB.INDEX_KEY.encode())
    return keys
