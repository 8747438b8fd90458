"""
RedisDBBatch - atomic groups of writes against the key space and its index.
"""

import logging

from redis.asyncio import Redis
from redis.asyncio.client import Pipeline

from redisdb.interfaces.batch import Batch
from redisdb.models.batch_op import BatchOp, OpType
from redisdb.models.exceptions import BatchClosedError
from redisdb.models.kv_item import check_key, check_value

logger = logging.getLogger(__name__)


class RedisDBBatch(Batch):
    """
    Write batch committed as a single MULTI/EXEC transaction.

    Every set() queues the index update before the value write, every
    delete() the index removal before the key removal, so replaying the
    queue keeps the index in step with the key space. Nothing is sent to
    Redis until write().
    """

    def __init__(self, client: Redis, index_key: str) -> None:
        """
        Initialize an empty batch.

        Args:
            client: Redis client owned by the RedisDB that created this batch.
            index_key: Name of the sorted set holding every live key.
        """
        self._client = client
        self._index_key = index_key
        self._ops: list[BatchOp] | None = []

    def __len__(self) -> int:
        return len(self._ops) if self._ops is not None else 0

    def set(self, key: bytes, value: bytes) -> None:
        ops = self._open_ops()
        check_key(key)
        check_value(value)
        ops.append(BatchOp.index_add(key))
        ops.append(BatchOp.set(key, value))

    def delete(self, key: bytes) -> None:
        ops = self._open_ops()
        check_key(key)
        ops.append(BatchOp.index_remove(key))
        ops.append(BatchOp.delete(key))

    async def write(self) -> None:
        await self._write()

    async def write_sync(self) -> None:
        # Durability is decided by the server's persistence settings
        await self._write()

    async def _write(self) -> None:
        ops = self._open_ops()
        # The batch cannot be reused after a write, whatever the outcome
        self.close()
        if not ops:
            return

        async with self._client.pipeline(transaction=True) as pipe:
            for op in ops:
                self._queue_op(pipe, op)
            await pipe.execute()
        logger.debug(f"Committed batch of {len(ops)} operations")

    def _queue_op(self, pipe: Pipeline, op: BatchOp) -> None:
        if op.type == OpType.INDEX_ADD:
            pipe.zadd(self._index_key, {op.key: 0})
        elif op.type == OpType.INDEX_REMOVE:
            pipe.zrem(self._index_key, op.key)
        elif op.type == OpType.SET:
            pipe.set(op.key, op.value, keepttl=True)
        elif op.type == OpType.DELETE:
            pipe.delete(op.key)
        else:
            raise ValueError(f"Unknown batch operation: {op.type}")

    def close(self) -> None:
        self._ops = None

    def _open_ops(self) -> list[BatchOp]:
        if self._ops is None:
            raise BatchClosedError()
        return self._ops
