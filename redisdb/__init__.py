"""
Redis-backed ordered key-value store.

This package provides a key-value store over a Redis database with:
- Get(key) / Has(key) - Point reads
- Set(key, value) / Delete(key) - Point writes, index kept in the same transaction
- NewBatch() - Atomic batched writes (MULTI/EXEC)
- Iterator(start, end) / ReverseIterator(start, end) - Ordered range scans
  over [start, end) with background prefetch
"""

from redisdb.engine import RedisDB, RedisDBBatch, RedisDBIterator, new_db, register_db_creator
from redisdb.engine.registry import REDIS_BACKEND
from redisdb.models import (
    BatchClosedError,
    ContractViolation,
    InvalidKeyError,
    InvalidValueError,
    RedisDBConfig,
    RedisDBError,
    TransportError,
)

register_db_creator(REDIS_BACKEND, RedisDB.create)

__all__ = [
    "BatchClosedError",
    "ContractViolation",
    "InvalidKeyError",
    "InvalidValueError",
    "REDIS_BACKEND",
    "RedisDB",
    "RedisDBBatch",
    "RedisDBConfig",
    "RedisDBError",
    "RedisDBIterator",
    "TransportError",
    "new_db",
    "register_db_creator",
]
