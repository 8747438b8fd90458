"""
Data models for the key-value store.
"""

from redisdb.models.batch_op import BatchOp, OpType
from redisdb.models.config import RedisDBConfig
from redisdb.models.exceptions import (
    BatchClosedError,
    ContractViolation,
    InvalidKeyError,
    InvalidValueError,
    RedisDBError,
    TransportError,
    UnknownBackendError,
)
from redisdb.models.kv_item import KeyRange, KVItem
from redisdb.models.stats import parse_stats

__all__ = [
    "BatchClosedError",
    "BatchOp",
    "ContractViolation",
    "InvalidKeyError",
    "InvalidValueError",
    "KVItem",
    "KeyRange",
    "OpType",
    "RedisDBConfig",
    "RedisDBError",
    "TransportError",
    "UnknownBackendError",
    "parse_stats",
]
