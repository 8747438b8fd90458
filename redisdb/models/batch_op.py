"""
BatchOp - a single queued command of a write batch.
"""

from dataclasses import dataclass
from enum import IntEnum


class OpType(IntEnum):
    """Command a batch replays when it is written."""

    INDEX_ADD = 0  # ZADD <index> 0 key
    INDEX_REMOVE = 1  # ZREM <index> key
    SET = 2  # SET key value KEEPTTL
    DELETE = 3  # DEL key


@dataclass(frozen=True)
class BatchOp:
    """
    Represents one command queued in a batch.

    Attributes:
        type: The command to issue.
        key: The key (or index member) the command applies to.
        value: The value for SET, None otherwise.
    """

    type: OpType
    key: bytes
    value: bytes | None = None

    @classmethod
    def index_add(cls, key: bytes) -> "BatchOp":
        return cls(type=OpType.INDEX_ADD, key=key)

    @classmethod
    def index_remove(cls, key: bytes) -> "BatchOp":
        return cls(type=OpType.INDEX_REMOVE, key=key)

    @classmethod
    def set(cls, key: bytes, value: bytes) -> "BatchOp":
        return cls(type=OpType.SET, key=key, value=value)

    @classmethod
    def delete(cls, key: bytes) -> "BatchOp":
        return cls(type=OpType.DELETE, key=key)
