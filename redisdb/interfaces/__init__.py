"""
Abstract base classes for the key-value store.
"""

from redisdb.interfaces.batch import Batch
from redisdb.interfaces.db import DB
from redisdb.interfaces.iterator import Iterator

__all__ = ["Batch", "DB", "Iterator"]
