from redisdb.engine.batch import RedisDBBatch
from redisdb.engine.db import RedisDB
from redisdb.engine.iterator import RedisDBIterator
from redisdb.engine.registry import new_db, register_db_creator

__all__ = ["RedisDB", "RedisDBBatch", "RedisDBIterator", "new_db", "register_db_creator"]
