"""
RedisDBIterator - ordered range scans over the Redis key index.
"""

import asyncio
import logging

from redis.asyncio import Redis

from redisdb.interfaces.iterator import Iterator
from redisdb.models.exceptions import ContractViolation
from redisdb.models.kv_item import KeyRange, KVItem

logger = logging.getLogger(__name__)

# Queued by the producer once it stops, wakes up a waiting consumer
_END = None

# Name given to producer tasks, visible in asyncio.all_tasks()
PRODUCER_TASK_NAME = "redisdb-iterator-producer"

# How long close() waits on the producer between drains
_CLOSE_POLL_S = 0.05


class RedisDBIterator(Iterator):
    """
    Lazily paginated iterator over a key range.

    Redis has no ordered scan over string keys, so keys are read page by page
    from the lexicographic sorted set that mirrors the key space, and each
    page's values are resolved with a single MGET.

    A background task produces pairs into a bounded queue while the consumer
    drains it:

        producer: ZRANGEBYLEX page -> MGET -> queue.put() per pair -> next page
        consumer: valid() / key() / value() / await next()

    Paging continues from the last key of the previous page rather than from
    a numeric offset, so keys inserted or removed elsewhere in the range while
    the scan runs do not shift the pages. Pairs are still only guaranteed to
    be complete and duplicate-free when the range is not mutated during the
    scan.
    """

    def __init__(
        self,
        client: Redis,
        index_key: str,
        key_range: KeyRange,
        page_size: int,
    ) -> None:
        """
        Initialize the iterator. Use open() to get a primed instance.

        Args:
            client: Redis client owned by the RedisDB that created this iterator.
            index_key: Name of the sorted set holding every live key.
            key_range: Bounds and direction of the scan.
            page_size: Keys per index page, also the prefetch queue capacity.
        """
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")

        self._client = client
        self._index_key = index_key
        self._range = key_range
        self._page_size = page_size

        # Holds at most one page worth of pairs
        self._queue: asyncio.Queue[KVItem | None] = asyncio.Queue(maxsize=page_size)
        self._task: asyncio.Task | None = None

        self._item: KVItem | None = None
        self._error: Exception | None = None
        self._invalid = False
        self._closed = False

    @classmethod
    async def open(
        cls,
        client: Redis,
        index_key: str,
        key_range: KeyRange,
        page_size: int,
    ) -> "RedisDBIterator":
        """
        Create an iterator, start its producer and wait for the first pair.

        Returns:
            Iterator positioned on the first pair, or invalid if the range
            holds none.
        """
        itr = cls(client, index_key, key_range, page_size)
        if key_range.is_empty():
            # start >= end: nothing can match, skip the round trips
            return itr

        itr._task = asyncio.create_task(itr._produce(), name=PRODUCER_TASK_NAME)
        try:
            itr._item = await itr._queue.get()
        except BaseException:
            # Cancelled or timed out before the first pair: stop the producer
            await itr.close()
            raise
        logger.debug(
            f"Opened {'reverse ' if key_range.reverse else ''}iterator over "
            f"[{key_range.start!r}, {key_range.end!r})"
        )
        return itr

    async def _produce(self) -> None:
        """Background task feeding the queue until the range is exhausted."""
        try:
            await self._page_through()
        except Exception as e:
            # Reported through error()/valid(), never raised mid-stream
            self._error = e
            logger.warning(f"Range scan over {self._index_key} aborted: {e}")
        if not self._closed:
            await self._queue.put(_END)

    async def _page_through(self) -> None:
        low, high = self._range.lex_window()
        while not self._closed:
            keys = await self._fetch_keys(low, high)
            if not keys:
                return

            values = await self._client.mget(keys)
            for key, value in zip(keys, values):
                # MGET answers None for keys deleted after the index was read
                if value is None:
                    continue
                if self._closed:
                    return
                await self._queue.put(KVItem(key=key, value=value))

            if len(keys) < self._page_size:
                return
            low, high = self._range.window_after(keys[-1])

    async def _fetch_keys(self, low: bytes, high: bytes) -> list[bytes]:
        """Fetch the next page of keys from the index, in scan direction."""
        if self._range.reverse:
            return await self._client.zrevrangebylex(
                self._index_key, high, low, start=0, num=self._page_size
            )
        return await self._client.zrangebylex(
            self._index_key, low, high, start=0, num=self._page_size
        )

    def domain(self) -> tuple[bytes | None, bytes | None]:
        return self._range.start, self._range.end

    def valid(self) -> bool:
        # Once invalid, forever invalid
        if self._invalid:
            return False

        if self._error is not None or self._item is None:
            self._invalid = True
            return False

        return True

    def key(self) -> bytes:
        self._assert_valid()
        return self._item.key

    def value(self) -> bytes:
        self._assert_valid()
        return self._item.value

    async def next(self) -> None:
        self._assert_valid()
        self._item = await self._queue.get()

    def error(self) -> Exception | None:
        return self._error

    async def close(self) -> None:
        """
        Stop the producer and release buffered pairs.

        Cancels the background task and waits for it to finish, so no work
        remains scheduled once close() returns. The queue is drained while
        waiting, so a producer blocked on a full queue, or one that swallowed
        the cancellation, always gets to run to its end. Idempotent.
        """
        if self._closed:
            return
        self._closed = True
        self._invalid = True

        task = self._task
        if task is not None:
            task.cancel()
            while not task.done():
                self._drain()
                await asyncio.wait({task}, timeout=_CLOSE_POLL_S)
                if not task.done():
                    task.cancel()
            if not task.cancelled():
                # Retrieve the outcome so asyncio does not log it as unhandled
                task.exception()

        self._drain()
        # Unblock a next() that may be waiting concurrently
        self._queue.put_nowait(_END)
        self._item = None

    def producer_running(self) -> bool:
        """True while the background producer task has not finished."""
        return self._task is not None and not self._task.done()

    def _drain(self) -> None:
        while not self._queue.empty():
            self._queue.get_nowait()

    def _assert_valid(self) -> None:
        if not self.valid():
            raise ContractViolation()
