"""
DB abstract base class for ordered key-value stores.
"""

from abc import ABC, abstractmethod

from redisdb.interfaces.batch import Batch
from redisdb.interfaces.iterator import Iterator


class DB(ABC):
    """
    Abstract base class for key-value stores with ordered iteration.

    Keys are non-empty bytes, values are bytes. None stands for
    "absent" and is never a storable value.
    """

    @abstractmethod
    async def get(self, key: bytes) -> bytes | None:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            The value if found, None otherwise.
        """
        pass

    @abstractmethod
    async def has(self, key: bytes) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.
        """
        pass

    @abstractmethod
    async def set(self, key: bytes, value: bytes) -> None:
        """
        Insert or update a key-value pair.

        Args:
            key: The key to insert/update.
            value: The value to store, may be empty.
        """
        pass

    @abstractmethod
    async def set_sync(self, key: bytes, value: bytes) -> None:
        """Insert or update a key-value pair, waiting for durability."""
        pass

    @abstractmethod
    async def delete(self, key: bytes) -> None:
        """
        Remove a key-value pair. Removing a missing key is not an error.

        Args:
            key: The key to remove.
        """
        pass

    @abstractmethod
    async def delete_sync(self, key: bytes) -> None:
        """Remove a key-value pair, waiting for durability."""
        pass

    @abstractmethod
    def new_batch(self) -> Batch:
        """Return a new, empty batch bound to this store."""
        pass

    @abstractmethod
    async def iterator(self, start: bytes | None, end: bytes | None) -> Iterator:
        """
        Return an iterator over [start, end) in ascending key order.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.
        """
        pass

    @abstractmethod
    async def reverse_iterator(self, start: bytes | None, end: bytes | None) -> Iterator:
        """
        Return an iterator over [start, end) in descending key order.

        Args:
            start: Start key (inclusive). If None, iterates down to the first key.
            end: End key (exclusive). If None, starts from the last key.
        """
        pass

    @abstractmethod
    async def stats(self) -> dict[str, str]:
        """Return backend statistics as a name -> value mapping."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection."""
        pass

    async def __aenter__(self) -> "DB":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
