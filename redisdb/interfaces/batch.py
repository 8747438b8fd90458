"""
Batch abstract base class for atomic groups of writes.
"""

from abc import ABC, abstractmethod


class Batch(ABC):
    """
    Accumulates set and delete operations and applies them atomically.

    Operations are only queued until write() or write_sync() is called.
    After a write, successful or not, or after close(), every further call
    except close() raises BatchClosedError.
    """

    @abstractmethod
    def set(self, key: bytes, value: bytes) -> None:
        """
        Queue a write of value under key.

        Raises:
            InvalidKeyError: If key is empty.
            InvalidValueError: If value is None.
            BatchClosedError: If the batch was written or closed.
        """
        pass

    @abstractmethod
    def delete(self, key: bytes) -> None:
        """
        Queue the removal of key.

        Raises:
            InvalidKeyError: If key is empty.
            BatchClosedError: If the batch was written or closed.
        """
        pass

    @abstractmethod
    async def write(self) -> None:
        """Apply all queued operations as one atomic unit, then close."""
        pass

    @abstractmethod
    async def write_sync(self) -> None:
        """Same as write(); durability is whatever the store acknowledges."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Discard queued operations. Safe to call more than once."""
        pass
