"""
Iterator protocol for ordered range scans over a key-value store.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator


class Iterator(ABC):
    """
    Cursor over the key-value pairs of a range, in key order.

    Implementations must support:
    - Cursor access via valid()/key()/value()/next()
    - Async iteration via __aiter__/__anext__
    - Explicit release via close() or "async with"

    A freshly created iterator is already positioned on the first pair of its
    range, if any. Once valid() returns False it never returns True again.
    """

    @abstractmethod
    def domain(self) -> tuple[bytes | None, bytes | None]:
        """
        Return the (start, end) bounds the iterator was created with.

        None means unbounded on that side.
        """
        pass

    @abstractmethod
    def valid(self) -> bool:
        """Return True while the iterator is positioned on a pair."""
        pass

    @abstractmethod
    def key(self) -> bytes:
        """
        Return the key at the current position.

        Raises:
            ContractViolation: If the iterator is not valid.
        """
        pass

    @abstractmethod
    def value(self) -> bytes:
        """
        Return the value at the current position.

        Raises:
            ContractViolation: If the iterator is not valid.
        """
        pass

    @abstractmethod
    async def next(self) -> None:
        """
        Advance to the next pair in scan direction.

        Raises:
            ContractViolation: If the iterator is not valid.
        """
        pass

    @abstractmethod
    def error(self) -> Exception | None:
        """Return the error that ended the scan early, if any."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the iterator. Safe to call more than once."""
        pass

    def __aiter__(self) -> AsyncIterator[tuple[bytes, bytes]]:
        return self

    async def __anext__(self) -> tuple[bytes, bytes]:
        """Return the current pair and advance past it."""
        if not self.valid():
            raise StopAsyncIteration
        pair = (self.key(), self.value())
        await self.next()
        return pair

    async def __aenter__(self) -> "Iterator":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
