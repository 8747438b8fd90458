"""
KVItem and KeyRange - the pairs an iterator yields and the range it covers.
"""

from dataclasses import dataclass

from redisdb.models.exceptions import InvalidKeyError, InvalidValueError

# Lexicographic range markers understood by ZRANGEBYLEX
LEX_MIN = b"-"
LEX_MAX = b"+"
LEX_INCLUSIVE = b"["
LEX_EXCLUSIVE = b"("

# Sorted set mirroring the key space, no stored key may take its name
INDEX_KEY = "__index__"


def check_key(key: bytes) -> None:
    """Raise InvalidKeyError for an empty (or missing) key, or the index key."""
    if key is None or len(key) == 0:
        raise InvalidKeyError()
    if key in (INDEX_KEY, INDEX_KEY.encode()):
        raise InvalidKeyError(f"key {key!r} is reserved for the key index")


def check_value(value: bytes | None) -> None:
    """Raise InvalidValueError for the absent sentinel."""
    if value is None:
        raise InvalidValueError()


def check_bounds(start: bytes | None, end: bytes | None) -> None:
    """
    Validate range bounds.

    None means unbounded. An explicitly empty bound is rejected because it
    cannot be told apart from "no bound" once it reaches Redis.
    """
    if (start is not None and len(start) == 0) or (end is not None and len(end) == 0):
        raise InvalidKeyError("range bounds cannot be empty, use None for unbounded")


@dataclass(slots=True)
class KVItem:
    """A key and its value as read from the store."""

    key: bytes
    value: bytes


@dataclass(frozen=True)
class KeyRange:
    """
    Immutable range descriptor for one iterator.

    Attributes:
        start: Start key (inclusive), None for unbounded.
        end: End key (exclusive), None for unbounded.
        reverse: True to traverse from end towards start.
    """

    start: bytes | None = None
    end: bytes | None = None
    reverse: bool = False

    def __post_init__(self) -> None:
        check_bounds(self.start, self.end)

    def is_empty(self) -> bool:
        """True when the window cannot contain any key."""
        return self.start is not None and self.end is not None and self.start >= self.end

    def lex_window(self) -> tuple[bytes, bytes]:
        """
        Translate the range into ZRANGEBYLEX (min, max) expressions.

        Returns:
            Tuple of (min, max), e.g. (b"[a", b"(d") for start=b"a", end=b"d".
        """
        low = LEX_MIN if self.start is None else LEX_INCLUSIVE + self.start
        high = LEX_MAX if self.end is None else LEX_EXCLUSIVE + self.end
        return low, high

    def window_after(self, last_key: bytes) -> tuple[bytes, bytes]:
        """
        Window for the page following one that ended at last_key.

        Forward scans move the lower bound past last_key, reverse scans move
        the upper bound below it. The bound on the other side is unchanged.
        """
        low, high = self.lex_window()
        if self.reverse:
            return low, LEX_EXCLUSIVE + last_key
        return LEX_EXCLUSIVE + last_key, high
