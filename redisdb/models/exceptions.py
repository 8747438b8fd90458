"""
Custom exceptions for the Redis-backed key-value store.
"""

from redis.exceptions import RedisError

# Transport failures (network, protocol, server-side) are redis-py errors and
# are propagated unwrapped. The alias lets callers name them without
# importing redis directly.
TransportError = RedisError


class RedisDBError(Exception):
    """Base class for recoverable errors raised by the store."""


class InvalidKeyError(RedisDBError, ValueError):
    """
    Raised when a key, or an explicitly given range bound, is empty, or when
    a key names the key index itself.

    Validation happens before any request is sent to Redis.
    """

    def __init__(self, message: str = "key cannot be empty") -> None:
        super().__init__(message)


class InvalidValueError(RedisDBError, ValueError):
    """Raised when None is written as a value."""

    def __init__(self, message: str = "value cannot be None") -> None:
        super().__init__(message)


class BatchClosedError(RedisDBError):
    """Raised when a batch is used after it was written or closed."""

    def __init__(self, message: str = "batch has been written or closed") -> None:
        super().__init__(message)


class UnknownBackendError(RedisDBError, KeyError):
    """Raised when no creator is registered for a backend name."""

    def __init__(self, backend: str, known: list[str]) -> None:
        self.backend = backend
        self.known = known
        super().__init__(
            f"unknown db backend {backend!r}, expected one of {', '.join(known) or 'none'}"
        )


class ContractViolation(RuntimeError):
    """
    Raised when key(), value() or next() is called on an invalid iterator.

    This signals a bug in the caller, not a runtime condition. It is
    intentionally not a RedisDBError so that handlers for store errors do
    not swallow it.
    """

    def __init__(self, message: str = "iterator is invalid") -> None:
        super().__init__(message)
