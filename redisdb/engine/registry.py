"""
Backend registry - look up store constructors by backend name.
"""

from collections.abc import Awaitable, Callable

from redisdb.interfaces.db import DB
from redisdb.models.exceptions import UnknownBackendError

REDIS_BACKEND = "redis"

DBCreator = Callable[..., Awaitable[DB]]

_creators: dict[str, DBCreator] = {}


def register_db_creator(backend: str, creator: DBCreator, force: bool = False) -> None:
    """
    Register an async constructor for a backend name.

    Args:
        backend: Name callers pass to new_db().
        creator: Coroutine function returning a connected DB.
        force: Replace an existing registration instead of failing.

    Raises:
        ValueError: If backend is already registered and force is False.
    """
    if backend in _creators and not force:
        raise ValueError(f"backend {backend!r} already registered")
    _creators[backend] = creator


async def new_db(backend: str, **kwargs) -> DB:
    """
    Create a store for a registered backend.

    Args:
        backend: Registered backend name, e.g. "redis".
        **kwargs: Passed through to the backend's creator.

    Raises:
        UnknownBackendError: If no creator is registered under backend.
    """
    creator = _creators.get(backend)
    if creator is None:
        raise UnknownBackendError(backend, sorted(_creators))
    return await creator(**kwargs)


def registered_backends() -> list[str]:
    return sorted(_creators)
