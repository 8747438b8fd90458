"""
RedisDBConfig - connection and iteration settings for RedisDB.
"""

import os
from dataclasses import dataclass


@dataclass
class RedisDBConfig:
    """
    Settings consumed once, when a RedisDB builds its client.

    Attributes:
        host: Redis server host.
        port: Redis server port.
        password: Password for AUTH, None when not set.
        db: Numeric Redis database to select.
        socket_timeout: Read/write timeout in seconds.
        socket_connect_timeout: Connect timeout in seconds.
        page_size: Keys fetched per index page while iterating. Also the
            capacity of the iterator's prefetch buffer.
    """

    # Default number of keys per iterator page
    DEFAULT_PAGE_SIZE = 10000

    # Default socket timeout (one minute)
    DEFAULT_TIMEOUT_S = 60.0

    host: str = "localhost"
    port: int = 6379
    password: str | None = None
    db: int = 0
    socket_timeout: float = DEFAULT_TIMEOUT_S
    socket_connect_timeout: float = DEFAULT_TIMEOUT_S
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if not self.host or not self.host.strip():
            raise ValueError("host cannot be empty")
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be in 1..65535, got {self.port}")
        if self.db < 0:
            raise ValueError(f"db must be >= 0, got {self.db}")
        if self.socket_timeout <= 0:
            raise ValueError(f"socket_timeout must be positive, got {self.socket_timeout}")
        if self.socket_connect_timeout <= 0:
            raise ValueError(
                f"socket_connect_timeout must be positive, got {self.socket_connect_timeout}"
            )
        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        # Each page is held in memory twice (keys, then MGET reply)
        if self.page_size > 1_000_000:
            raise ValueError(
                f"page_size too large: {self.page_size}. Maximum 1000000 keys per page."
            )

    @classmethod
    def from_env(cls) -> "RedisDBConfig":
        """
        Build a config from REDISDB_* environment variables.

        Unset variables keep their defaults.
        """
        return cls(
            host=os.environ.get("REDISDB_HOST", "localhost"),
            port=int(os.environ.get("REDISDB_PORT", "6379")),
            password=os.environ.get("REDISDB_PASSWORD") or None,
            db=int(os.environ.get("REDISDB_DB", "0")),
            page_size=int(os.environ.get("REDISDB_PAGE_SIZE", str(cls.DEFAULT_PAGE_SIZE))),
        )
