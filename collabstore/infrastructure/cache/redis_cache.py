"""Redis cache backend.

Thin async wrapper over a shared ``redis.asyncio`` client. Unlike a
best-effort cache service it never swallows backend errors: BaseCache
translates them into CacheReadError / CacheWriteError / CacheDeleteError.
"""

from __future__ import annotations

import logging

import redis.asyncio as redis

from collabstore.core.config import Settings
from collabstore.core.constants import CACHE_SCAN_COUNT
from collabstore.domain.exceptions import InvalidDatabaseError, NoClientError

logger = logging.getLogger(__name__)


class RedisCacheBackend:
    """CacheBackend over Redis. One instance is shared by all cached repositories.

    Create with ``from_settings()`` at startup, call ``ping()`` to verify the
    connection, and ``close()`` at shutdown.
    """

    def __init__(self, client: redis.Redis | None) -> None:
        """Wrap an existing Redis client.

        Raises:
            NoClientError: If client is None.
        """
        if client is None:
            raise NoClientError()
        self.redis = client

    @classmethod
    def from_settings(cls, settings: Settings) -> RedisCacheBackend:
        """Build a pooled client from settings (TLS when redis_secure)."""
        client = redis.Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            db=settings.redis_db,
            username=settings.redis_username,
            password=settings.redis_password.get_secret_value() if settings.redis_password else None,
            ssl=settings.redis_secure,
            max_connections=settings.redis_max_connections,
            socket_connect_timeout=settings.redis_socket_timeout,
            socket_timeout=settings.redis_socket_timeout,
            socket_keepalive=True,
            decode_responses=False,
        )
        return cls(client)

    async def ping(self) -> None:
        """Verify the connection.

        Raises:
            InvalidDatabaseError: If Redis does not answer.
        """
        try:
            await self.redis.ping()
        except redis.RedisError as e:
            raise InvalidDatabaseError(str(e)) from e
        logger.info("Redis cache connected")

    async def close(self) -> None:
        await self.redis.aclose()
        logger.info("Redis cache disconnected")

    async def get(self, key: str) -> bytes | None:
        return await self.redis.get(key)

    async def set(self, key: str, value: bytes, ttl: int | None = None) -> None:
        if ttl is None:
            await self.redis.set(key, value)
        else:
            await self.redis.setex(key, ttl, value)

    async def delete(self, key: str) -> None:
        await self.redis.delete(key)

    async def keys(self, pattern: str) -> list[str]:
        """Snapshot keys matching pattern using SCAN (non-blocking, unlike KEYS).

        SCAN may return a key more than once; the snapshot is de-duplicated
        and keeps first-seen order.
        """
        found: dict[str, None] = {}
        async for key in self.redis.scan_iter(match=pattern, count=CACHE_SCAN_COUNT):
            found[key.decode() if isinstance(key, bytes) else key] = None
        return list(found)
