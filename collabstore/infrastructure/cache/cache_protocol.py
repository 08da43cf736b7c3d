"""Cache backend protocol consumed by BaseCache (DIP)."""

from typing import Protocol


class CacheBackend(Protocol):
    """Raw key/value operations of a cache backend (e.g. Redis).

    Implementations raise on backend failure; they never swallow errors.
    """

    async def get(self, key: str) -> bytes | None:
        """Return the stored bytes, or None if the key does not exist."""
        ...

    async def set(self, key: str, value: bytes, ttl: int | None = None) -> None:
        """Store value; ttl in seconds, None for the backend default."""
        ...

    async def delete(self, key: str) -> None:
        """Remove exactly this key. Missing keys are not an error."""
        ...

    async def keys(self, pattern: str) -> list[str]:
        """Return a snapshot of the keys currently matching a glob pattern."""
        ...

    async def ping(self) -> None:
        """Raise if the backend is unreachable."""
        ...

    async def close(self) -> None:
        """Release the connection pool."""
        ...
