"""Cache-aside base for the per-entity cached repositories."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, ClassVar, Generic, TypeVar

from collabstore.core.config import CacheReadPolicy
from collabstore.domain.enums import ResourceType
from collabstore.domain.exceptions import (
    CacheReadError,
    CacheWriteError,
    InvalidRepositoryError,
)
from collabstore.infrastructure.cache.base_cache import BaseCache
from collabstore.infrastructure.cache.keys import KeyPart, compose_cache_key

T = TypeVar("T")
RepoType = TypeVar("RepoType")

module_logger = logging.getLogger(__name__)


class CachedRepository(Generic[RepoType]):
    """Wraps a record repository with cache-aside reads and keyed invalidation.

    Reads go through _get_or_load: a hit is returned as is, a miss loads
    from the wrapped repository and populates the cache. Errors from the
    wrapped repository (including NotFoundError) propagate and nothing is
    cached. Cache failures surface as CacheReadError / CacheWriteError
    unless the read policy is BYPASS.

    Subclasses implement the write paths, calling the helpers in
    collabstore.infrastructure.cache.invalidation in a fixed order.
    """

    resource_type: ClassVar[ResourceType]

    def __init__(
        self,
        repo: RepoType | None,
        cache: BaseCache | None,
        *,
        read_policy: CacheReadPolicy = CacheReadPolicy.STRICT,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize with the wrapped repository and the shared cache.

        Raises:
            InvalidRepositoryError: If repo or cache is missing.
        """
        if repo is None:
            raise InvalidRepositoryError("wrapped repository is required")
        if cache is None:
            raise InvalidRepositoryError("cache is required")
        self.repo = repo
        self.cache = cache
        self.read_policy = read_policy
        self.logger = logger or module_logger

    def _key(self, *parts: KeyPart) -> str:
        """Key in this repository's namespace: ``<ResourceType>:<parts...>``."""
        return compose_cache_key(self.resource_type, *parts)

    async def _get_or_load(
        self,
        key: str,
        into: type[T] | Any,
        loader: Callable[[], Awaitable[T]],
    ) -> T:
        """Return the cached value for key, loading and caching it on a miss."""
        try:
            cached = await self.cache.get(key, into)
        except CacheReadError:
            if self.read_policy is not CacheReadPolicy.BYPASS:
                raise
            self.logger.warning("Cache read failed for %s, reading record store", key)
            return await loader()
        if cached is not None:
            return cached

        value = await loader()
        try:
            await self.cache.set(key, value)
        except CacheWriteError:
            if self.read_policy is not CacheReadPolicy.BYPASS:
                raise
            self.logger.warning("Cache populate failed for %s, returning record", key)
        return value

    async def _write_through(self, key: str, value: Any) -> None:
        """Replace the cached copy under key with value."""
        await self.cache.set(key, value)
