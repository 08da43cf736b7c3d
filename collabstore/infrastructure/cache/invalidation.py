"""Invalidation steps used by the cached repositories' write paths.

Each helper issues exactly one cache operation so the callers read as
the ordered list of steps a write performs. Failures propagate as
CacheDeleteError and stop the caller's sequence.
"""

from collabstore.domain.enums import ResourceType
from collabstore.infrastructure.cache.base_cache import BaseCache
from collabstore.infrastructure.cache.keys import WILDCARD, KeyPart, compose_cache_key


async def clear_key(cache: BaseCache, *parts: KeyPart) -> None:
    """Delete the exact key built from parts."""
    await cache.delete(compose_cache_key(*parts))


async def clear_pattern(cache: BaseCache, *parts: KeyPart) -> int:
    """Delete every key under the prefix built from parts (parts + ``*``)."""
    return await cache.delete_pattern(compose_cache_key(*parts, WILDCARD))


async def clear_resource_type(cache: BaseCache, rtype: ResourceType) -> int:
    """Delete every cached entry owned by a resource type (``<Type>:*``)."""
    return await clear_pattern(cache, rtype)
