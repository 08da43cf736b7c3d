"""Cache layer: key builder, Redis backend, BaseCache and cached repositories."""

from collabstore.infrastructure.cache.base_cache import BaseCache
from collabstore.infrastructure.cache.cache_protocol import CacheBackend
from collabstore.infrastructure.cache.keys import WILDCARD, compose_cache_key
from collabstore.infrastructure.cache.redis_cache import RedisCacheBackend

__all__ = [
    "WILDCARD",
    "BaseCache",
    "CacheBackend",
    "RedisCacheBackend",
    "compose_cache_key",
]
