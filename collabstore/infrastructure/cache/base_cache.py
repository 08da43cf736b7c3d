"""Cache primitives shared by every cached repository.

BaseCache wraps a CacheBackend with Get/Set/Delete/DeletePattern. Each
primitive runs in its own span and turns backend failures into the
repository error taxonomy. Values are stored as JSON produced by pydantic
TypeAdapters, so a value read back with the type it was written as keeps
its Python type (entities, IDs, enums, datetimes, lists of those).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar

from opentelemetry import trace
from pydantic import TypeAdapter, ValidationError

from collabstore.core.constants import SPAN_PREFIX_CACHE
from collabstore.domain.exceptions import (
    CacheDeleteError,
    CacheReadError,
    CacheWriteError,
    NoClientError,
)
from collabstore.infrastructure.cache.cache_protocol import CacheBackend
from collabstore.shared.telemetry.tracing import TracedOperation, add_span_attributes, span_name

T = TypeVar("T")

module_logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(tp: Any) -> TypeAdapter:
    """Return a cached TypeAdapter for tp (building one is comparatively costly)."""
    return TypeAdapter(tp)


class BaseCache:
    """Get/Set/Delete/DeletePattern over a shared cache backend."""

    component = "BaseCache"

    def __init__(
        self,
        backend: CacheBackend | None,
        *,
        ttl: int | None = None,
        logger: logging.Logger | None = None,
        tracer: trace.Tracer | None = None,
    ) -> None:
        """Initialize with a backend and optional default TTL.

        Args:
            backend: Shared cache backend handle.
            ttl: Seconds until entries expire; None keeps the backend default.
            logger: Logger for hit/miss/invalidation messages.
            tracer: Tracer for primitive spans (global tracer when None).

        Raises:
            NoClientError: If backend is None.
        """
        if backend is None:
            raise NoClientError()
        self.backend = backend
        self.ttl = ttl
        self.logger = logger or module_logger
        self.tracer = tracer or trace.get_tracer(__name__)

    def _span(self, operation: str, key: str) -> TracedOperation:
        return TracedOperation(
            span_name(SPAN_PREFIX_CACHE, self.component, operation),
            {"cache.key": key},
            tracer=self.tracer,
        )

    async def get(self, key: str, into: type[T] | Any) -> T | None:
        """Return the value cached under key decoded as ``into``, or None on miss.

        Args:
            key: Exact cache key.
            into: Type to decode into (e.g. Assignment or list[Assignment]).

        Raises:
            CacheReadError: On backend failure or undecodable cached data.
        """
        with self._span("Get", key):
            try:
                raw = await self.backend.get(key)
            except Exception as e:
                self.logger.error("Cache get failed for %s: %s", key, e)
                raise CacheReadError(key, str(e)) from e
            if raw is None:
                add_span_attributes(**{"cache.hit": False})
                self.logger.debug("Cache MISS: %s", key)
                return None
            try:
                value = _adapter(into).validate_json(raw)
            except ValidationError as e:
                self.logger.error("Cache entry %s could not be decoded: %s", key, e)
                raise CacheReadError(key, str(e)) from e
            add_span_attributes(**{"cache.hit": True})
            self.logger.debug("Cache HIT: %s", key)
            return value

    async def set(self, key: str, value: Any) -> None:
        """Store value under key with the configured TTL.

        Raises:
            ValueError: If value is None (None is reserved for a miss).
            CacheWriteError: On serialization or backend failure.
        """
        if value is None:
            raise ValueError(f"Refusing to cache None under {key!r}")
        with self._span("Set", key):
            try:
                payload = _adapter(type(value)).dump_json(value)
                await self.backend.set(key, payload, self.ttl)
            except Exception as e:
                self.logger.error("Cache set failed for %s: %s", key, e)
                raise CacheWriteError(key, str(e)) from e
            self.logger.debug("Cache SET: %s (TTL: %s)", key, self.ttl)

    async def delete(self, key: str) -> None:
        """Remove exactly key.

        Raises:
            CacheDeleteError: On backend failure.
        """
        with self._span("Delete", key):
            try:
                await self.backend.delete(key)
            except Exception as e:
                self.logger.error("Cache delete failed for %s: %s", key, e)
                raise CacheDeleteError(key, str(e)) from e
            self.logger.debug("Cache DELETE: %s", key)

    async def delete_pattern(self, pattern: str) -> int:
        """Delete every key currently matching pattern, one key at a time.

        The matching keys are snapshotted first, then removed with delete().
        Keys written after the snapshot survive. The first failing delete
        stops the loop; keys already removed stay removed.

        Returns:
            Number of keys deleted.

        Raises:
            CacheDeleteError: If enumeration or any single delete fails.
        """
        with self._span("DeletePattern", pattern):
            try:
                keys = await self.backend.keys(pattern)
            except Exception as e:
                self.logger.error("Cache key scan failed for %s: %s", pattern, e)
                raise CacheDeleteError(pattern, str(e)) from e
            for key in keys:
                await self.delete(key)
            add_span_attributes(**{"cache.deleted": len(keys)})
            if keys:
                self.logger.debug("Cache INVALIDATE: %s (%s keys)", pattern, len(keys))
            return len(keys)
