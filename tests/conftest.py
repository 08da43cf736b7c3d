"""Pytest configuration and fixtures for collabstore.

Unit tests run against an in-memory cache backend and an in-memory span
exporter. Tests marked requires_db use a live Postgres from DATABASE_URL;
run without one via: pytest -m 'not requires_db'.
"""

from fnmatch import fnmatchcase
from unittest.mock import DEFAULT, AsyncMock

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from collabstore.core.config import load_settings
from collabstore.domain.exceptions import InvalidConfigError
from collabstore.infrastructure.cache.base_cache import BaseCache
from collabstore.infrastructure.persistence.database import RecordDatabase


class InMemoryCacheBackend:
    """CacheBackend double: dict storage, glob matching, call log and injectable failures.

    ``log`` records (operation, key-or-pattern) for every call, in order.
    Failures are configured per operation (``fail["delete"] = exc``) or per
    call (``fail_keys[("delete", "Assignment:a1")] = exc``).
    """

    def __init__(self) -> None:
        self.store: dict[str, bytes] = {}
        self.log: list[tuple[str, str]] = []
        self.fail: dict[str, Exception] = {}
        self.fail_keys: dict[tuple[str, str], Exception] = {}

    def _record(self, op: str, key: str) -> None:
        self.log.append((op, key))
        exc = self.fail_keys.get((op, key)) or self.fail.get(op)
        if exc is not None:
            raise exc

    def ops(self, *names: str) -> list[tuple[str, str]]:
        """Logged calls filtered to the given operations."""
        return [entry for entry in self.log if entry[0] in names]

    async def get(self, key: str) -> bytes | None:
        self._record("get", key)
        return self.store.get(key)

    async def set(self, key: str, value: bytes, ttl: int | None = None) -> None:
        self._record("set", key)
        self.store[key] = value

    async def delete(self, key: str) -> None:
        self._record("delete", key)
        self.store.pop(key, None)

    async def keys(self, pattern: str) -> list[str]:
        self._record("keys", pattern)
        return [key for key in self.store if fnmatchcase(key, pattern)]

    async def ping(self) -> None:
        return None

    async def close(self) -> None:
        return None


def _log_inner_call(backend: InMemoryCacheBackend, name: str):
    def side_effect(*args, **kwargs):
        backend.log.append(("inner", name))
        return DEFAULT

    return side_effect


@pytest.fixture
def backend() -> InMemoryCacheBackend:
    return InMemoryCacheBackend()


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def tracer(span_exporter: InMemorySpanExporter):
    """Tracer that exports finished spans synchronously to span_exporter."""
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider.get_tracer("collabstore.tests")


@pytest.fixture
def cache(backend: InMemoryCacheBackend, tracer) -> BaseCache:
    return BaseCache(backend, tracer=tracer)


@pytest.fixture
def inner(backend: InMemoryCacheBackend) -> AsyncMock:
    """Wrapped record repository; its write calls are appended to backend.log.

    Configure results with ``inner.update.return_value``. Setting a new
    side_effect (e.g. an exception) replaces the logging.
    """
    repo = AsyncMock()
    for name in ("create", "update", "delete", "add_member", "remove_member"):
        getattr(repo, name).side_effect = _log_inner_call(backend, name)
    return repo


@pytest.fixture
async def record_db() -> RecordDatabase:
    """Record database for integration tests; skipped when Postgres is not configured.

    Requires DATABASE_URL (postgresql+asyncpg://...) and S3_BUCKET, and the
    notifications migration applied.
    """
    try:
        settings = load_settings()
    except InvalidConfigError:
        pytest.skip("Postgres not configured: set DATABASE_URL and S3_BUCKET")
    db = RecordDatabase.from_settings(settings)
    yield db
    await db.close()
