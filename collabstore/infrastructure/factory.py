"""Repository factory: wires shared backend handles into repositories.

Build one factory at startup (``RepositoryFactory.from_settings``), hand
out repositories from it, and call ``close()`` at shutdown. The cache
backend, record database and object-store client are shared by every
repository the factory creates.
"""

from __future__ import annotations

import logging

from opentelemetry import trace

from collabstore.application.interfaces.repositories import (
    IAssignmentRepository,
    ICommentRepository,
    INamespaceRepository,
    INotificationRepository,
    IPermissionRepository,
    IProjectRepository,
    IRoleRepository,
)
from collabstore.core.config import Settings
from collabstore.domain.exceptions import (
    InvalidRepositoryError,
    NoLoggerError,
    NoTracerError,
)
from collabstore.infrastructure.cache.base_cache import BaseCache
from collabstore.infrastructure.cache.cache_protocol import CacheBackend
from collabstore.infrastructure.cache.redis_cache import RedisCacheBackend
from collabstore.infrastructure.cache.repositories import (
    CachedAssignmentRepository,
    CachedCommentRepository,
    CachedNamespaceRepository,
    CachedNotificationRepository,
    CachedPermissionRepository,
    CachedProjectRepository,
    CachedRoleRepository,
)
from collabstore.infrastructure.external.storage.static_file import StaticFileStore
from collabstore.infrastructure.persistence.database import RecordDatabase
from collabstore.infrastructure.persistence.repositories.notification_repo import (
    NotificationRepository,
)
from collabstore.shared.telemetry.telemetry import TelemetryConfig


class RepositoryFactory:
    """Creates record, cached and static file repositories over shared handles."""

    def __init__(
        self,
        settings: Settings,
        cache_backend: CacheBackend | None,
        database: RecordDatabase | None,
        static_files: StaticFileStore | None = None,
        *,
        logger: logging.Logger | None,
        tracer: trace.Tracer | None,
    ) -> None:
        """Initialize with the shared handles.

        Raises:
            NoLoggerError: If logger is None.
            NoTracerError: If tracer is None.
            NoClientError: If cache_backend is None.
        """
        if logger is None:
            raise NoLoggerError()
        if tracer is None:
            raise NoTracerError()
        self.settings = settings
        self.logger = logger
        self.tracer = tracer
        self.cache_backend = cache_backend
        self.database = database
        self.static_files = static_files
        self.cache = BaseCache(
            cache_backend,
            ttl=settings.cache_default_ttl,
            logger=logger,
            tracer=tracer,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        logger: logging.Logger | None,
        tracer: trace.Tracer | None,
        telemetry: TelemetryConfig | None = None,
    ) -> RepositoryFactory:
        """Create Redis, database and S3 handles from settings.

        When telemetry is given (and set up), the Redis client, the
        record-store engine and logging are instrumented with it.
        """
        database = RecordDatabase.from_settings(settings)
        if telemetry is not None:
            telemetry.instrument(engine=database.engine)
        return cls(
            settings,
            RedisCacheBackend.from_settings(settings),
            database,
            StaticFileStore.from_settings(settings, logger=logger, tracer=tracer),
            logger=logger,
            tracer=tracer,
        )

    async def ping(self) -> None:
        """Verify cache and record-store connectivity (InvalidDatabaseError on failure)."""
        await self.cache_backend.ping()
        if self.database is not None:
            await self.database.ping()

    async def close(self) -> None:
        """Release the shared handles."""
        await self.cache_backend.close()
        if self.database is not None:
            await self.database.close()

    def _cached_kwargs(self) -> dict:
        return {"read_policy": self.settings.cache_read_policy, "logger": self.logger}

    def notification_repository(self) -> NotificationRepository:
        """Record-only notification repository (NoDriverError without a database)."""
        return NotificationRepository(self.database, logger=self.logger, tracer=self.tracer)

    def cached_notification_repository(
        self, repo: INotificationRepository | None = None
    ) -> CachedNotificationRepository:
        """Cached notifications; wraps notification_repository() unless repo is given."""
        inner = repo if repo is not None else self.notification_repository()
        return CachedNotificationRepository(inner, self.cache, **self._cached_kwargs())

    def cached_assignment_repository(
        self, repo: IAssignmentRepository
    ) -> CachedAssignmentRepository:
        return CachedAssignmentRepository(
            repo,
            self.cache,
            cached_resource_types=self.settings.cache_assignment_resource_types,
            **self._cached_kwargs(),
        )

    def cached_comment_repository(self, repo: ICommentRepository) -> CachedCommentRepository:
        return CachedCommentRepository(repo, self.cache, **self._cached_kwargs())

    def cached_namespace_repository(
        self, repo: INamespaceRepository
    ) -> CachedNamespaceRepository:
        return CachedNamespaceRepository(repo, self.cache, **self._cached_kwargs())

    def cached_permission_repository(
        self, repo: IPermissionRepository
    ) -> CachedPermissionRepository:
        return CachedPermissionRepository(repo, self.cache, **self._cached_kwargs())

    def cached_project_repository(self, repo: IProjectRepository) -> CachedProjectRepository:
        return CachedProjectRepository(repo, self.cache, **self._cached_kwargs())

    def cached_role_repository(self, repo: IRoleRepository) -> CachedRoleRepository:
        return CachedRoleRepository(repo, self.cache, **self._cached_kwargs())

    def static_file_store(self) -> StaticFileStore:
        """The shared static file store.

        Raises:
            InvalidRepositoryError: If the factory was built without one.
        """
        if self.static_files is None:
            raise InvalidRepositoryError("static file store is not configured")
        return self.static_files
