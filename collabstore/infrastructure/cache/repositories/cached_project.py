"""Cache-aside wrapper for the project repository."""

from __future__ import annotations

from typing import Any

from collabstore.application.interfaces.repositories import IProjectRepository
from collabstore.core.constants import CACHE_OP_GET_ALL, CACHE_OP_GET_BY_KEY
from collabstore.domain.entities import Project
from collabstore.domain.enums import ResourceType
from collabstore.domain.value_objects.core import ID
from collabstore.infrastructure.cache.invalidation import (
    clear_key,
    clear_pattern,
    clear_resource_type,
)
from collabstore.infrastructure.cache.repositories.base import CachedRepository


class CachedProjectRepository(CachedRepository[IProjectRepository]):
    """Project repository with cache-aside reads. Namespaces embed projects.

    Lookups by key are cached under ``Project:GetByKey:<key>``. Update and
    Delete flush ``Project:GetByKey:<id>:*``, which does not cover those
    entries; stale by-key copies live until they expire or are evicted.
    """

    resource_type = ResourceType.PROJECT

    async def create(self, namespace_id: ID, project: Project) -> None:
        """Flush list pages and Namespace entries, then insert."""
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_ALL)
        await clear_resource_type(self.cache, ResourceType.NAMESPACE)
        await self.repo.create(namespace_id, project)

    async def get(self, id: ID) -> Project:
        return await self._get_or_load(self._key(id), Project, lambda: self.repo.get(id))

    async def get_by_key(self, key: str) -> Project:
        return await self._get_or_load(
            self._key(CACHE_OP_GET_BY_KEY, key), Project, lambda: self.repo.get_by_key(key)
        )

    async def get_all(self, namespace_id: ID, offset: int, limit: int) -> list[Project]:
        return await self._get_or_load(
            self._key(CACHE_OP_GET_ALL, namespace_id, offset, limit),
            list[Project],
            lambda: self.repo.get_all(namespace_id, offset, limit),
        )

    async def update(self, id: ID, patch: dict[str, Any]) -> Project:
        """Update, write the result through, then flush by-key and list pages."""
        project = await self.repo.update(id, patch)
        await self._write_through(self._key(id), project)
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_BY_KEY, id)
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_ALL)
        return project

    async def delete(self, id: ID) -> None:
        """Drop the cached copy, delete, then flush list, by-key and Namespace entries."""
        await clear_key(self.cache, self.resource_type, id)
        await self.repo.delete(id)
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_ALL)
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_BY_KEY, id)
        await clear_resource_type(self.cache, ResourceType.NAMESPACE)
