"""Cache-aside wrapper for the namespace repository."""

from __future__ import annotations

from typing import Any

from collabstore.application.interfaces.repositories import INamespaceRepository
from collabstore.core.constants import CACHE_OP_GET_ALL
from collabstore.domain.entities import Namespace
from collabstore.domain.enums import ResourceType
from collabstore.domain.value_objects.core import ID
from collabstore.infrastructure.cache.invalidation import (
    clear_key,
    clear_pattern,
    clear_resource_type,
)
from collabstore.infrastructure.cache.repositories.base import CachedRepository


class CachedNamespaceRepository(CachedRepository[INamespaceRepository]):
    """Namespace repository with cache-aside reads. Organizations embed namespaces."""

    resource_type = ResourceType.NAMESPACE

    async def create(self, org_id: ID, namespace: Namespace) -> None:
        """Flush list pages and Organization entries, then insert."""
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_ALL)
        await clear_resource_type(self.cache, ResourceType.ORGANIZATION)
        await self.repo.create(org_id, namespace)

    async def get(self, id: ID) -> Namespace:
        return await self._get_or_load(self._key(id), Namespace, lambda: self.repo.get(id))

    async def get_all(self, org_id: ID, offset: int, limit: int) -> list[Namespace]:
        return await self._get_or_load(
            self._key(CACHE_OP_GET_ALL, org_id, offset, limit),
            list[Namespace],
            lambda: self.repo.get_all(org_id, offset, limit),
        )

    async def update(self, id: ID, patch: dict[str, Any]) -> Namespace:
        """Update, write the result through, then flush list pages."""
        namespace = await self.repo.update(id, patch)
        await self._write_through(self._key(id), namespace)
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_ALL)
        return namespace

    async def delete(self, id: ID) -> None:
        """Drop the cached copy, delete, then flush list pages and Organization entries."""
        await clear_key(self.cache, self.resource_type, id)
        await self.repo.delete(id)
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_ALL)
        await clear_resource_type(self.cache, ResourceType.ORGANIZATION)
