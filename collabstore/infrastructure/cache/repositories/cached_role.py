"""Cache-aside wrapper for the role repository."""

from __future__ import annotations

from typing import Any

from collabstore.application.interfaces.repositories import IRoleRepository
from collabstore.core.constants import CACHE_OP_GET_ALL_BELONGS_TO
from collabstore.domain.entities import Role
from collabstore.domain.enums import ResourceType
from collabstore.domain.exceptions import NotFoundError
from collabstore.domain.value_objects.core import ID
from collabstore.infrastructure.cache.invalidation import (
    clear_key,
    clear_pattern,
    clear_resource_type,
)
from collabstore.infrastructure.cache.repositories.base import CachedRepository


class CachedRoleRepository(CachedRepository[IRoleRepository]):
    """Role repository with cache-aside reads.

    Roles are cached by ID alone; ``belongs_to`` scopes the record-store
    query and the list keys, and is checked against a cached copy that
    records its owner. Organizations and projects embed their roles.
    """

    resource_type = ResourceType.ROLE

    async def create(self, created_by: ID, belongs_to: ID, role: Role) -> None:
        """Flush the owner's list pages, Organization and Project entries, then insert."""
        await clear_pattern(
            self.cache, self.resource_type, CACHE_OP_GET_ALL_BELONGS_TO, belongs_to
        )
        await clear_resource_type(self.cache, ResourceType.ORGANIZATION)
        await clear_resource_type(self.cache, ResourceType.PROJECT)
        await self.repo.create(created_by, belongs_to, role)

    async def get(self, id: ID, belongs_to: ID) -> Role:
        """Return the role owned by belongs_to.

        Raises:
            NotFoundError: If it does not exist or is owned by another resource.
        """
        role = await self._get_or_load(
            self._key(id), Role, lambda: self.repo.get(id, belongs_to)
        )
        if role.belongs_to is not None and role.belongs_to != belongs_to:
            raise NotFoundError(details={"id": str(id)})
        return role

    async def get_all_belongs_to(self, belongs_to: ID, offset: int, limit: int) -> list[Role]:
        return await self._get_or_load(
            self._key(CACHE_OP_GET_ALL_BELONGS_TO, belongs_to, offset, limit),
            list[Role],
            lambda: self.repo.get_all_belongs_to(belongs_to, offset, limit),
        )

    async def update(self, id: ID, belongs_to: ID, patch: dict[str, Any]) -> Role:
        """Update, write the result through, then flush all list pages."""
        role = await self.repo.update(id, belongs_to, patch)
        await self._write_through(self._key(id), role)
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_ALL_BELONGS_TO)
        return role

    async def _after_membership_change(self, belongs_to: ID) -> None:
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_ALL_BELONGS_TO)
        await clear_key(self.cache, ResourceType.ORGANIZATION, belongs_to)

    async def add_member(self, role_id: ID, member_id: ID, belongs_to: ID) -> None:
        """Drop the cached role, add the member, then flush list pages and the owner entry."""
        await clear_key(self.cache, self.resource_type, role_id)
        await self.repo.add_member(role_id, member_id, belongs_to)
        await self._after_membership_change(belongs_to)

    async def remove_member(self, role_id: ID, member_id: ID, belongs_to: ID) -> None:
        """Drop the cached role, remove the member, then flush list pages and the owner entry."""
        await clear_key(self.cache, self.resource_type, role_id)
        await self.repo.remove_member(role_id, member_id, belongs_to)
        await self._after_membership_change(belongs_to)

    async def delete(self, id: ID, belongs_to: ID) -> None:
        """Drop the cached role, delete, then flush list pages, Organization and Project entries."""
        await clear_key(self.cache, self.resource_type, id)
        await self.repo.delete(id, belongs_to)
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_ALL_BELONGS_TO)
        await clear_resource_type(self.cache, ResourceType.ORGANIZATION)
        await clear_resource_type(self.cache, ResourceType.PROJECT)
