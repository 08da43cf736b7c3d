"""Cache-aside wrapper for the permission repository.

Permission reads are not cached (they back authorization checks and must
see the latest grants). Writes flush cached roles and users, which embed
their permissions.
"""

from __future__ import annotations

from collabstore.application.interfaces.repositories import IPermissionRepository
from collabstore.domain.entities import Permission
from collabstore.domain.enums import PermissionKind, ResourceType, SystemRole
from collabstore.domain.value_objects.core import ID
from collabstore.infrastructure.cache.invalidation import clear_resource_type
from collabstore.infrastructure.cache.repositories.base import CachedRepository


class CachedPermissionRepository(CachedRepository[IPermissionRepository]):
    resource_type = ResourceType.PERMISSION

    async def _clear_cross_cache(self) -> None:
        """Flush cached roles and users, which embed permissions."""
        await clear_resource_type(self.cache, ResourceType.ROLE)
        await clear_resource_type(self.cache, ResourceType.USER)

    async def create(self, permission: Permission) -> None:
        """Flush roles and users, then insert."""
        await self._clear_cross_cache()
        await self.repo.create(permission)

    async def get(self, id: ID) -> Permission:
        return await self.repo.get(id)

    async def get_by_subject(self, id: ID) -> list[Permission]:
        return await self.repo.get_by_subject(id)

    async def get_by_target(self, id: ID) -> list[Permission]:
        return await self.repo.get_by_target(id)

    async def get_by_subject_and_target(self, subject: ID, target: ID) -> list[Permission]:
        return await self.repo.get_by_subject_and_target(subject, target)

    async def update(self, id: ID, kind: PermissionKind) -> Permission:
        """Flush roles and users, then update."""
        await self._clear_cross_cache()
        return await self.repo.update(id, kind)

    async def delete(self, id: ID) -> None:
        """Flush roles and users, then delete."""
        await self._clear_cross_cache()
        await self.repo.delete(id)

    async def has_permission(self, subject: ID, target: ID, *kinds: PermissionKind) -> bool:
        return await self.repo.has_permission(subject, target, *kinds)

    async def has_any_relation(self, subject: ID, target: ID) -> bool:
        return await self.repo.has_any_relation(subject, target)

    async def has_system_role(self, subject: ID, *roles: SystemRole) -> bool:
        return await self.repo.has_system_role(subject, *roles)
