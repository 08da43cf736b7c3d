"""Cache-aside wrapper for the assignment repository."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from collabstore.application.interfaces.repositories import IAssignmentRepository
from collabstore.core.config import CacheReadPolicy
from collabstore.core.constants import CACHE_OP_GET_BY_RESOURCE, CACHE_OP_GET_BY_USER
from collabstore.domain.entities import Assignment
from collabstore.domain.enums import ResourceType
from collabstore.domain.exceptions import UnexpectedCachedResourceError
from collabstore.domain.value_objects.core import ID
from collabstore.infrastructure.cache.base_cache import BaseCache
from collabstore.infrastructure.cache.invalidation import (
    clear_key,
    clear_pattern,
    clear_resource_type,
)
from collabstore.infrastructure.cache.repositories.base import CachedRepository

# Resource types whose cached entries embed assignments by default.
DEFAULT_CACHED_RESOURCE_TYPES = (ResourceType.ISSUE,)


class CachedAssignmentRepository(CachedRepository[IAssignmentRepository]):
    """Assignment repository with cache-aside reads.

    Assignments show up inside cached issue (and optionally other resource)
    entries, so writes also flush those resource types. Which resource
    types are cached this way is configuration; an assignment on any other
    type is rejected with UnexpectedCachedResourceError.
    """

    resource_type = ResourceType.ASSIGNMENT

    def __init__(
        self,
        repo: IAssignmentRepository | None,
        cache: BaseCache | None,
        *,
        cached_resource_types: Iterable[ResourceType] = DEFAULT_CACHED_RESOURCE_TYPES,
        read_policy: CacheReadPolicy = CacheReadPolicy.STRICT,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(repo, cache, read_policy=read_policy, logger=logger)
        self.cached_resource_types = tuple(dict.fromkeys(cached_resource_types))

    async def create(self, assignment: Assignment) -> None:
        """Flush resource and user list pages and the resource type, then insert.

        Raises:
            UnexpectedCachedResourceError: If the resource type is not a cached
                one (after the list pages were flushed, before any insert).
        """
        await clear_pattern(
            self.cache, self.resource_type, CACHE_OP_GET_BY_RESOURCE, assignment.resource
        )
        await clear_pattern(
            self.cache, self.resource_type, CACHE_OP_GET_BY_USER, assignment.user
        )
        if assignment.resource.type not in self.cached_resource_types:
            raise UnexpectedCachedResourceError(assignment.resource.label)
        await clear_resource_type(self.cache, assignment.resource.type)
        await self.repo.create(assignment)

    async def get(self, id: ID) -> Assignment:
        return await self._get_or_load(
            self._key(id), Assignment, lambda: self.repo.get(id)
        )

    async def get_by_user(self, user_id: ID, offset: int, limit: int) -> list[Assignment]:
        return await self._get_or_load(
            self._key(CACHE_OP_GET_BY_USER, user_id, offset, limit),
            list[Assignment],
            lambda: self.repo.get_by_user(user_id, offset, limit),
        )

    async def get_by_resource(
        self, resource_id: ID, offset: int, limit: int
    ) -> list[Assignment]:
        return await self._get_or_load(
            self._key(CACHE_OP_GET_BY_RESOURCE, resource_id, offset, limit),
            list[Assignment],
            lambda: self.repo.get_by_resource(resource_id, offset, limit),
        )

    async def delete(self, id: ID) -> None:
        """Drop the cached copy, delete, then flush list pages and cached resource types."""
        await clear_key(self.cache, self.resource_type, id)
        await self.repo.delete(id)
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_BY_RESOURCE)
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_BY_USER)
        for rtype in self.cached_resource_types:
            await clear_resource_type(self.cache, rtype)
