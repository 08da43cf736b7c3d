"""Cache-aside wrapper for the comment repository."""

from __future__ import annotations

from collabstore.application.interfaces.repositories import ICommentRepository
from collabstore.core.constants import CACHE_OP_GET_ALL_BELONGS_TO
from collabstore.domain.entities import Comment
from collabstore.domain.entities.comment import COMMENTABLE_RESOURCE_TYPES
from collabstore.domain.enums import ResourceType
from collabstore.domain.value_objects.core import ID
from collabstore.infrastructure.cache.invalidation import (
    clear_key,
    clear_pattern,
    clear_resource_type,
)
from collabstore.infrastructure.cache.repositories.base import CachedRepository


class CachedCommentRepository(CachedRepository[ICommentRepository]):
    """Comment repository with cache-aside reads.

    Cached issues and documents embed their comments, so comment writes
    also flush the parent's resource type.
    """

    resource_type = ResourceType.COMMENT

    async def create(self, belongs_to: ID, comment: Comment) -> None:
        """Flush the parent's list pages and (issue or document) parent type, then insert."""
        await clear_pattern(
            self.cache, self.resource_type, CACHE_OP_GET_ALL_BELONGS_TO, belongs_to
        )
        if belongs_to.type in COMMENTABLE_RESOURCE_TYPES:
            await clear_resource_type(self.cache, belongs_to.type)
        await self.repo.create(belongs_to, comment)

    async def get(self, id: ID) -> Comment:
        return await self._get_or_load(self._key(id), Comment, lambda: self.repo.get(id))

    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Comment]:
        return await self._get_or_load(
            self._key(CACHE_OP_GET_ALL_BELONGS_TO, belongs_to, offset, limit),
            list[Comment],
            lambda: self.repo.get_all_belongs_to(belongs_to, offset, limit),
        )

    async def update(self, id: ID, content: str) -> Comment:
        """Update, write the result through, then flush all list pages."""
        comment = await self.repo.update(id, content)
        await self._write_through(self._key(id), comment)
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_ALL_BELONGS_TO)
        return comment

    async def delete(self, id: ID) -> None:
        """Drop the cached copy, delete, then flush list pages, Document and Issue entries."""
        await clear_key(self.cache, self.resource_type, id)
        await self.repo.delete(id)
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_ALL_BELONGS_TO)
        await clear_resource_type(self.cache, ResourceType.DOCUMENT)
        await clear_resource_type(self.cache, ResourceType.ISSUE)
