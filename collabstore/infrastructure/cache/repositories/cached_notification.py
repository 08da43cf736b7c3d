"""Cache-aside wrapper for the notification repository."""

from __future__ import annotations

from collabstore.application.interfaces.repositories import INotificationRepository
from collabstore.core.constants import CACHE_OP_GET_ALL_BY_RECIPIENT
from collabstore.domain.entities import Notification
from collabstore.domain.enums import ResourceType
from collabstore.domain.exceptions import NotFoundError
from collabstore.domain.value_objects.core import ID
from collabstore.infrastructure.cache.invalidation import clear_key, clear_pattern
from collabstore.infrastructure.cache.repositories.base import CachedRepository


class CachedNotificationRepository(CachedRepository[INotificationRepository]):
    """Notification repository with cache-aside reads.

    Notifications are cached by ID; ``recipient`` scopes the record-store
    query on a miss and is checked against the cached copy on a hit.
    """

    resource_type = ResourceType.NOTIFICATION

    async def create(self, notification: Notification) -> None:
        """Flush the recipient's list pages, then insert."""
        await clear_pattern(
            self.cache, self.resource_type, CACHE_OP_GET_ALL_BY_RECIPIENT, notification.recipient
        )
        await self.repo.create(notification)

    async def get(self, id: ID, recipient: ID) -> Notification:
        """Return the notification addressed to recipient.

        Raises:
            NotFoundError: If it does not exist or belongs to another recipient.
        """
        notification = await self._get_or_load(
            self._key(id), Notification, lambda: self.repo.get(id, recipient)
        )
        if notification.recipient != recipient:
            raise NotFoundError(details={"id": str(id)})
        return notification

    async def get_all_by_recipient(
        self, recipient: ID, offset: int, limit: int
    ) -> list[Notification]:
        return await self._get_or_load(
            self._key(CACHE_OP_GET_ALL_BY_RECIPIENT, recipient, offset, limit),
            list[Notification],
            lambda: self.repo.get_all_by_recipient(recipient, offset, limit),
        )

    async def update(self, id: ID, recipient: ID, read: bool) -> Notification:
        """Update, write the result through, then flush every recipient's list pages."""
        notification = await self.repo.update(id, recipient, read)
        await self._write_through(self._key(id), notification)
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_ALL_BY_RECIPIENT)
        return notification

    async def delete(self, id: ID, recipient: ID) -> None:
        """Drop the cached copy, delete, then flush every recipient's list pages."""
        await clear_key(self.cache, self.resource_type, id)
        await self.repo.delete(id, recipient)
        await clear_pattern(self.cache, self.resource_type, CACHE_OP_GET_ALL_BY_RECIPIENT)
