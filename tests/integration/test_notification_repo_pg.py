"""Notification repository integration tests. Require Postgres with migrations applied."""

import pytest

from collabstore.domain.entities import Notification
from collabstore.domain.enums import ResourceType
from collabstore.domain.exceptions import NotFoundError
from collabstore.domain.value_objects.core import ID
from collabstore.infrastructure.persistence.repositories import NotificationRepository


def _new_notification(recipient: ID, title: str) -> Notification:
    return Notification(id=ID.nil(ResourceType.NOTIFICATION), title=title, recipient=recipient)


@pytest.mark.requires_db
async def test_create_get_update_delete(record_db) -> None:
    """Full lifecycle of one notification."""
    repo = NotificationRepository(record_db)
    recipient = ID.new(ResourceType.USER)
    notification = _new_notification(recipient, "Assigned to ELEMO-1")

    await repo.create(notification)
    found = await repo.get(notification.id, recipient)
    assert found.title == "Assigned to ELEMO-1"
    assert found.read is False
    assert found.updated_at is None

    updated = await repo.update(notification.id, recipient, True)
    assert updated.read is True
    assert updated.updated_at is not None

    await repo.delete(notification.id, recipient)
    with pytest.raises(NotFoundError):
        await repo.get(notification.id, recipient)


@pytest.mark.requires_db
async def test_get_all_by_recipient_newest_first(record_db) -> None:
    repo = NotificationRepository(record_db)
    recipient = ID.new(ResourceType.USER)
    first = _new_notification(recipient, "First")
    second = _new_notification(recipient, "Second")
    await repo.create(first)
    await repo.create(second)

    page = await repo.get_all_by_recipient(recipient, 0, 10)
    assert [n.title for n in page] == ["Second", "First"]
    assert await repo.get_all_by_recipient(recipient, 2, 10) == []

    for notification in (first, second):
        await repo.delete(notification.id, recipient)


@pytest.mark.requires_db
async def test_other_recipient_cannot_see_notification(record_db) -> None:
    repo = NotificationRepository(record_db)
    recipient = ID.new(ResourceType.USER)
    notification = _new_notification(recipient, "Private")
    await repo.create(notification)

    with pytest.raises(NotFoundError):
        await repo.get(notification.id, ID.new(ResourceType.USER))
    with pytest.raises(NotFoundError):
        await repo.delete(notification.id, ID.new(ResourceType.USER))

    await repo.delete(notification.id, recipient)
