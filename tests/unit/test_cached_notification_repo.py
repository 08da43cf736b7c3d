"""Tests for CachedNotificationRepository."""

import pytest

from collabstore.domain.entities import Notification
from collabstore.domain.enums import ResourceType
from collabstore.domain.exceptions import NotFoundError
from collabstore.domain.value_objects.core import ID
from collabstore.infrastructure.cache.repositories import CachedNotificationRepository

NT1 = ID("nt1", ResourceType.NOTIFICATION)
U1 = ID("u1", ResourceType.USER)


def _notification(read: bool = False) -> Notification:
    return Notification(id=NT1, title="Assigned to ELEMO-1", recipient=U1, read=read)


@pytest.fixture
def repo(inner, cache) -> CachedNotificationRepository:
    return CachedNotificationRepository(inner, cache)


async def test_create_flushes_recipient_lists(repo, backend) -> None:
    await repo.create(_notification())

    assert backend.ops("keys", "inner") == [
        ("keys", "Notification:GetAllByRecipient:u1:*"),
        ("inner", "create"),
    ]


async def test_get_is_cached(repo, inner) -> None:
    inner.get.return_value = _notification()

    assert await repo.get(NT1, U1) == _notification()
    assert await repo.get(NT1, U1) == _notification()
    inner.get.assert_awaited_once_with(NT1, U1)


async def test_get_all_by_recipient(repo, inner, backend) -> None:
    inner.get_all_by_recipient.return_value = [_notification()]

    assert await repo.get_all_by_recipient(U1, 0, 10) == [_notification()]
    assert backend.ops("set") == [("set", "Notification:GetAllByRecipient:u1:0:10")]


async def test_update_order(repo, inner, backend) -> None:
    inner.update.return_value = _notification(read=True)

    assert (await repo.update(NT1, U1, True)).read is True
    assert backend.ops("set", "keys", "inner") == [
        ("inner", "update"),
        ("set", "Notification:nt1"),
        ("keys", "Notification:GetAllByRecipient:*"),
    ]


async def test_delete_order(repo, backend) -> None:
    await repo.delete(NT1, U1)

    assert backend.ops("keys", "delete", "inner") == [
        ("delete", "Notification:nt1"),
        ("inner", "delete"),
        ("keys", "Notification:GetAllByRecipient:*"),
    ]


async def test_get_not_found_is_not_cached(repo, inner, backend) -> None:
    inner.get.side_effect = NotFoundError()

    with pytest.raises(NotFoundError):
        await repo.get(NT1, U1)

    assert backend.ops("set") == []


async def test_cached_copy_is_not_served_to_another_recipient(repo, inner) -> None:
    """A hit filled by one recipient's read is NotFound for anyone else."""
    other = ID("u2", ResourceType.USER)
    inner.get.return_value = _notification()
    await repo.get(NT1, U1)

    with pytest.raises(NotFoundError):
        await repo.get(NT1, other)

    inner.get.assert_awaited_once_with(NT1, U1)
