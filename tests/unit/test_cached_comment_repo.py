"""Tests for CachedCommentRepository."""

import pytest

from collabstore.domain.entities import Comment
from collabstore.domain.enums import ResourceType
from collabstore.domain.exceptions import CommentUpdateError, NotFoundError
from collabstore.domain.value_objects.core import ID
from collabstore.infrastructure.cache.repositories import CachedCommentRepository

C1 = ID("c1", ResourceType.COMMENT)
U1 = ID("u1", ResourceType.USER)
D1 = ID("d1", ResourceType.DOCUMENT)


def _comment(content: str = "Looks good") -> Comment:
    return Comment(id=C1, content=content, created_by=U1, belongs_to=D1)


@pytest.fixture
def repo(inner, cache) -> CachedCommentRepository:
    return CachedCommentRepository(inner, cache)


async def test_create_flushes_parent_lists_and_parent_type(repo, backend) -> None:
    await repo.create(D1, _comment())

    assert backend.ops("keys", "inner") == [
        ("keys", "Comment:GetAllBelongsTo:d1:*"),
        ("keys", "Document:*"),
        ("inner", "create"),
    ]


async def test_create_on_other_parent_skips_type_flush(repo, backend) -> None:
    await repo.create(ID("t1", ResourceType.TODO), _comment())

    assert backend.ops("keys", "inner") == [
        ("keys", "Comment:GetAllBelongsTo:t1:*"),
        ("inner", "create"),
    ]


async def test_get_is_cached_by_id(repo, inner, backend) -> None:
    inner.get.return_value = _comment()

    assert await repo.get(C1) == _comment()
    assert await repo.get(C1) == _comment()
    inner.get.assert_awaited_once_with(C1)
    assert "Comment:c1" in backend.store


async def test_get_all_belongs_to(repo, inner, backend) -> None:
    inner.get_all_belongs_to.return_value = [_comment()]

    assert await repo.get_all_belongs_to(D1, 0, 20) == [_comment()]
    assert backend.ops("set") == [("set", "Comment:GetAllBelongsTo:d1:0:20")]


async def test_update_writes_through_then_flushes_lists(repo, inner, backend) -> None:
    updated = _comment("Edited")
    inner.update.return_value = updated

    assert await repo.update(C1, "Edited") == updated
    assert backend.ops("set", "keys", "inner") == [
        ("inner", "update"),
        ("set", "Comment:c1"),
        ("keys", "Comment:GetAllBelongsTo:*"),
    ]
    assert await repo.get(C1) == updated
    inner.get.assert_not_awaited()


async def test_update_failure_leaves_cache_alone(repo, inner, backend) -> None:
    inner.update.side_effect = CommentUpdateError("no row")

    with pytest.raises(CommentUpdateError):
        await repo.update(C1, "Edited")

    assert backend.ops("set", "keys", "delete") == []


async def test_delete_order(repo, backend) -> None:
    await repo.delete(C1)

    assert backend.ops("keys", "delete", "inner") == [
        ("delete", "Comment:c1"),
        ("inner", "delete"),
        ("keys", "Comment:GetAllBelongsTo:*"),
        ("keys", "Document:*"),
        ("keys", "Issue:*"),
    ]


async def test_delete_not_found_propagates(repo, inner, backend) -> None:
    inner.delete.side_effect = NotFoundError()

    with pytest.raises(NotFoundError):
        await repo.delete(C1)

    assert backend.ops("keys") == []
