"""Tests for CachedAssignmentRepository (cache-aside reads and invalidation order)."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from collabstore.core.config import CacheReadPolicy
from collabstore.domain.entities import Assignment
from collabstore.domain.enums import AssignmentKind, ResourceType
from collabstore.domain.exceptions import (
    CacheDeleteError,
    CacheReadError,
    InvalidRepositoryError,
    NotFoundError,
    UnexpectedCachedResourceError,
)
from collabstore.domain.value_objects.core import ID
from collabstore.infrastructure.cache.repositories import CachedAssignmentRepository

A1 = ID("a1", ResourceType.ASSIGNMENT)
U1 = ID("u1", ResourceType.USER)
I1 = ID("i1", ResourceType.ISSUE)


def _assignment() -> Assignment:
    return Assignment(id=A1, kind=AssignmentKind.ASSIGNEE, user=U1, resource=I1)


@pytest.fixture
def repo(inner, cache) -> CachedAssignmentRepository:
    return CachedAssignmentRepository(inner, cache)


async def test_get_miss_loads_and_populates_then_hits(repo, inner, backend) -> None:
    """First get loads from the record store and caches; second is served from cache."""
    inner.get.return_value = _assignment()

    first = await repo.get(A1)
    second = await repo.get(A1)

    assert first == _assignment()
    assert second == first
    inner.get.assert_awaited_once_with(A1)
    assert backend.ops("set") == [("set", "Assignment:a1")]


async def test_create_flushes_lists_and_issue_entries_before_insert(repo, backend) -> None:
    """Create clears the resource list, the user list and Issue entries, then inserts."""
    backend.store["Assignment:GetByResource:i1:0:10"] = b"[]"
    backend.store["Assignment:GetByUser:u1:0:10"] = b"[]"
    backend.store["Issue:i1"] = b"{}"

    await repo.create(_assignment())

    assert backend.ops("keys", "delete", "inner") == [
        ("keys", "Assignment:GetByResource:i1:*"),
        ("delete", "Assignment:GetByResource:i1:0:10"),
        ("keys", "Assignment:GetByUser:u1:*"),
        ("delete", "Assignment:GetByUser:u1:0:10"),
        ("keys", "Issue:*"),
        ("delete", "Issue:i1"),
        ("inner", "create"),
    ]
    assert backend.store == {}


async def test_create_on_uncached_resource_type_is_rejected(repo, inner, backend) -> None:
    """Only the two list patterns run before the unexpected resource type is reported."""
    assignment = _assignment()
    assignment.resource = ID("p1", ResourceType.PROJECT)

    with pytest.raises(UnexpectedCachedResourceError):
        await repo.create(assignment)

    assert backend.ops("keys") == [
        ("keys", "Assignment:GetByResource:p1:*"),
        ("keys", "Assignment:GetByUser:u1:*"),
    ]
    inner.create.assert_not_awaited()


async def test_create_honours_configured_resource_types(inner, cache, backend) -> None:
    """Document assignments are accepted when Document entries are cached."""
    repo = CachedAssignmentRepository(
        inner, cache, cached_resource_types=[ResourceType.ISSUE, ResourceType.DOCUMENT]
    )
    assignment = _assignment()
    assignment.resource = ID("d1", ResourceType.DOCUMENT)

    await repo.create(assignment)

    assert ("keys", "Document:*") in backend.log
    inner.create.assert_awaited_once()


async def test_create_stops_on_failed_pattern_delete(repo, inner, backend) -> None:
    backend.fail["keys"] = ConnectionError("down")

    with pytest.raises(CacheDeleteError):
        await repo.create(_assignment())

    inner.create.assert_not_awaited()


async def test_delete_stops_when_exact_delete_fails(repo, inner, backend) -> None:
    """A failing exact delete surfaces CacheDeleteError and skips the record store."""
    backend.fail_keys[("delete", "Assignment:a1")] = ConnectionError("down")

    with pytest.raises(CacheDeleteError):
        await repo.delete(A1)

    inner.delete.assert_not_awaited()


async def test_delete_order(repo, backend) -> None:
    await repo.delete(A1)

    assert backend.ops("keys", "delete", "inner") == [
        ("delete", "Assignment:a1"),
        ("inner", "delete"),
        ("keys", "Assignment:GetByResource:*"),
        ("keys", "Assignment:GetByUser:*"),
        ("keys", "Issue:*"),
    ]


async def test_delete_record_error_skips_after_phase(repo, inner, backend) -> None:
    inner.delete.side_effect = NotFoundError()

    with pytest.raises(NotFoundError):
        await repo.delete(A1)

    assert backend.ops("keys") == []


async def test_get_not_found_is_not_cached(repo, inner, backend) -> None:
    """A record-store miss propagates and nothing is written to the cache."""
    inner.get.side_effect = NotFoundError()

    with pytest.raises(NotFoundError):
        await repo.get(A1)

    assert backend.ops("set") == []


async def test_list_reads_use_paginated_keys(repo, inner, backend) -> None:
    inner.get_by_user.return_value = [_assignment()]
    inner.get_by_resource.return_value = []

    by_user = await repo.get_by_user(U1, 0, 10)
    by_resource = await repo.get_by_resource(I1, 10, 10)

    assert by_user == [_assignment()]
    assert by_resource == []
    assert backend.ops("set") == [
        ("set", "Assignment:GetByUser:u1:0:10"),
        ("set", "Assignment:GetByResource:i1:10:10"),
    ]


async def test_cached_empty_list_is_a_hit(repo, inner, backend) -> None:
    backend.store["Assignment:GetByUser:u1:0:0"] = b"[]"

    assert await repo.get_by_user(U1, 0, 0) == []
    inner.get_by_user.assert_not_awaited()


async def test_cache_read_error_is_strict_by_default(repo, inner, backend) -> None:
    backend.fail["get"] = ConnectionError("down")

    with pytest.raises(CacheReadError):
        await repo.get(A1)

    inner.get.assert_not_awaited()


async def test_bypass_policy_falls_through_to_record_store(inner, cache, backend) -> None:
    repo = CachedAssignmentRepository(inner, cache, read_policy=CacheReadPolicy.BYPASS)
    backend.fail["get"] = ConnectionError("down")
    inner.get.return_value = _assignment()

    assert await repo.get(A1) == _assignment()
    assert backend.ops("set") == []


async def test_bypass_policy_ignores_failed_populate(inner, cache, backend) -> None:
    repo = CachedAssignmentRepository(inner, cache, read_policy=CacheReadPolicy.BYPASS)
    backend.fail["set"] = ConnectionError("down")
    inner.get.return_value = _assignment()

    assert await repo.get(A1) == _assignment()


def test_missing_dependencies_are_rejected(cache) -> None:
    with pytest.raises(InvalidRepositoryError):
        CachedAssignmentRepository(None, cache)
    with pytest.raises(InvalidRepositoryError):
        CachedAssignmentRepository(AsyncMock(), None)


async def test_create_rejects_resource_id_with_glob_characters(repo, inner, backend) -> None:
    """Such an ID could not be matched by its own list pattern, so it never reaches the cache."""
    backend.store["Assignment:GetByResource:i1:0:10"] = b"[]"
    assignment = Assignment(
        id=A1, kind=AssignmentKind.ASSIGNEE, user=U1, resource=ID("i[1]", ResourceType.ISSUE)
    )

    with pytest.raises(ValueError):
        await repo.create(assignment)

    assert backend.log == []
    inner.create.assert_not_awaited()


async def test_cancelled_invalidation_skips_record_store(repo, inner, backend) -> None:
    """Cancellation during a before-phase flush propagates and the insert never runs."""
    started = asyncio.Event()

    async def hanging_keys(pattern):
        started.set()
        await asyncio.Event().wait()

    backend.keys = hanging_keys
    task = asyncio.create_task(repo.create(_assignment()))
    await started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

    inner.create.assert_not_awaited()
