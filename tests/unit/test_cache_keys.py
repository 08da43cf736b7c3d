"""Tests for compose_cache_key (format, determinism, rejected parts)."""

import pytest

from collabstore.domain.enums import ResourceType
from collabstore.domain.value_objects.core import ID
from collabstore.infrastructure.cache.keys import WILDCARD, compose_cache_key


def test_identity_key_uses_type_label_and_id_value() -> None:
    key = compose_cache_key(ResourceType.ASSIGNMENT, ID("a1", ResourceType.ASSIGNMENT))
    assert key == "Assignment:a1"


def test_list_key_includes_operation_and_pagination() -> None:
    user = ID("u1", ResourceType.USER)
    key = compose_cache_key(ResourceType.ASSIGNMENT, "GetByUser", user, 0, 10)
    assert key == "Assignment:GetByUser:u1:0:10"


def test_pattern_key_ends_with_wildcard() -> None:
    resource = ID("i1", ResourceType.ISSUE)
    key = compose_cache_key(ResourceType.ASSIGNMENT, "GetByResource", resource, WILDCARD)
    assert key == "Assignment:GetByResource:i1:*"


def test_negative_integers_are_rendered() -> None:
    assert compose_cache_key(ResourceType.PROJECT, "GetAll", -1) == "Project:GetAll:-1"


def test_none_part_is_rejected() -> None:
    with pytest.raises(TypeError):
        compose_cache_key(ResourceType.ROLE, None, "x")


def test_empty_part_is_rejected() -> None:
    with pytest.raises(ValueError, match="empty"):
        compose_cache_key(ResourceType.ROLE, ID.nil(ResourceType.ROLE))


@pytest.mark.parametrize("value", ["i[1]", "i?", "i*", "i\\1", "a]"])
def test_glob_characters_in_concrete_part_are_rejected(value) -> None:
    """A part with glob characters could never be matched by its own pattern."""
    with pytest.raises(ValueError, match="glob"):
        compose_cache_key(ResourceType.ASSIGNMENT, "GetByResource", ID(value, ResourceType.ISSUE))


def test_wildcard_only_as_last_part() -> None:
    with pytest.raises(ValueError, match="last"):
        compose_cache_key(ResourceType.ISSUE, WILDCARD, "x")


def test_composition_is_deterministic() -> None:
    parts = (ResourceType.COMMENT, "GetAllBelongsTo", ID("d1", ResourceType.DOCUMENT), 5, 20)
    assert compose_cache_key(*parts) == compose_cache_key(*parts)


def test_separator_inside_part_is_rejected() -> None:
    with pytest.raises(ValueError, match="separator"):
        compose_cache_key(ResourceType.PROJECT, "GetByKey", "a:b")


def test_separator_inside_id_value_is_rejected() -> None:
    with pytest.raises(ValueError):
        compose_cache_key(ResourceType.PROJECT, ID("p:1", ResourceType.PROJECT))


def test_unsupported_part_type_is_rejected() -> None:
    with pytest.raises(TypeError):
        compose_cache_key(ResourceType.PROJECT, 1.5)


def test_bool_part_is_rejected() -> None:
    with pytest.raises(TypeError):
        compose_cache_key(ResourceType.PROJECT, True)


def test_empty_key_is_rejected() -> None:
    with pytest.raises(ValueError):
        compose_cache_key()
