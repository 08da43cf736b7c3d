"""Cache key builder. Single place for key format (DRY).

Keys are parts joined with CACHE_KEY_SEP. A part is a resource type, an
operation name, an identifier (rendered as its value), an integer, a plain
string, or WILDCARD. A key whose last part is WILDCARD is a pattern that
matches every key sharing its prefix plus one or more trailing parts.

Concrete parts are non-empty and free of CACHE_KEY_SEP and of glob
metacharacters, so a pattern built from the same parts as a key always
matches it, both in Redis SCAN MATCH and in fnmatch-style backends.
"""

from collabstore.core.constants import CACHE_KEY_SEP, CACHE_KEY_WILDCARD
from collabstore.domain.enums import ResourceType
from collabstore.domain.value_objects.core import ID

WILDCARD = CACHE_KEY_WILDCARD

# Characters with a meaning in Redis MATCH patterns.
GLOB_CHARS = frozenset("*?[]\\")

KeyPart = ResourceType | ID | int | str


def _render_part(part: KeyPart) -> str:
    """Return the string form of a single key part."""
    if isinstance(part, ResourceType):
        return part.value
    if isinstance(part, ID):
        return str(part)
    # bool is an int subclass but never a meaningful key part.
    if isinstance(part, bool):
        raise TypeError("Cache key part must not be a bool")
    if isinstance(part, int):
        return str(part)
    if isinstance(part, str):
        return part
    raise TypeError(f"Unsupported cache key part type: {type(part).__name__}")


def _validate_key_component(value: str, position: int) -> None:
    """Raise ValueError if value cannot be a concrete key part.

    Args:
        value: Rendered key part.
        position: Index of the part (for error message).

    Raises:
        ValueError: If value is empty, contains CACHE_KEY_SEP or a glob
            metacharacter.
    """
    if not value:
        raise ValueError(f"Cache key part {position} must not be empty")
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key part {position} ({value!r}) must not contain separator {CACHE_KEY_SEP!r}"
        )
    if GLOB_CHARS.intersection(value):
        raise ValueError(
            f"Cache key part {position} ({value!r}) must not contain glob characters"
        )


def compose_cache_key(*parts: KeyPart) -> str:
    """Join parts into a cache key.

    Examples:
        compose_cache_key(ResourceType.ASSIGNMENT, assignment_id) -> "Assignment:a1"
        compose_cache_key(ResourceType.ASSIGNMENT, "GetByUser", user_id, WILDCARD)
            -> "Assignment:GetByUser:u1:*"

    Raises:
        ValueError: If no parts are given, WILDCARD is not the last part, or
            a concrete part is empty or contains the separator or a glob
            metacharacter.
        TypeError: If a part is of an unsupported type (None included).
    """
    if not parts:
        raise ValueError("Cache key needs at least one part")
    last = len(parts) - 1
    rendered = []
    for position, part in enumerate(parts):
        if part == WILDCARD:
            if position != last:
                raise ValueError("WILDCARD is only allowed as the last cache key part")
            rendered.append(WILDCARD)
            continue
        value = _render_part(part)
        _validate_key_component(value, position)
        rendered.append(value)
    return CACHE_KEY_SEP.join(rendered)
