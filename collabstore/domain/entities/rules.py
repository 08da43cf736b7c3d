"""Validation rules shared by domain entities."""

from collabstore.domain.enums import ResourceType
from collabstore.domain.exceptions import InvalidIDError, ValidationException
from collabstore.domain.value_objects.core import ID


def require_text(
    value: str,
    field: str,
    error_cls: type[ValidationException],
    max_length: int | None = None,
) -> None:
    """Raise error_cls if value is blank or longer than max_length."""
    if not value or not value.strip():
        raise error_cls(f"{field} is required", field=field)
    if max_length is not None and len(value) > max_length:
        raise error_cls(f"{field} must be at most {max_length} characters", field=field)


def require_id(
    value: ID,
    field: str,
    error_cls: type[ValidationException],
    *allowed: ResourceType,
    allow_nil: bool = False,
) -> None:
    """Raise error_cls if value is not a valid ID of one of the allowed types."""
    if not isinstance(value, ID):
        raise error_cls(f"{field} must be an ID", field=field)
    try:
        value.validate(allow_nil=allow_nil)
    except InvalidIDError as e:
        raise error_cls(e.message, field=field) from e
    if allowed and value.type not in allowed:
        labels = ", ".join(rtype.value for rtype in allowed)
        raise error_cls(f"{field} must be one of: {labels}", field=field)
