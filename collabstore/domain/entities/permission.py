"""Permission domain entity."""

from dataclasses import dataclass
from datetime import datetime

from collabstore.domain.entities.rules import require_id
from collabstore.domain.enums import PermissionKind, ResourceType
from collabstore.domain.exceptions import InvalidPermissionDetailsError
from collabstore.domain.value_objects.core import ID


@dataclass
class Permission:
    """Kind of access a subject (usually a user or role) has on a target resource."""

    id: ID
    kind: PermissionKind
    subject: ID
    target: ID
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raises InvalidPermissionDetailsError if invalid."""
        require_id(
            self.id, "id", InvalidPermissionDetailsError,
            ResourceType.PERMISSION, allow_nil=True,
        )
        if not isinstance(self.kind, PermissionKind):
            raise InvalidPermissionDetailsError("Invalid permission kind", field="kind")
        require_id(self.subject, "subject", InvalidPermissionDetailsError)
        require_id(self.target, "target", InvalidPermissionDetailsError)
        if self.subject == self.target:
            raise InvalidPermissionDetailsError(
                "subject and target must differ", field="target"
            )
