"""Role domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from collabstore.domain.entities.rules import require_id, require_text
from collabstore.domain.enums import ResourceType
from collabstore.domain.exceptions import InvalidRoleDetailsError
from collabstore.domain.value_objects.core import ID

# Roles are scoped to an organization or a project.
ROLE_OWNER_TYPES = (ResourceType.ORGANIZATION, ResourceType.PROJECT)


@dataclass
class Role:
    """Named group of users sharing a set of permissions."""

    id: ID
    name: str
    description: str = ""
    belongs_to: ID | None = None
    members: list[ID] = field(default_factory=list)
    permissions: list[ID] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raises InvalidRoleDetailsError if invalid."""
        require_id(self.id, "id", InvalidRoleDetailsError, ResourceType.ROLE, allow_nil=True)
        require_text(self.name, "name", InvalidRoleDetailsError, max_length=120)
        if self.belongs_to is not None:
            require_id(self.belongs_to, "belongs_to", InvalidRoleDetailsError, *ROLE_OWNER_TYPES)
        for member in self.members:
            require_id(member, "members", InvalidRoleDetailsError, ResourceType.USER)
        for permission in self.permissions:
            require_id(permission, "permissions", InvalidRoleDetailsError, ResourceType.PERMISSION)
