"""Assignment domain entity."""

from dataclasses import dataclass
from datetime import datetime

from collabstore.domain.entities.rules import require_id
from collabstore.domain.enums import AssignmentKind, ResourceType
from collabstore.domain.exceptions import InvalidAssignmentDetailsError
from collabstore.domain.value_objects.core import ID

# Resources a user can be assigned to.
ASSIGNABLE_RESOURCE_TYPES = (ResourceType.ISSUE, ResourceType.DOCUMENT)


@dataclass
class Assignment:
    """A user assigned to an issue or document as assignee or reviewer."""

    id: ID
    kind: AssignmentKind
    user: ID
    resource: ID
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raises InvalidAssignmentDetailsError if invalid."""
        require_id(
            self.id, "id", InvalidAssignmentDetailsError,
            ResourceType.ASSIGNMENT, allow_nil=True,
        )
        if not isinstance(self.kind, AssignmentKind):
            raise InvalidAssignmentDetailsError("Invalid assignment kind", field="kind")
        require_id(self.user, "user", InvalidAssignmentDetailsError, ResourceType.USER)
        require_id(
            self.resource, "resource", InvalidAssignmentDetailsError,
            *ASSIGNABLE_RESOURCE_TYPES,
        )

    @classmethod
    def new(cls, user: ID, resource: ID, kind: AssignmentKind) -> "Assignment":
        return cls(id=ID.nil(ResourceType.ASSIGNMENT), kind=kind, user=user, resource=resource)
