"""Project domain entity."""

import re
from dataclasses import dataclass, field
from datetime import datetime

from collabstore.domain.entities.rules import require_id, require_text
from collabstore.domain.enums import ProjectStatus, ResourceType
from collabstore.domain.exceptions import InvalidProjectDetailsError
from collabstore.domain.value_objects.core import ID

# Project keys are short uppercase codes (e.g. "ELEMO"); unique across the system.
_PROJECT_KEY_RE = re.compile(r"^[A-Z][A-Z0-9]{2,5}$")


@dataclass
class Project:
    """Domain entity for a project. Validation runs on construction."""

    id: ID
    key: str
    name: str
    description: str = ""
    status: ProjectStatus = ProjectStatus.ACTIVE
    namespace: ID | None = None
    teams: list[ID] = field(default_factory=list)
    documents: list[ID] = field(default_factory=list)
    issues: list[ID] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate project rules. Raises InvalidProjectDetailsError if invalid."""
        require_id(self.id, "id", InvalidProjectDetailsError, ResourceType.PROJECT, allow_nil=True)
        if not _PROJECT_KEY_RE.match(self.key or ""):
            raise InvalidProjectDetailsError(
                "key must be 3-6 uppercase alphanumeric characters starting with a letter",
                field="key",
            )
        require_text(self.name, "name", InvalidProjectDetailsError, max_length=120)
        if not isinstance(self.status, ProjectStatus):
            raise InvalidProjectDetailsError("Invalid project status", field="status")
        if self.namespace is not None:
            require_id(self.namespace, "namespace", InvalidProjectDetailsError, ResourceType.NAMESPACE)
        for team in self.teams:
            require_id(team, "teams", InvalidProjectDetailsError, ResourceType.ROLE)
        for document in self.documents:
            require_id(document, "documents", InvalidProjectDetailsError, ResourceType.DOCUMENT)
        for issue in self.issues:
            require_id(issue, "issues", InvalidProjectDetailsError, ResourceType.ISSUE)

    def is_archived(self) -> bool:
        return self.status == ProjectStatus.ARCHIVED
