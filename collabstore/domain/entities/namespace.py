"""Namespace domain entity.

A namespace is a logical grouping of projects and documents inside an
organization. The project and document entries are lightweight summaries;
the full records live in their own repositories.
"""

from dataclasses import dataclass, field
from datetime import datetime

from collabstore.domain.entities.rules import require_id, require_text
from collabstore.domain.enums import ResourceType
from collabstore.domain.exceptions import InvalidNamespaceDetailsError
from collabstore.domain.value_objects.core import ID


@dataclass
class NamespaceProject:
    """Summary of a project listed under a namespace."""

    id: ID
    key: str
    name: str
    description: str = ""

    def __post_init__(self) -> None:
        require_id(self.id, "id", InvalidNamespaceDetailsError, ResourceType.PROJECT)
        require_text(self.key, "key", InvalidNamespaceDetailsError)
        require_text(self.name, "name", InvalidNamespaceDetailsError)


@dataclass
class NamespaceDocument:
    """Summary of a document listed under a namespace."""

    id: ID
    name: str
    created_by: ID
    excerpt: str = ""
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        require_id(self.id, "id", InvalidNamespaceDetailsError, ResourceType.DOCUMENT)
        require_text(self.name, "name", InvalidNamespaceDetailsError)
        require_id(self.created_by, "created_by", InvalidNamespaceDetailsError, ResourceType.USER)


@dataclass
class Namespace:
    """Domain entity for a namespace. Validation runs on construction."""

    id: ID
    name: str
    description: str = ""
    organization: ID | None = None
    projects: list[NamespaceProject] = field(default_factory=list)
    documents: list[NamespaceDocument] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate namespace rules. Raises InvalidNamespaceDetailsError if invalid."""
        require_id(self.id, "id", InvalidNamespaceDetailsError, ResourceType.NAMESPACE, allow_nil=True)
        require_text(self.name, "name", InvalidNamespaceDetailsError, max_length=120)
        if len(self.description) > 500:
            raise InvalidNamespaceDetailsError(
                "description must be at most 500 characters", field="description"
            )
        if self.organization is not None:
            require_id(
                self.organization, "organization", InvalidNamespaceDetailsError,
                ResourceType.ORGANIZATION,
            )
