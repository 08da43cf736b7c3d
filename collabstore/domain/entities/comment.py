"""Comment domain entity."""

from dataclasses import dataclass
from datetime import datetime

from collabstore.domain.entities.rules import require_id, require_text
from collabstore.domain.enums import ResourceType
from collabstore.domain.exceptions import InvalidCommentDetailsError
from collabstore.domain.value_objects.core import ID

# Resources that can own comments.
COMMENTABLE_RESOURCE_TYPES = (ResourceType.ISSUE, ResourceType.DOCUMENT)


@dataclass
class Comment:
    """Free-text comment written by a user on an issue or document."""

    id: ID
    content: str
    created_by: ID
    belongs_to: ID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raises InvalidCommentDetailsError if invalid."""
        require_id(self.id, "id", InvalidCommentDetailsError, ResourceType.COMMENT, allow_nil=True)
        require_text(self.content, "content", InvalidCommentDetailsError)
        require_id(self.created_by, "created_by", InvalidCommentDetailsError, ResourceType.USER)
        if self.belongs_to is not None:
            require_id(
                self.belongs_to, "belongs_to", InvalidCommentDetailsError,
                *COMMENTABLE_RESOURCE_TYPES,
            )
