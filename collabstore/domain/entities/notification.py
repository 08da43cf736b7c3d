"""Notification domain entity."""

from dataclasses import dataclass
from datetime import datetime

from collabstore.domain.entities.rules import require_id, require_text
from collabstore.domain.enums import ResourceType
from collabstore.domain.exceptions import InvalidNotificationDetailsError
from collabstore.domain.value_objects.core import ID


@dataclass
class Notification:
    """In-app notification addressed to a single user."""

    id: ID
    title: str
    recipient: ID
    description: str = ""
    read: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raises InvalidNotificationDetailsError if invalid."""
        require_id(
            self.id, "id", InvalidNotificationDetailsError,
            ResourceType.NOTIFICATION, allow_nil=True,
        )
        require_text(self.title, "title", InvalidNotificationDetailsError, max_length=120)
        require_id(self.recipient, "recipient", InvalidNotificationDetailsError, ResourceType.USER)
