from collabstore.infrastructure.persistence.repositories.notification_repo import (
    NotificationRepository,
)

__all__ = ["NotificationRepository"]
