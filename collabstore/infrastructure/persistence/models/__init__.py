from collabstore.infrastructure.persistence.models.notification import NotificationRecord

__all__ = ["NotificationRecord"]
