"""Notification record repository (PostgreSQL via async SQLAlchemy).

Authoritative store for notifications. No cache awareness; wrap with
CachedNotificationRepository for cache-aside reads.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from opentelemetry import trace
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from collabstore.core.constants import SPAN_PREFIX_RECORD
from collabstore.domain.entities import Notification
from collabstore.domain.enums import ResourceType
from collabstore.domain.exceptions import (
    NoDriverError,
    NotFoundError,
    NotificationCreateError,
    NotificationDeleteError,
    NotificationReadError,
    NotificationUpdateError,
    RepositoryError,
    ValidationException,
)
from collabstore.domain.value_objects.core import ID
from collabstore.infrastructure.persistence.database import RecordDatabase
from collabstore.infrastructure.persistence.models.notification import NotificationRecord
from collabstore.shared.telemetry.tracing import TracedOperation, span_name

module_logger = logging.getLogger(__name__)


def _record_to_notification(record: NotificationRecord) -> Notification:
    """Map ORM NotificationRecord to the domain Notification."""
    return Notification(
        id=ID(record.id, ResourceType.NOTIFICATION),
        title=record.title,
        description=record.description or "",
        recipient=ID(record.recipient, ResourceType.USER),
        read=record.read,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _validate_ids(
    id: ID, recipient: ID, error_cls: type[RepositoryError]
) -> None:
    """Raise error_cls unless id is a Notification ID and recipient a User ID."""
    try:
        id.validate(ResourceType.NOTIFICATION)
        recipient.validate(ResourceType.USER)
    except ValidationException as e:
        raise error_cls(e.message) from e


class NotificationRepository:
    """Create, read, mark-read and delete notifications of a recipient."""

    component = "NotificationRepository"

    def __init__(
        self,
        db: RecordDatabase | None,
        *,
        logger: logging.Logger | None = None,
        tracer: trace.Tracer | None = None,
    ) -> None:
        """Initialize with the shared record-store handle.

        Raises:
            NoDriverError: If db is None.
        """
        if db is None:
            raise NoDriverError()
        self.db = db
        self.logger = logger or module_logger
        self.tracer = tracer or trace.get_tracer(__name__)

    def _span(self, operation: str) -> TracedOperation:
        return TracedOperation(
            span_name(SPAN_PREFIX_RECORD, self.component, operation), tracer=self.tracer
        )

    async def create(self, notification: Notification) -> None:
        """Insert a new notification.

        Assigns a fresh ID, marks it unread, stamps created_at (UTC) and
        clears updated_at on the passed entity.

        Raises:
            NotificationCreateError: If validation or the insert fails.
        """
        with self._span("Create"):
            try:
                notification.validate()
            except ValidationException as e:
                raise NotificationCreateError(e.message) from e

            notification.id = ID.new(ResourceType.NOTIFICATION)
            notification.read = False
            notification.created_at = datetime.now(UTC)
            notification.updated_at = None

            stmt = insert(NotificationRecord).values(
                id=str(notification.id),
                title=notification.title,
                description=notification.description,
                recipient=str(notification.recipient),
                read=notification.read,
                created_at=notification.created_at,
            )
            try:
                async with self.db.transaction() as session:
                    await session.execute(stmt)
            except SQLAlchemyError as e:
                self.logger.error("Notification insert failed: %s", e)
                raise NotificationCreateError(str(e)) from e

    async def get(self, id: ID, recipient: ID) -> Notification:
        """Return the notification with id addressed to recipient.

        Raises:
            NotFoundError: If no such notification exists.
            NotificationReadError: On invalid IDs or query failure.
        """
        with self._span("Get"):
            _validate_ids(id, recipient, NotificationReadError)
            stmt = select(NotificationRecord).where(
                NotificationRecord.id == str(id),
                NotificationRecord.recipient == str(recipient),
            )
            try:
                async with self.db.session() as session:
                    result = await session.execute(stmt)
                    record = result.scalar_one_or_none()
            except SQLAlchemyError as e:
                raise NotificationReadError(str(e)) from e
            if record is None:
                raise NotFoundError(details={"id": str(id)})
            return _record_to_notification(record)

    async def get_all_by_recipient(
        self, recipient: ID, offset: int, limit: int
    ) -> list[Notification]:
        """Return a page of the recipient's notifications, newest first.

        Raises:
            NotificationReadError: On invalid recipient or query failure.
        """
        with self._span("GetAllByRecipient"):
            try:
                recipient.validate(ResourceType.USER)
            except ValidationException as e:
                raise NotificationReadError(e.message) from e
            stmt = (
                select(NotificationRecord)
                .where(NotificationRecord.recipient == str(recipient))
                .order_by(NotificationRecord.created_at.desc(), NotificationRecord.id)
                .offset(offset)
                .limit(limit)
            )
            try:
                async with self.db.session() as session:
                    result = await session.execute(stmt)
                    try:
                        records = result.scalars().all()
                    finally:
                        result.close()
            except SQLAlchemyError as e:
                raise NotificationReadError(str(e)) from e
            return [_record_to_notification(record) for record in records]

    async def update(self, id: ID, recipient: ID, read: bool) -> Notification:
        """Set the read flag and refresh updated_at (server UTC clock).

        Raises:
            NotFoundError: If no row matched.
            NotificationUpdateError: On invalid IDs or query failure.
        """
        with self._span("Update"):
            _validate_ids(id, recipient, NotificationUpdateError)
            stmt = (
                update(NotificationRecord)
                .where(
                    NotificationRecord.id == str(id),
                    NotificationRecord.recipient == str(recipient),
                )
                .values(read=read, updated_at=func.timezone("utc", func.now()))
                .returning(NotificationRecord)
                .execution_options(synchronize_session=False)
            )
            try:
                async with self.db.transaction() as session:
                    result = await session.execute(stmt)
                    record = result.scalar_one_or_none()
            except SQLAlchemyError as e:
                self.logger.error("Notification update failed for %s: %s", id, e)
                raise NotificationUpdateError(str(e)) from e
            if record is None:
                raise NotFoundError(details={"id": str(id)})
            return _record_to_notification(record)

    async def delete(self, id: ID, recipient: ID) -> None:
        """Delete exactly one notification.

        Raises:
            NotFoundError: If no row matched.
            NotificationDeleteError: On invalid IDs or query failure.
        """
        with self._span("Delete"):
            _validate_ids(id, recipient, NotificationDeleteError)
            stmt = delete(NotificationRecord).where(
                NotificationRecord.id == str(id),
                NotificationRecord.recipient == str(recipient),
            )
            try:
                async with self.db.transaction() as session:
                    result = await session.execute(stmt)
                    deleted = result.rowcount
            except SQLAlchemyError as e:
                self.logger.error("Notification delete failed for %s: %s", id, e)
                raise NotificationDeleteError(str(e)) from e
            if deleted == 0:
                raise NotFoundError(details={"id": str(id)})
