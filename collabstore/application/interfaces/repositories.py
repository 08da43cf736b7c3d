"""Repository interfaces (ports) for the application layer.

Protocols define contracts that record-store implementations and their
cache-aside wrappers both fulfill (DIP), so service code can use either.
Identity reads raise NotFoundError instead of returning None.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from collabstore.domain.enums import PermissionKind, SystemRole

if TYPE_CHECKING:
    from collabstore.domain.entities import (
        Assignment,
        Comment,
        Namespace,
        Notification,
        Permission,
        Project,
        Role,
    )
    from collabstore.domain.value_objects.core import ID


# Assignment repository interface
class IAssignmentRepository(Protocol):
    """Protocol for assignment repository (DIP)."""

    async def create(self, assignment: Assignment) -> None:
        """Persist the assignment; sets its ID."""

    async def get(self, id: ID) -> Assignment:
        """Return assignment by ID."""

    async def get_by_user(self, user_id: ID, offset: int, limit: int) -> list[Assignment]:
        """Return assignments of a user (paginated)."""

    async def get_by_resource(
        self, resource_id: ID, offset: int, limit: int
    ) -> list[Assignment]:
        """Return assignments on an issue or document (paginated)."""

    async def delete(self, id: ID) -> None:
        """Delete assignment by ID."""


# Comment repository interface
class ICommentRepository(Protocol):
    """Protocol for comment repository (DIP)."""

    async def create(self, belongs_to: ID, comment: Comment) -> None:
        """Persist the comment under an issue or document; sets its ID."""

    async def get(self, id: ID) -> Comment:
        """Return comment by ID."""

    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Comment]:
        """Return comments of a resource (paginated)."""

    async def update(self, id: ID, content: str) -> Comment:
        """Replace comment content; return the updated comment."""

    async def delete(self, id: ID) -> None:
        """Delete comment by ID."""


# Namespace repository interface
class INamespaceRepository(Protocol):
    """Protocol for namespace repository (DIP)."""

    async def create(self, org_id: ID, namespace: Namespace) -> None:
        """Persist the namespace inside an organization; sets its ID."""

    async def get(self, id: ID) -> Namespace:
        """Return namespace by ID."""

    async def get_all(self, org_id: ID, offset: int, limit: int) -> list[Namespace]:
        """Return namespaces of an organization (paginated)."""

    async def update(self, id: ID, patch: dict[str, Any]) -> Namespace:
        """Apply patch; return the updated namespace."""

    async def delete(self, id: ID) -> None:
        """Delete namespace by ID."""


# Notification repository interface
class INotificationRepository(Protocol):
    """Protocol for notification repository (DIP)."""

    async def create(self, notification: Notification) -> None:
        """Persist the notification; sets ID, read flag and timestamps."""

    async def get(self, id: ID, recipient: ID) -> Notification:
        """Return notification by ID for the recipient."""

    async def get_all_by_recipient(
        self, recipient: ID, offset: int, limit: int
    ) -> list[Notification]:
        """Return notifications of a recipient (paginated)."""

    async def update(self, id: ID, recipient: ID, read: bool) -> Notification:
        """Set the read flag; return the updated notification."""

    async def delete(self, id: ID, recipient: ID) -> None:
        """Delete notification by ID for the recipient."""


# Permission repository interface
class IPermissionRepository(Protocol):
    """Protocol for permission repository (DIP)."""

    async def create(self, permission: Permission) -> None:
        """Persist the permission; sets its ID."""

    async def get(self, id: ID) -> Permission:
        """Return permission by ID."""

    async def get_by_subject(self, id: ID) -> list[Permission]:
        """Return permissions held by a subject."""

    async def get_by_target(self, id: ID) -> list[Permission]:
        """Return permissions granted on a target."""

    async def get_by_subject_and_target(self, subject: ID, target: ID) -> list[Permission]:
        """Return permissions a subject holds on a target."""

    async def update(self, id: ID, kind: PermissionKind) -> Permission:
        """Change the permission kind; return the updated permission."""

    async def delete(self, id: ID) -> None:
        """Delete permission by ID."""

    async def has_permission(self, subject: ID, target: ID, *kinds: PermissionKind) -> bool:
        """Return True if subject holds any of kinds on target."""

    async def has_any_relation(self, subject: ID, target: ID) -> bool:
        """Return True if subject is related to target in any way."""

    async def has_system_role(self, subject: ID, *roles: SystemRole) -> bool:
        """Return True if subject holds any of the system roles."""


# Project repository interface
class IProjectRepository(Protocol):
    """Protocol for project repository (DIP)."""

    async def create(self, namespace_id: ID, project: Project) -> None:
        """Persist the project inside a namespace; sets its ID."""

    async def get(self, id: ID) -> Project:
        """Return project by ID."""

    async def get_by_key(self, key: str) -> Project:
        """Return project by its unique key."""

    async def get_all(self, namespace_id: ID, offset: int, limit: int) -> list[Project]:
        """Return projects of a namespace (paginated)."""

    async def update(self, id: ID, patch: dict[str, Any]) -> Project:
        """Apply patch; return the updated project."""

    async def delete(self, id: ID) -> None:
        """Delete project by ID."""


# Role repository interface
class IRoleRepository(Protocol):
    """Protocol for role repository (DIP)."""

    async def create(self, created_by: ID, belongs_to: ID, role: Role) -> None:
        """Persist the role under an organization or project; sets its ID."""

    async def get(self, id: ID, belongs_to: ID) -> Role:
        """Return role by ID within its owner."""

    async def get_all_belongs_to(self, belongs_to: ID, offset: int, limit: int) -> list[Role]:
        """Return roles of an organization or project (paginated)."""

    async def update(self, id: ID, belongs_to: ID, patch: dict[str, Any]) -> Role:
        """Apply patch; return the updated role."""

    async def add_member(self, role_id: ID, member_id: ID, belongs_to: ID) -> None:
        """Add a user to the role."""

    async def remove_member(self, role_id: ID, member_id: ID, belongs_to: ID) -> None:
        """Remove a user from the role."""

    async def delete(self, id: ID, belongs_to: ID) -> None:
        """Delete role by ID within its owner."""


# Static file repository interface
class IStaticFileRepository(Protocol):
    """Protocol for static file store (DIP)."""

    async def create(self, path: str, data: bytes) -> None:
        """Store data at path."""

    async def get(self, path: str) -> bytes:
        """Return the data stored at path."""

    async def update(self, path: str, data: bytes) -> None:
        """Replace (or create) the data at path."""

    async def delete(self, path: str) -> None:
        """Remove the file at path."""
