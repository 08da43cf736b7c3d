"""Cache-aside repository wrappers, one per entity."""

from collabstore.infrastructure.cache.repositories.base import CachedRepository
from collabstore.infrastructure.cache.repositories.cached_assignment import (
    CachedAssignmentRepository,
)
from collabstore.infrastructure.cache.repositories.cached_comment import (
    CachedCommentRepository,
)
from collabstore.infrastructure.cache.repositories.cached_namespace import (
    CachedNamespaceRepository,
)
from collabstore.infrastructure.cache.repositories.cached_notification import (
    CachedNotificationRepository,
)
from collabstore.infrastructure.cache.repositories.cached_permission import (
    CachedPermissionRepository,
)
from collabstore.infrastructure.cache.repositories.cached_project import (
    CachedProjectRepository,
)
from collabstore.infrastructure.cache.repositories.cached_role import CachedRoleRepository

__all__ = [
    "CachedAssignmentRepository",
    "CachedCommentRepository",
    "CachedNamespaceRepository",
    "CachedNotificationRepository",
    "CachedPermissionRepository",
    "CachedProjectRepository",
    "CachedRepository",
    "CachedRoleRepository",
]
