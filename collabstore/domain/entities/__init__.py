"""Domain entities (business concepts independent of persistence)."""

from collabstore.domain.entities.assignment import Assignment
from collabstore.domain.entities.comment import Comment
from collabstore.domain.entities.namespace import (
    Namespace,
    NamespaceDocument,
    NamespaceProject,
)
from collabstore.domain.entities.notification import Notification
from collabstore.domain.entities.permission import Permission
from collabstore.domain.entities.project import Project
from collabstore.domain.entities.role import Role

__all__ = [
    "Assignment",
    "Comment",
    "Namespace",
    "NamespaceDocument",
    "NamespaceProject",
    "Notification",
    "Permission",
    "Project",
    "Role",
]
