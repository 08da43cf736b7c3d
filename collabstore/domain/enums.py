"""Domain enumerations for the collaboration service.

Enums represent fixed sets of domain values (resource types, kinds, statuses).
"""

from enum import Enum


class ResourceType(str, Enum):
    """Resource-type tag carried by every identifier.

    The value is the label used in cache keys (e.g. "Issue").
    """

    RESOURCE_TYPE = "ResourceType"
    ASSIGNMENT = "Assignment"
    ATTACHMENT = "Attachment"
    COMMENT = "Comment"
    DOCUMENT = "Document"
    ISSUE = "Issue"
    ISSUE_RELATION = "IssueRelation"
    LABEL = "Label"
    NAMESPACE = "Namespace"
    NOTIFICATION = "Notification"
    ORGANIZATION = "Organization"
    PERMISSION = "Permission"
    PROJECT = "Project"
    ROLE = "Role"
    TODO = "Todo"
    USER = "User"
    USER_TOKEN = "UserToken"

    @classmethod
    def values(cls) -> list[str]:
        """Return all resource-type labels."""
        return [rtype.value for rtype in cls]


class AssignmentKind(str, Enum):
    """How a user is attached to an issue or document."""

    ASSIGNEE = "assignee"
    REVIEWER = "reviewer"


class PermissionKind(str, Enum):
    """Access granted by a permission. ALL implies every other kind."""

    ALL = "*"
    CREATE = "create"
    READ = "read"
    WRITE = "write"
    DELETE = "delete"


class ProjectStatus(str, Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"


class SystemRole(str, Enum):
    """Built-in roles that exist outside any organization or project."""

    OWNER = "Owner"
    ADMIN = "Admin"
    SUPPORT = "Support"
