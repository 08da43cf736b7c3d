"""Domain exceptions for the collaboration data-access layer.

Every failure a repository reports is one of the classes below. Callers
classify failures with isinstance/except; the underlying cause is chained
with ``raise ... from`` so logs and spans carry the specific reason.
"""

from typing import Any


class CollabStoreException(Exception):
    """Base exception for all collabstore errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. key, path, field).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class ValidationException(CollabStoreException):
    """Raised when an entity or identifier fails validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class InvalidIDError(ValidationException):
    """Identifier is nil or carries an unexpected resource type."""


class InvalidAssignmentDetailsError(ValidationException):
    pass


class InvalidCommentDetailsError(ValidationException):
    pass


class InvalidNamespaceDetailsError(ValidationException):
    pass


class InvalidNotificationDetailsError(ValidationException):
    pass


class InvalidPermissionDetailsError(ValidationException):
    pass


class InvalidProjectDetailsError(ValidationException):
    pass


class InvalidRoleDetailsError(ValidationException):
    pass


# ---------------------------------------------------------------------------
# Repository errors
# ---------------------------------------------------------------------------


class RepositoryError(CollabStoreException):
    """Base for failures reported by repository operations.

    Subclasses set ``default_message`` and ``default_code``; the reason
    (usually ``str(cause)``) is kept in details.
    """

    default_message = "repository operation failed"
    default_code = "REPOSITORY_ERROR"

    def __init__(
        self,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        merged = dict(details or {})
        if reason:
            merged["reason"] = reason
        super().__init__(self.default_message, self.default_code, merged)


class NotFoundError(RepositoryError):
    """Record store returned no row for an identity query."""

    default_message = "resource not found"
    default_code = "NOT_FOUND"


class UnexpectedCachedResourceError(RepositoryError):
    """Assignment write saw a resource type with no cache invalidation rule."""

    default_message = "unexpected cached resource"
    default_code = "UNEXPECTED_CACHED_RESOURCE"

    def __init__(self, resource_type: str) -> None:
        super().__init__(details={"resource_type": resource_type})


class CacheError(RepositoryError):
    """Base for cache backend failures."""

    default_message = "cache operation failed"
    default_code = "CACHE_ERROR"

    def __init__(self, key: str, reason: str | None = None) -> None:
        super().__init__(reason, {"key": key})


class CacheReadError(CacheError):
    default_message = "failed to read cache"
    default_code = "CACHE_READ_ERROR"


class CacheWriteError(CacheError):
    default_message = "failed to write cache"
    default_code = "CACHE_WRITE_ERROR"


class CacheDeleteError(CacheError):
    default_message = "failed to delete cache"
    default_code = "CACHE_DELETE_ERROR"


class AssignmentCreateError(RepositoryError):
    default_message = "failed to create assignment"
    default_code = "ASSIGNMENT_CREATE_ERROR"


class AssignmentReadError(RepositoryError):
    default_message = "failed to read assignment"
    default_code = "ASSIGNMENT_READ_ERROR"


class AssignmentDeleteError(RepositoryError):
    default_message = "failed to delete assignment"
    default_code = "ASSIGNMENT_DELETE_ERROR"


class CommentCreateError(RepositoryError):
    default_message = "failed to create comment"
    default_code = "COMMENT_CREATE_ERROR"


class CommentReadError(RepositoryError):
    default_message = "failed to read comment"
    default_code = "COMMENT_READ_ERROR"


class CommentUpdateError(RepositoryError):
    default_message = "failed to update comment"
    default_code = "COMMENT_UPDATE_ERROR"


class CommentDeleteError(RepositoryError):
    default_message = "failed to delete comment"
    default_code = "COMMENT_DELETE_ERROR"


class NamespaceCreateError(RepositoryError):
    default_message = "failed to create namespace"
    default_code = "NAMESPACE_CREATE_ERROR"


class NamespaceReadError(RepositoryError):
    default_message = "failed to read namespace"
    default_code = "NAMESPACE_READ_ERROR"


class NamespaceUpdateError(RepositoryError):
    default_message = "failed to update namespace"
    default_code = "NAMESPACE_UPDATE_ERROR"


class NamespaceDeleteError(RepositoryError):
    default_message = "failed to delete namespace"
    default_code = "NAMESPACE_DELETE_ERROR"


class NotificationCreateError(RepositoryError):
    default_message = "failed to create notification"
    default_code = "NOTIFICATION_CREATE_ERROR"


class NotificationReadError(RepositoryError):
    default_message = "failed to read notification"
    default_code = "NOTIFICATION_READ_ERROR"


class NotificationUpdateError(RepositoryError):
    default_message = "failed to update notification"
    default_code = "NOTIFICATION_UPDATE_ERROR"


class NotificationDeleteError(RepositoryError):
    default_message = "failed to delete notification"
    default_code = "NOTIFICATION_DELETE_ERROR"


class PermissionCreateError(RepositoryError):
    default_message = "failed to create permission"
    default_code = "PERMISSION_CREATE_ERROR"


class PermissionReadError(RepositoryError):
    default_message = "failed to read permission"
    default_code = "PERMISSION_READ_ERROR"


class PermissionUpdateError(RepositoryError):
    default_message = "failed to update permission"
    default_code = "PERMISSION_UPDATE_ERROR"


class PermissionDeleteError(RepositoryError):
    default_message = "failed to delete permission"
    default_code = "PERMISSION_DELETE_ERROR"


class ProjectCreateError(RepositoryError):
    default_message = "failed to create project"
    default_code = "PROJECT_CREATE_ERROR"


class ProjectReadError(RepositoryError):
    default_message = "failed to read project"
    default_code = "PROJECT_READ_ERROR"


class ProjectUpdateError(RepositoryError):
    default_message = "failed to update project"
    default_code = "PROJECT_UPDATE_ERROR"


class ProjectDeleteError(RepositoryError):
    default_message = "failed to delete project"
    default_code = "PROJECT_DELETE_ERROR"


class RoleCreateError(RepositoryError):
    default_message = "failed to create role"
    default_code = "ROLE_CREATE_ERROR"


class RoleReadError(RepositoryError):
    default_message = "failed to read role"
    default_code = "ROLE_READ_ERROR"


class RoleUpdateError(RepositoryError):
    default_message = "failed to update role"
    default_code = "ROLE_UPDATE_ERROR"


class RoleDeleteError(RepositoryError):
    default_message = "failed to delete role"
    default_code = "ROLE_DELETE_ERROR"


# ---------------------------------------------------------------------------
# Static files
# ---------------------------------------------------------------------------


class StaticFileError(RepositoryError):
    """Base for object store failures. Details carry the file path."""

    default_message = "static file operation failed"
    default_code = "STATIC_FILE_ERROR"

    def __init__(self, path: str, reason: str | None = None) -> None:
        super().__init__(reason, {"path": path})


class FileCreateError(StaticFileError):
    default_message = "failed to create static file"
    default_code = "FILE_CREATE_ERROR"


class FileReadError(StaticFileError):
    default_message = "failed to get static file"
    default_code = "FILE_GET_ERROR"


class FileUpdateError(StaticFileError):
    default_message = "failed to update static file"
    default_code = "FILE_UPDATE_ERROR"


class FileDeleteError(StaticFileError):
    default_message = "failed to delete static file"
    default_code = "FILE_DELETE_ERROR"


class StaticFileNotFoundError(FileReadError, NotFoundError):
    """Object store has no file at the requested path."""

    default_message = "static file not found"
    default_code = "FILE_NOT_FOUND"


# ---------------------------------------------------------------------------
# Configuration (raised while wiring repositories)
# ---------------------------------------------------------------------------


class ConfigurationError(CollabStoreException):
    """Base for errors raised while constructing repositories."""

    default_message = "invalid configuration"
    default_code = "CONFIGURATION_ERROR"

    def __init__(self, reason: str | None = None) -> None:
        details = {"reason": reason} if reason else {}
        super().__init__(self.default_message, self.default_code, details)


class NoClientError(ConfigurationError):
    default_message = "no cache client provided"
    default_code = "NO_CLIENT"


class NoPoolError(ConfigurationError):
    default_message = "no record store pool provided"
    default_code = "NO_POOL"


class NoDriverError(ConfigurationError):
    default_message = "no database driver provided"
    default_code = "NO_DRIVER"


class NoLoggerError(ConfigurationError):
    default_message = "no logger provided"
    default_code = "NO_LOGGER"


class NoTracerError(ConfigurationError):
    default_message = "no tracer provided"
    default_code = "NO_TRACER"


class NoBucketError(ConfigurationError):
    default_message = "no bucket provided"
    default_code = "NO_BUCKET"


class InvalidConfigError(ConfigurationError):
    default_message = "invalid settings"
    default_code = "INVALID_CONFIG"


class InvalidDatabaseError(ConfigurationError):
    default_message = "invalid database"
    default_code = "INVALID_DATABASE"


class InvalidRepositoryError(ConfigurationError):
    default_message = "invalid repository"
    default_code = "INVALID_REPOSITORY"
