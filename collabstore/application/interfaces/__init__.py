from collabstore.application.interfaces.repositories import (
    IAssignmentRepository,
    ICommentRepository,
    INamespaceRepository,
    INotificationRepository,
    IPermissionRepository,
    IProjectRepository,
    IRoleRepository,
    IStaticFileRepository,
)

__all__ = [
    "IAssignmentRepository",
    "ICommentRepository",
    "INamespaceRepository",
    "INotificationRepository",
    "IPermissionRepository",
    "IProjectRepository",
    "IRoleRepository",
    "IStaticFileRepository",
]
