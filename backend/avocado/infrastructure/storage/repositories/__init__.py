from .comment_repository import StorageCommentRepository
from .project_repository import StorageProjectRepository
from .session_store import StorageSessionStore
from .task_repository import StorageTaskRepository
from .user_repository import StorageUserRepository

__all__ = [
    "StorageCommentRepository",
    "StorageProjectRepository",
    "StorageSessionStore",
    "StorageTaskRepository",
    "StorageUserRepository",
]
