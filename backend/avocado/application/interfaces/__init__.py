from .chat_provider import ChatProvider
from .comment_repository import CommentRepository
from .key_value_store import KeyValueStore
from .project_repository import ProjectRepository
from .session_store import SessionStore
from .task_repository import TaskRepository
from .user_repository import UserRepository

__all__ = [
    "ChatProvider",
    "CommentRepository",
    "KeyValueStore",
    "ProjectRepository",
    "SessionStore",
    "TaskRepository",
    "UserRepository",
]
