from .chat_message import ChatMessage, ChatCompletionResult, TokenUsage
from .comment import Comment
from .project import Project
from .session import Session
from .task import Task, TaskPriority, TaskStatus
from .user import Role, User

__all__ = [
    "ChatMessage",
    "ChatCompletionResult",
    "TokenUsage",
    "Comment",
    "Project",
    "Session",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "Role",
    "User",
]
