from .project import ProjectCreate
from .task import TaskCreate, TaskUpdate

__all__ = [
    "ProjectCreate",
    "TaskCreate",
    "TaskUpdate",
]
