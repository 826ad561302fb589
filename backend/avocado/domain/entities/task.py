"""Domain entity for tasks shown on the board and list views."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from avocado.domain.identifiers import new_id


class TaskStatus(str, Enum):
    """Board columns, in display order."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    REVIEW = "REVIEW"
    DONE = "DONE"


class TaskPriority(str, Enum):
    """Task urgency levels."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


# Fields a partial update may touch; identity and creation time are fixed.
UPDATABLE_FIELDS = frozenset({"title", "description", "status", "priority", "assignee_id"})


@dataclass
class Task:
    """A unit of work inside a project."""

    project_id: str
    title: str
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    description: str | None = None
    assignee_id: str | None = None
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def apply(self, changes: dict[str, Any]) -> None:
        """Merge a partial set of field changes into this task."""
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Task fields cannot be updated: {sorted(unknown)}")
        for name, value in changes.items():
            setattr(self, name, value)
