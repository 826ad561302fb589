"""Pydantic DTOs (Data Transfer Objects) for the Task feature."""

from typing import Any

from pydantic import BaseModel, Field

from avocado.domain.entities import TaskPriority, TaskStatus

_NON_NULLABLE = frozenset({"title", "status", "priority"})


class TaskCreate(BaseModel):
    """Schema for creating a task, also used for AI-drafted tasks."""

    project_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=300, examples=["Draft plan"])
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    assignee_id: str | None = None


class TaskUpdate(BaseModel):
    """Schema for a partial task update: only fields explicitly set are merged."""

    title: str | None = Field(None, min_length=1, max_length=300)
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    assignee_id: str | None = None

    def changes(self) -> dict[str, Any]:
        """Return the explicitly-set fields.

        ``None`` clears ``description`` and ``assignee_id``; for the
        required fields it means "leave unchanged".
        """
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if not (name in _NON_NULLABLE and getattr(self, name) is None)
        }
