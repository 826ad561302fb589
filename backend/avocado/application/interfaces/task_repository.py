"""Abstract repository interface (port) for Task persistence."""

from abc import ABC, abstractmethod
from typing import Any

from avocado.domain.entities import Task


class TaskRepository(ABC):
    """Port for task persistence, implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_project(self, project_id: str) -> list[Task]:
        """Return the tasks of one project in storage order."""
        ...

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Append a new task and return it."""
        ...

    @abstractmethod
    async def update_fields(self, task_id: str, changes: dict[str, Any]) -> Task:
        """Merge ``changes`` into the stored task in one locked read-modify-write.

        Raises:
            EntityNotFoundError: If no task has that id; nothing is written.
        """
        ...

    @abstractmethod
    async def delete_many(self, task_ids: list[str]) -> int:
        """Delete every task whose id is listed, in one write. Returns the count removed."""
        ...

    @abstractmethod
    async def delete_by_project(self, project_id: str) -> int:
        """Delete every task of a project. Returns the count removed."""
        ...
