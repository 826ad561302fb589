"""Abstract repository interface (port) for Project persistence."""

from abc import ABC, abstractmethod

from avocado.domain.entities import Project


class ProjectRepository(ABC):
    """Port for project persistence, implemented in the infrastructure layer."""

    @abstractmethod
    async def get_all(self) -> list[Project]:
        """Return every project in storage order."""
        ...

    @abstractmethod
    async def get_by_id(self, project_id: str) -> Project | None:
        """Retrieve a single project by id."""
        ...

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """Append a new project and return it."""
        ...

    @abstractmethod
    async def delete(self, project_id: str) -> bool:
        """Delete a project. Returns True if deleted, False if not found."""
        ...
