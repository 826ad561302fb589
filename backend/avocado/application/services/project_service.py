"""Application service (use case) for Project operations."""

import logging

from avocado.application.interfaces import ProjectRepository, TaskRepository
from avocado.application.schemas import ProjectCreate
from avocado.application.services.access import require_permission
from avocado.application.services.latency import BackendOperation, SimulatedLatency
from avocado.domain.authorization import Permission
from avocado.domain.entities import Project, Session

logger = logging.getLogger(__name__)


class ProjectService:
    """Orchestrates project listing, creation and cascading deletion."""

    def __init__(
        self,
        projects: ProjectRepository,
        tasks: TaskRepository,
        session: Session,
        latency: SimulatedLatency,
    ):
        self._projects = projects
        self._tasks = tasks
        self._session = session
        self._latency = latency

    async def list_projects(self, user_id: str | None = None) -> list[Project]:
        """Return every project.

        ``user_id`` is accepted but not used to filter: all projects are
        visible to every member of the workspace.
        """
        await self._latency.wait(BackendOperation.LIST_PROJECTS)
        return await self._projects.get_all()

    async def create_project(self, data: ProjectCreate) -> Project:
        require_permission(self._session, Permission.PROJECT_CREATE)
        await self._latency.wait(BackendOperation.CREATE_PROJECT)

        project = Project(
            owner_id=data.owner_id,
            name=data.name,
            description=data.description,
            icon=data.icon,
            color=data.color,
        )
        return await self._projects.create(project)

    async def delete_project(self, project_id: str) -> None:
        """Delete a project and every task that belongs to it. Unknown ids are a no-op."""
        require_permission(self._session, Permission.PROJECT_DELETE)
        await self._latency.wait(BackendOperation.DELETE_PROJECT)

        await self._projects.delete(project_id)
        removed = await self._tasks.delete_by_project(project_id)
        logger.info("Deleted project %s (%d tasks cascaded)", project_id, removed)
