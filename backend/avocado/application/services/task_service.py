"""Application service (use case) for Task operations."""

import asyncio
import logging

from avocado.application.interfaces import ProjectRepository, TaskRepository
from avocado.application.schemas import TaskCreate, TaskUpdate
from avocado.application.services.access import require_permission
from avocado.application.services.latency import BackendOperation, SimulatedLatency
from avocado.domain.authorization import Permission
from avocado.domain.entities import Session, Task
from avocado.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class TaskService:
    """Orchestrates task CRUD logic. Depends on the repository ports (DI)."""

    def __init__(
        self,
        tasks: TaskRepository,
        projects: ProjectRepository,
        session: Session,
        latency: SimulatedLatency,
    ):
        self._tasks = tasks
        self._projects = projects
        self._session = session
        self._latency = latency

    async def list_tasks(self, project_id: str) -> list[Task]:
        await self._latency.wait(BackendOperation.LIST_TASKS)
        return await self._tasks.get_by_project(project_id)

    async def create_task(self, data: TaskCreate) -> Task:
        require_permission(self._session, Permission.TASK_CREATE)
        await self._latency.wait(BackendOperation.CREATE_TASK)

        if await self._projects.get_by_id(data.project_id) is None:
            raise EntityNotFoundError("Project", data.project_id)

        task = Task(
            project_id=data.project_id,
            title=data.title,
            description=data.description,
            status=data.status,
            priority=data.priority,
            assignee_id=data.assignee_id,
        )
        return await self._tasks.create(task)

    async def create_tasks(self, drafts: list[TaskCreate]) -> list[Task]:
        """Create several tasks concurrently, e.g. a batch of AI drafts.

        Results are returned in the order of ``drafts``.
        """
        created = await asyncio.gather(*(self.create_task(d) for d in drafts))
        logger.info("Created %d tasks in one batch", len(created))
        return list(created)

    async def update_task(self, task_id: str, data: TaskUpdate) -> Task:
        require_permission(self._session, Permission.TASK_UPDATE)
        await self._latency.wait(BackendOperation.UPDATE_TASK)

        return await self._tasks.update_fields(task_id, data.changes())

    async def delete_tasks(self, task_ids: list[str]) -> None:
        require_permission(self._session, Permission.TASK_DELETE)
        await self._latency.wait(BackendOperation.DELETE_TASKS)

        removed = await self._tasks.delete_many(task_ids)
        logger.info("Deleted %d of %d requested tasks", removed, len(task_ids))
