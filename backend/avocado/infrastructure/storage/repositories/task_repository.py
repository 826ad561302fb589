"""Concrete repository implementation for Task backed by collection storage."""

from typing import Any

from avocado.application.interfaces import TaskRepository
from avocado.domain.entities import Task, TaskPriority, TaskStatus
from avocado.domain.exceptions import EntityNotFoundError
from avocado.infrastructure.storage.collection_storage import Collection, CollectionStorage
from avocado.infrastructure.storage.records import (
    decode_record,
    decode_records,
    from_millis,
    to_millis,
    without_none,
)


class StorageTaskRepository(TaskRepository):
    """Implements the TaskRepository port over the ``tasks`` collection."""

    def __init__(self, storage: CollectionStorage):
        self._storage = storage
        self._key = storage.key_for(Collection.TASKS)

    @staticmethod
    def _to_entity(record: dict[str, Any]) -> Task:
        return Task(
            id=record["id"],
            project_id=record["projectId"],
            title=record["title"],
            description=record.get("description"),
            status=TaskStatus(record["status"]),
            priority=TaskPriority(record["priority"]),
            assignee_id=record.get("assigneeId"),
            created_at=from_millis(record["createdAt"]),
        )

    @staticmethod
    def _to_record(task: Task) -> dict[str, Any]:
        return without_none({
            "id": task.id,
            "projectId": task.project_id,
            "title": task.title,
            "description": task.description,
            "status": task.status.value,
            "priority": task.priority.value,
            "assigneeId": task.assignee_id,
            "createdAt": to_millis(task.created_at),
        })

    async def get_by_project(self, project_id: str) -> list[Task]:
        records = await self._storage.read(Collection.TASKS)
        tasks = decode_records(self._key, records, self._to_entity)
        return [t for t in tasks if t.project_id == project_id]

    async def create(self, task: Task) -> Task:
        record = self._to_record(task)
        await self._storage.mutate(Collection.TASKS, lambda records: records.append(record))
        return decode_record(self._key, record, self._to_entity)

    async def update_fields(self, task_id: str, changes: dict[str, Any]) -> Task:
        def merge(records: list[dict[str, Any]]) -> dict[str, Any]:
            for index, existing in enumerate(records):
                if existing.get("id") == task_id:
                    task = decode_record(self._key, existing, self._to_entity)
                    task.apply(changes)
                    records[index] = self._to_record(task)
                    return records[index]
            raise EntityNotFoundError("Task", task_id)

        record = await self._storage.mutate(Collection.TASKS, merge)
        return decode_record(self._key, record, self._to_entity)

    async def delete_many(self, task_ids: list[str]) -> int:
        doomed = set(task_ids)
        return await self._remove_where(lambda r: r.get("id") in doomed)

    async def delete_by_project(self, project_id: str) -> int:
        return await self._remove_where(lambda r: r.get("projectId") == project_id)

    async def _remove_where(self, predicate) -> int:
        def remove(records: list[dict[str, Any]]) -> int:
            kept = [r for r in records if not predicate(r)]
            removed = len(records) - len(kept)
            records[:] = kept
            return removed

        return await self._storage.mutate(Collection.TASKS, remove)
