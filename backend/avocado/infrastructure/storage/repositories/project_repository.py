"""Concrete repository implementation for Project backed by collection storage."""

from typing import Any

from avocado.application.interfaces import ProjectRepository
from avocado.domain.entities import Project
from avocado.infrastructure.storage.collection_storage import Collection, CollectionStorage
from avocado.infrastructure.storage.records import (
    decode_record,
    decode_records,
    from_millis,
    to_millis,
)


class StorageProjectRepository(ProjectRepository):
    """Implements the ProjectRepository port over the ``projects`` collection."""

    def __init__(self, storage: CollectionStorage):
        self._storage = storage
        self._key = storage.key_for(Collection.PROJECTS)

    @staticmethod
    def _to_entity(record: dict[str, Any]) -> Project:
        return Project(
            id=record["id"],
            owner_id=record["ownerId"],
            name=record["name"],
            description=record.get("description", ""),
            icon=record.get("icon", ""),
            color=record.get("color", ""),
            created_at=from_millis(record["createdAt"]),
        )

    @staticmethod
    def _to_record(project: Project) -> dict[str, Any]:
        return {
            "id": project.id,
            "ownerId": project.owner_id,
            "name": project.name,
            "description": project.description,
            "icon": project.icon,
            "color": project.color,
            "createdAt": to_millis(project.created_at),
        }

    async def get_all(self) -> list[Project]:
        records = await self._storage.read(Collection.PROJECTS)
        return decode_records(self._key, records, self._to_entity)

    async def get_by_id(self, project_id: str) -> Project | None:
        projects = await self.get_all()
        return next((p for p in projects if p.id == project_id), None)

    async def create(self, project: Project) -> Project:
        record = self._to_record(project)
        await self._storage.mutate(Collection.PROJECTS, lambda records: records.append(record))
        return decode_record(self._key, record, self._to_entity)

    async def delete(self, project_id: str) -> bool:
        def remove(records: list[dict[str, Any]]) -> bool:
            kept = [r for r in records if r.get("id") != project_id]
            removed = len(kept) != len(records)
            records[:] = kept
            return removed

        return await self._storage.mutate(Collection.PROJECTS, remove)
