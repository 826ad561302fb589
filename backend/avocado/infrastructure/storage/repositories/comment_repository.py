"""Concrete repository implementation for Comment backed by collection storage."""

from typing import Any

from avocado.application.interfaces import CommentRepository
from avocado.domain.entities import Comment
from avocado.infrastructure.storage.collection_storage import Collection, CollectionStorage
from avocado.infrastructure.storage.records import (
    decode_record,
    decode_records,
    from_millis,
    to_millis,
)


class StorageCommentRepository(CommentRepository):
    """Implements the CommentRepository port over the ``comments`` collection."""

    def __init__(self, storage: CollectionStorage):
        self._storage = storage
        self._key = storage.key_for(Collection.COMMENTS)

    @staticmethod
    def _to_entity(record: dict[str, Any]) -> Comment:
        return Comment(
            id=record["id"],
            task_id=record["taskId"],
            user_id=record["userId"],
            user_name=record["userName"],
            user_avatar=record.get("userAvatar", ""),
            content=record["content"],
            created_at=from_millis(record["createdAt"]),
        )

    @staticmethod
    def _to_record(comment: Comment) -> dict[str, Any]:
        return {
            "id": comment.id,
            "taskId": comment.task_id,
            "userId": comment.user_id,
            "userName": comment.user_name,
            "userAvatar": comment.user_avatar,
            "content": comment.content,
            "createdAt": to_millis(comment.created_at),
        }

    async def get_by_task(self, task_id: str) -> list[Comment]:
        records = await self._storage.read(Collection.COMMENTS)
        comments = decode_records(self._key, records, self._to_entity)
        return [c for c in comments if c.task_id == task_id]

    async def create(self, comment: Comment) -> Comment:
        record = self._to_record(comment)
        await self._storage.mutate(Collection.COMMENTS, lambda records: records.append(record))
        return decode_record(self._key, record, self._to_entity)
