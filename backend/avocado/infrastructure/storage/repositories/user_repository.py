"""Concrete repository implementation for User backed by collection storage."""

from typing import Any

from avocado.application.interfaces import UserRepository
from avocado.domain.entities import Role, User
from avocado.infrastructure.storage.collection_storage import Collection, CollectionStorage
from avocado.infrastructure.storage.records import decode_record


class StorageUserRepository(UserRepository):
    """Implements the UserRepository port over the ``users`` collection."""

    def __init__(self, storage: CollectionStorage):
        self._storage = storage
        self._key = storage.key_for(Collection.USERS)

    @staticmethod
    def _to_entity(record: dict[str, Any]) -> User:
        """Map stored record → domain entity."""
        return User(
            id=record["id"],
            name=record["name"],
            email=record["email"],
            avatar=record.get("avatar", ""),
            role=Role(record["role"]),
        )

    @staticmethod
    def _to_record(user: User) -> dict[str, Any]:
        """Map domain entity → stored record."""
        return {
            "id": user.id,
            "email": user.email,
            "name": user.name,
            "avatar": user.avatar,
            "role": user.role.value,
        }

    async def upsert_by_email(self, candidate: User) -> tuple[User, bool]:
        def upsert(records: list[dict[str, Any]]) -> tuple[dict[str, Any], bool]:
            for record in records:
                if record.get("email") == candidate.email:
                    record["role"] = candidate.role.value
                    return record, False
            record = self._to_record(candidate)
            records.append(record)
            return record, True

        record, created = await self._storage.mutate(Collection.USERS, upsert)
        return decode_record(self._key, record, self._to_entity), created
