"""Concrete SessionStore persisting the current user as a single record."""

from avocado.application.interfaces import SessionStore
from avocado.domain.entities import User
from avocado.infrastructure.storage.collection_storage import Collection, CollectionStorage
from avocado.infrastructure.storage.records import decode_record
from avocado.infrastructure.storage.repositories.user_repository import StorageUserRepository


class StorageSessionStore(SessionStore):
    """Implements the SessionStore port over the ``current_user`` record.

    The record is a full copy of the user, in the same shape as the
    ``users`` collection.
    """

    def __init__(self, storage: CollectionStorage):
        self._storage = storage
        self._key = storage.key_for(Collection.CURRENT_USER)

    async def load(self) -> User | None:
        record = await self._storage.read_record(Collection.CURRENT_USER)
        if record is None:
            return None
        return decode_record(self._key, record, StorageUserRepository._to_entity)

    async def save(self, user: User) -> None:
        await self._storage.write_record(
            Collection.CURRENT_USER, StorageUserRepository._to_record(user)
        )

    async def clear(self) -> None:
        await self._storage.clear_record(Collection.CURRENT_USER)
