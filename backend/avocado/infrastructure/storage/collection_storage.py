"""Collection storage: JSON-encoded collections on top of a KeyValueStore.

Storage layout (``namespace`` defaults to ``avocado``):
    <namespace>_users          JSON array of user records
    <namespace>_projects       JSON array of project records
    <namespace>_tasks          JSON array of task records
    <namespace>_comments       JSON array of comment records
    <namespace>_current_user   JSON object, absent when signed out

Every write replaces a whole collection. ``mutate`` holds a per-collection
lock across its read and write so that two gathered calls in this process
cannot interleave and drop each other's records; across processes the
last writer still wins.
"""

import asyncio
import json
import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

from avocado.application.interfaces import KeyValueStore
from avocado.domain.exceptions import StorageDecodeError

logger = logging.getLogger(__name__)

Record = dict[str, Any]
T = TypeVar("T")


class Collection(str, Enum):
    """Logical collections persisted by the mock backend."""

    USERS = "users"
    PROJECTS = "projects"
    TASKS = "tasks"
    COMMENTS = "comments"
    CURRENT_USER = "current_user"

    @property
    def is_single_record(self) -> bool:
        return self is Collection.CURRENT_USER


LIST_COLLECTIONS = tuple(c for c in Collection if not c.is_single_record)


class CollectionStorage:
    """Storage adapter and sole owner of the serialized collections."""

    def __init__(self, store: KeyValueStore, namespace: str = "avocado"):
        self._store = store
        self._namespace = namespace
        self._locks = {c: asyncio.Lock() for c in LIST_COLLECTIONS}

    def key_for(self, collection: Collection) -> str:
        """Return the persisted key, e.g. ``avocado_tasks``."""
        return f"{self._namespace}_{collection.value}"

    async def initialize(self) -> None:
        """Seed every list collection that does not exist yet with ``[]``."""
        for collection in LIST_COLLECTIONS:
            key = self.key_for(collection)
            if await self._store.get(key) is None:
                await self._store.set(key, "[]")
                logger.info("Initialized empty collection %s", key)

    # ── List collections ────────────────────────────────────────────

    async def read(self, collection: Collection) -> list[Record]:
        """Load a whole collection. A missing collection reads as empty."""
        self._require_list(collection)
        key = self.key_for(collection)
        raw = await self._store.get(key)
        if raw is None:
            return []
        data = self._decode(key, raw)
        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            raise StorageDecodeError(key, "expected a JSON array of objects")
        return data

    async def write(self, collection: Collection, records: list[Record]) -> None:
        """Replace a whole collection."""
        self._require_list(collection)
        await self._store.set(self.key_for(collection), json.dumps(records, ensure_ascii=False))

    async def mutate(self, collection: Collection, mutator: Callable[[list[Record]], T]) -> T:
        """Read, let ``mutator`` change the list in place, write it back.

        Returns whatever ``mutator`` returns. When the mutator raises,
        nothing is written.
        """
        async with self._locks[collection]:
            records = await self.read(collection)
            result = mutator(records)
            await self.write(collection, records)
            return result

    # ── Single-record collection ────────────────────────────────────

    async def read_record(self, collection: Collection) -> Record | None:
        self._require_single(collection)
        key = self.key_for(collection)
        raw = await self._store.get(key)
        if raw is None:
            return None
        data = self._decode(key, raw)
        if not isinstance(data, dict):
            raise StorageDecodeError(key, "expected a JSON object")
        return data

    async def write_record(self, collection: Collection, record: Record) -> None:
        self._require_single(collection)
        await self._store.set(self.key_for(collection), json.dumps(record, ensure_ascii=False))

    async def clear_record(self, collection: Collection) -> None:
        self._require_single(collection)
        await self._store.remove(self.key_for(collection))

    # ── Helpers ─────────────────────────────────────────────────────

    @staticmethod
    def _decode(key: str, raw: str) -> Any:
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageDecodeError(key, str(exc)) from exc

    @staticmethod
    def _require_list(collection: Collection) -> None:
        if collection.is_single_record:
            raise ValueError(f"{collection.value} holds a single record, not a list")

    @staticmethod
    def _require_single(collection: Collection) -> None:
        if not collection.is_single_record:
            raise ValueError(f"{collection.value} holds a list, not a single record")
