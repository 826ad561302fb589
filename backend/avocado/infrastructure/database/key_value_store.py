"""Concrete KeyValueStore backed by a single SQLAlchemy table."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from avocado.application.interfaces import KeyValueStore
from avocado.infrastructure.database.models import KeyValueEntryModel

logger = logging.getLogger(__name__)


class SQLAlchemyKeyValueStore(KeyValueStore):
    """Implements the KeyValueStore port on the 'key_value_entries' table.

    Every call opens its own session and commits before returning, so a
    ``set`` replaces the whole value in one statement.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get(self, key: str) -> str | None:
        async with self._session_factory() as session:
            model = await session.get(KeyValueEntryModel, key)
            return model.value if model else None

    async def set(self, key: str, value: str) -> None:
        async with self._session_factory() as session:
            model = await session.get(KeyValueEntryModel, key)
            if model is None:
                session.add(KeyValueEntryModel(key=key, value=value))
            else:
                model.value = value
            await session.commit()
        logger.debug("Stored key %s (%d chars)", key, len(value))

    async def remove(self, key: str) -> None:
        async with self._session_factory() as session:
            model = await session.get(KeyValueEntryModel, key)
            if model is None:
                return
            await session.delete(model)
            await session.commit()
        logger.debug("Removed key %s", key)
