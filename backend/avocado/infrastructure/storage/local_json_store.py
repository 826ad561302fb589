"""Local filesystem key-value store: one JSON document per key.

Storage layout:
    <storage_dir>/<key>.json        raw value exactly as handed to ``set``

File reads and writes run in a worker thread so they do not block the
event loop.
"""

import asyncio
import logging
import re
from pathlib import Path

from avocado.application.interfaces import KeyValueStore

logger = logging.getLogger(__name__)


def _sanitise(name: str, max_len: int = 120) -> str:
    """Replace non-word characters with underscores and truncate."""
    return re.sub(r"[^\w\-]", "_", name)[:max_len].strip("_") or "unnamed"


def _read(path: Path) -> str | None:
    if not path.exists():
        return None
    return path.read_text(encoding="utf-8")


class LocalJsonStore(KeyValueStore):
    """Infrastructure adapter for file-per-key storage on local disk."""

    def __init__(self, storage_dir: str):
        self._storage_dir = Path(storage_dir)
        self._storage_dir.mkdir(parents=True, exist_ok=True)

    def _path_for(self, key: str) -> Path:
        return self._storage_dir / f"{_sanitise(key)}.json"

    async def get(self, key: str) -> str | None:
        return await asyncio.to_thread(_read, self._path_for(key))

    async def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        await asyncio.to_thread(path.write_text, value, encoding="utf-8")
        logger.debug("Stored key %s at %s (%d chars)", key, path, len(value))

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self._path_for(key).unlink, missing_ok=True)
        logger.debug("Removed key %s", key)
