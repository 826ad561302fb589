"""Local storage infrastructure: key-value adapters and collection-backed repositories."""

from .collection_storage import Collection, CollectionStorage
from .local_json_store import LocalJsonStore

__all__ = ["Collection", "CollectionStorage", "LocalJsonStore"]
