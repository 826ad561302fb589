from .base import Base
from .key_value_store import SQLAlchemyKeyValueStore
from .session import create_session_factory
from .models import KeyValueEntryModel

__all__ = [
    "Base",
    "SQLAlchemyKeyValueStore",
    "create_session_factory",
    "KeyValueEntryModel",
]
