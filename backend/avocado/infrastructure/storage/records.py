"""Helpers for mapping stored JSON records to domain entities."""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, TypeVar

from avocado.domain.exceptions import StorageDecodeError

E = TypeVar("E")


def to_millis(value: datetime) -> int:
    """Datetime → milliseconds since the epoch (the stored timestamp format)."""
    return int(value.timestamp() * 1000)


def from_millis(value: int) -> datetime:
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


def decode_record(key: str, record: dict[str, Any], to_entity: Callable[[dict[str, Any]], E]) -> E:
    """Map one record, turning missing fields or unknown enum values into StorageDecodeError."""
    try:
        return to_entity(record)
    except (KeyError, TypeError, ValueError) as exc:
        raise StorageDecodeError(key, f"{type(exc).__name__}: {exc}") from exc


def decode_records(
    key: str, records: list[dict[str, Any]], to_entity: Callable[[dict[str, Any]], E]
) -> list[E]:
    return [decode_record(key, record, to_entity) for record in records]


def without_none(record: dict[str, Any]) -> dict[str, Any]:
    """Drop absent optional fields so they are not stored as ``null``."""
    return {k: v for k, v in record.items() if v is not None}
