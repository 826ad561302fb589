"""Domain entity for task comments."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from avocado.domain.identifiers import new_id


@dataclass
class Comment:
    """An append-only note on a task.

    The author's name and avatar are copied at creation time so the
    comment keeps rendering the same way after the user changes.
    """

    task_id: str
    user_id: str
    user_name: str
    user_avatar: str
    content: str
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
