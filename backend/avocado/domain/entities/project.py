"""Domain entity for projects."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from avocado.domain.identifiers import new_id


@dataclass
class Project:
    """A named container of tasks, owned by the user who created it."""

    owner_id: str
    name: str
    description: str = "New Project"
    icon: str = "🥑"
    color: str = "green"
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
