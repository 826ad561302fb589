"""Abstract repository interface (port) for Comment persistence."""

from abc import ABC, abstractmethod

from avocado.domain.entities import Comment


class CommentRepository(ABC):
    """Port for append-only comment persistence."""

    @abstractmethod
    async def get_by_task(self, task_id: str) -> list[Comment]:
        """Return the comments of one task in storage order."""
        ...

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Append a new comment and return it."""
        ...
