"""Application service (use case) for task comments."""

from avocado.application.interfaces import CommentRepository
from avocado.application.services.access import require_permission
from avocado.application.services.latency import BackendOperation, SimulatedLatency
from avocado.domain.authorization import Permission
from avocado.domain.entities import Comment, Session, User
from avocado.domain.exceptions import InvalidInputError, PermissionDeniedError


class CommentService:
    """Append-only comment threads on tasks."""

    def __init__(
        self,
        comments: CommentRepository,
        session: Session,
        latency: SimulatedLatency,
    ):
        self._comments = comments
        self._session = session
        self._latency = latency

    async def list_comments(self, task_id: str) -> list[Comment]:
        await self._latency.wait(BackendOperation.LIST_COMMENTS)
        return await self._comments.get_by_task(task_id)

    async def add_comment(self, task_id: str, author: User, content: str) -> Comment:
        require_permission(self._session, Permission.COMMENT_CREATE)
        signed_in = self._session.user
        if author.id != signed_in.id:
            raise PermissionDeniedError("comment as another user", signed_in.role.value)
        if not content.strip():
            raise InvalidInputError("content", "must not be empty")

        await self._latency.wait(BackendOperation.ADD_COMMENT)

        comment = Comment(
            task_id=task_id,
            user_id=author.id,
            user_name=author.name,
            user_avatar=author.avatar,
            content=content,
        )
        return await self._comments.create(comment)
