"""Application service (use case) for sign-in and the current session."""

import logging

from avocado.application.interfaces import SessionStore, UserRepository
from avocado.application.services.latency import BackendOperation, SimulatedLatency
from avocado.domain.entities import Session, User
from avocado.domain.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


class AuthService:
    """Email-only sign-in for the demo workspace.

    There is no password: the first login with an email registers the
    user, later logins reuse the record and re-derive its role.
    """

    def __init__(
        self,
        users: UserRepository,
        session_store: SessionStore,
        session: Session,
        latency: SimulatedLatency,
    ):
        self._users = users
        self._session_store = session_store
        self._session = session
        self._latency = latency

    async def login(self, email: str) -> User:
        email = email.strip()
        if not email:
            raise InvalidInputError("email", "must not be empty")

        await self._latency.wait(BackendOperation.LOGIN)

        user, created = await self._users.upsert_by_email(User.from_email(email))
        if created:
            logger.info("Registered user %s as %s", user.id, user.role.value)

        await self._session_store.save(user)
        self._session.start(user)
        return user

    async def logout(self) -> None:
        await self._latency.wait(BackendOperation.LOGOUT)
        await self._session_store.clear()
        self._session.end()

    def current_user(self) -> User | None:
        """Synchronous read of the in-memory session."""
        return self._session.user

    async def restore_session(self) -> User | None:
        """Load the persisted current user into the session. Called once at startup."""
        user = await self._session_store.load()
        if user is not None:
            self._session.start(user)
            logger.info("Restored session for user %s", user.id)
        return user
