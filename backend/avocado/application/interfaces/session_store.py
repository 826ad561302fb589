"""Abstract interface (port) for the persisted current-user record."""

from abc import ABC, abstractmethod

from avocado.domain.entities import User


class SessionStore(ABC):
    """Port for the single "who is signed in" record."""

    @abstractmethod
    async def load(self) -> User | None:
        """Return the persisted current user, if any."""
        ...

    @abstractmethod
    async def save(self, user: User) -> None:
        """Persist ``user`` as the current user."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Remove the current-user record."""
        ...
