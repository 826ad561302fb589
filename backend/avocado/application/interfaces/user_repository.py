"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod

from avocado.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence, implemented in the infrastructure layer."""

    @abstractmethod
    async def upsert_by_email(self, candidate: User) -> tuple[User, bool]:
        """Register ``candidate`` or refresh the role of the user with its email.

        Lookup and write happen as one step, so concurrent first logins
        with the same email end up with a single user. Returns the stored
        user and whether it was newly created.
        """
        ...
