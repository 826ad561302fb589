"""The signed-in user pointer, held explicitly instead of as global state."""

from dataclasses import dataclass

from avocado.domain.entities.user import User


@dataclass
class Session:
    """Current-user holder shared through the application context."""

    user: User | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def start(self, user: User) -> None:
        self.user = user

    def end(self) -> None:
        self.user = None
