"""Domain entity for users and their roles."""

from dataclasses import dataclass, field
from enum import Enum

from avocado.domain.identifiers import new_id

AVATAR_URL_TEMPLATE = "https://ui-avatars.com/api/?name={name}&background=059669&color=fff"


class Role(str, Enum):
    """Workspace roles. ADMIN manages everything; CLIENT reads and files tasks."""

    ADMIN = "ADMIN"
    CLIENT = "CLIENT"

    @classmethod
    def for_email(cls, email: str) -> "Role":
        """Derive the role from an email address.

        Any address containing ``client`` (case-insensitive) is a CLIENT.
        """
        return cls.CLIENT if "client" in email.lower() else cls.ADMIN


@dataclass
class User:
    """A workspace member, keyed by email at sign-in."""

    name: str
    email: str
    role: Role
    avatar: str = ""
    id: str = field(default_factory=new_id)

    @classmethod
    def from_email(cls, email: str) -> "User":
        """Build a first-time user: name is the local part, avatar is generated."""
        name = email.split("@")[0]
        return cls(
            name=name,
            email=email,
            role=Role.for_email(email),
            avatar=AVATAR_URL_TEMPLATE.format(name=name),
        )
