"""Role-based authorization: the single predicate every mutation consults."""

from enum import Enum

from avocado.domain.entities.user import Role, User


class Permission(str, Enum):
    """Mutating actions guarded by role."""

    PROJECT_CREATE = "create projects"
    PROJECT_DELETE = "delete projects"
    TASK_CREATE = "create tasks"
    TASK_UPDATE = "update tasks"
    TASK_DELETE = "delete tasks"
    COMMENT_CREATE = "add comments"


ROLE_PERMISSIONS: dict[Role, frozenset[Permission]] = {
    Role.ADMIN: frozenset(Permission),
    Role.CLIENT: frozenset({Permission.TASK_CREATE, Permission.COMMENT_CREATE}),
}


def is_authorized(user: User | None, permission: Permission) -> bool:
    """Return True when ``user`` holds ``permission``. Anonymous callers hold none."""
    if user is None:
        return False
    return permission in ROLE_PERMISSIONS[user.role]
