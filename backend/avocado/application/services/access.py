"""Authorization guard shared by the mutating backend services."""

from avocado.domain.authorization import Permission, is_authorized
from avocado.domain.entities import Session
from avocado.domain.exceptions import PermissionDeniedError


def require_permission(session: Session, permission: Permission) -> None:
    """Raise PermissionDeniedError unless the signed-in user holds ``permission``."""
    if not is_authorized(session.user, permission):
        role = session.user.role.value if session.user else None
        raise PermissionDeniedError(permission.value, role)
