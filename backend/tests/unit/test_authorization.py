"""Unit tests for the role-based authorization predicate."""

import pytest

from avocado.domain.authorization import ROLE_PERMISSIONS, Permission, is_authorized
from avocado.domain.entities import Role, User


def _user(role: Role) -> User:
    return User(name="u", email="u@avocado.com", role=role)


def test_every_role_has_a_permission_set():
    assert set(ROLE_PERMISSIONS) == set(Role)


@pytest.mark.parametrize("permission", list(Permission))
def test_admin_holds_every_permission(permission: Permission):
    assert is_authorized(_user(Role.ADMIN), permission)


@pytest.mark.parametrize(
    ("permission", "allowed"),
    [
        (Permission.PROJECT_CREATE, False),
        (Permission.PROJECT_DELETE, False),
        (Permission.TASK_CREATE, True),
        (Permission.TASK_UPDATE, False),
        (Permission.TASK_DELETE, False),
        (Permission.COMMENT_CREATE, True),
    ],
)
def test_client_permissions(permission: Permission, allowed: bool):
    assert is_authorized(_user(Role.CLIENT), permission) is allowed


@pytest.mark.parametrize("permission", list(Permission))
def test_anonymous_holds_nothing(permission: Permission):
    assert not is_authorized(None, permission)


@pytest.mark.parametrize(
    ("email", "role"),
    [
        ("admin@avocado.com", Role.ADMIN),
        ("client@avocado.com", Role.CLIENT),
        ("BigCLIENT@corp.io", Role.CLIENT),
        ("clint@avocado.com", Role.ADMIN),
    ],
)
def test_role_for_email(email: str, role: Role):
    assert Role.for_email(email) is role
