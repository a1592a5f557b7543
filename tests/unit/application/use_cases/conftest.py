"""Fixtures for use case tests."""

from unittest.mock import AsyncMock, Mock

import pytest


@pytest.fixture
def mock_uow():
    """Create a mock Unit of Work."""
    uow = Mock()
    uow.users = Mock()
    uow.roles = Mock()
    uow.permissions = Mock()
    uow.commit = AsyncMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=None)  # Don't suppress exceptions
    return uow


@pytest.fixture
def stored_users(mock_uow):
    """Users resolvable through ``uow.users.get_by_id``, keyed by id."""
    users = {}
    mock_uow.users.get_by_id = AsyncMock(side_effect=lambda user_id: users.get(user_id))
    return users


@pytest.fixture
def stored_roles(mock_uow):
    """Roles resolvable through ``uow.roles.get_by_id``, keyed by id."""
    roles = {}
    mock_uow.roles.get_by_id = AsyncMock(side_effect=lambda role_id: roles.get(role_id))
    return roles


@pytest.fixture
def stored_permissions(mock_uow):
    """Permissions resolvable through ``uow.permissions.get_by_id``, keyed by id."""
    permissions = {}
    mock_uow.permissions.get_by_id = AsyncMock(
        side_effect=lambda permission_id: permissions.get(permission_id)
    )
    return permissions


@pytest.fixture
def manager(make_role, make_user, stored_users):
    """Active actor holding every manage permission."""
    user = make_user(
        roles=[
            make_role(
                "SUPER_ADMIN",
                ["users:manage", "roles:manage", "permissions:manage", "users:read"],
                is_system=True,
            )
        ]
    )
    stored_users[user.id] = user
    return user


@pytest.fixture
def member(make_role, make_user, stored_users):
    """Active actor holding only standard permissions."""
    user = make_user(roles=[make_role("USER", ["posts:read", "comments:read"], is_system=True)])
    stored_users[user.id] = user
    return user
