"""Unit tests for SetUserRolesUseCase and RemoveUserRoleUseCase."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from admin_dashboard.application.dto.rbac_dto import SetUserRolesInput
from admin_dashboard.application.use_cases.rbac import (
    RemoveUserRoleUseCase,
    SetUserRolesUseCase,
)
from admin_dashboard.domain.exceptions import (
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)


@pytest.fixture
def roles(make_role, stored_roles):
    editor = make_role("EDITOR", ["posts:update"])
    moderator = make_role("MODERATOR", ["comments:delete"])
    for role in (editor, moderator):
        stored_roles[role.id] = role
    return editor, moderator


@pytest.fixture
def target(make_user, stored_users, roles):
    user = make_user(roles=[roles[0]])
    stored_users[user.id] = user
    return user


@pytest.fixture(autouse=True)
def link_writes(mock_uow):
    mock_uow.users.update = AsyncMock(side_effect=lambda user: user)
    mock_uow.users.set_roles = AsyncMock()


class TestSetUserRolesUseCase:
    """Test SetUserRolesUseCase."""

    @pytest.mark.asyncio
    async def test_set_roles(self, mock_uow, manager, target, roles):
        """Test roles are replaced and effective permissions returned."""
        editor, moderator = roles
        data = SetUserRolesInput(role_ids=[moderator.id, editor.id, moderator.id])

        result = await SetUserRolesUseCase(mock_uow).execute(target.id, data, manager.id)

        assert result.roles == ["MODERATOR", "EDITOR"]
        assert result.permissions == ["comments:delete", "posts:update"]
        mock_uow.users.set_roles.assert_called_once_with(target.id, [moderator.id, editor.id])
        mock_uow.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_role_limit(self, mock_uow, manager, target, roles):
        """Test the per-user role limit applies after deduplication."""
        data = SetUserRolesInput(role_ids=[r.id for r in roles])

        with pytest.raises(ValidationError):
            await SetUserRolesUseCase(mock_uow, max_roles_per_user=1).execute(
                target.id, data, manager.id
            )

        mock_uow.users.set_roles.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_role(self, mock_uow, manager, target, roles):
        """Test an unknown role id raises NotFoundError."""
        with pytest.raises(NotFoundError) as exc_info:
            await SetUserRolesUseCase(mock_uow).execute(
                target.id, SetUserRolesInput(role_ids=[uuid4()]), manager.id
            )

        assert exc_info.value.entity_name == "Role"

    @pytest.mark.asyncio
    async def test_unknown_user(self, mock_uow, manager, roles):
        """Test an unknown target raises NotFoundError."""
        with pytest.raises(NotFoundError) as exc_info:
            await SetUserRolesUseCase(mock_uow).execute(
                uuid4(), SetUserRolesInput(role_ids=[]), manager.id
            )

        assert exc_info.value.entity_name == "User"

    @pytest.mark.asyncio
    async def test_users_manage_suffices(
        self, mock_uow, stored_users, make_role, make_user, target, roles
    ):
        """Test users:manage alone allows role assignment."""
        actor = make_user(roles=[make_role("HR", ["users:manage"])])
        stored_users[actor.id] = actor

        result = await SetUserRolesUseCase(mock_uow).execute(
            target.id, SetUserRolesInput(role_ids=[roles[1].id]), actor.id
        )

        assert result.roles == ["MODERATOR"]

    @pytest.mark.asyncio
    async def test_denied(self, mock_uow, member, target):
        """Test an actor without user or role management is rejected."""
        with pytest.raises(UnauthorizedError) as exc_info:
            await SetUserRolesUseCase(mock_uow).execute(
                target.id, SetUserRolesInput(role_ids=[]), member.id
            )

        assert exc_info.value.message == "Permission denied: one of users:manage, roles:manage"
        mock_uow.users.set_roles.assert_not_called()


class TestRemoveUserRoleUseCase:
    """Test RemoveUserRoleUseCase."""

    @pytest.mark.asyncio
    async def test_remove_role(self, mock_uow, manager, target, roles):
        """Test the role is removed and links rewritten."""
        result = await RemoveUserRoleUseCase(mock_uow).execute(
            target.id, roles[0].id, manager.id
        )

        assert result.roles == []
        assert result.permissions == []
        mock_uow.users.set_roles.assert_called_once_with(target.id, [])
        mock_uow.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_remove_unheld_role(self, mock_uow, manager, target):
        """Test removing a role the user does not hold keeps the others."""
        result = await RemoveUserRoleUseCase(mock_uow).execute(target.id, uuid4(), manager.id)

        assert result.roles == ["EDITOR"]

    @pytest.mark.asyncio
    async def test_unknown_user(self, mock_uow, manager):
        """Test an unknown target raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await RemoveUserRoleUseCase(mock_uow).execute(uuid4(), uuid4(), manager.id)

    @pytest.mark.asyncio
    async def test_denied(self, mock_uow, member, target, roles):
        """Test an actor without user or role management is rejected."""
        with pytest.raises(UnauthorizedError):
            await RemoveUserRoleUseCase(mock_uow).execute(target.id, roles[0].id, member.id)
